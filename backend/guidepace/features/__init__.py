"""
Feature modules for GuidePace.

Each feature is a self-contained module with:
- schemas.py - Pydantic schemas
- service.py / parser.py - Business logic
- calculators/ - Calculation logic (optional)
"""
