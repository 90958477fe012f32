"""
Shared test fixtures.
"""

import pytest


def _track_gpx() -> bytes:
    # 10 points heading north along lon 7.9, about 1 km in total
    elevations = [1000, 1050, 1100, 1150, 1200, 1150, 1100, 1050, 1000, 950]
    points = "\n".join(
        f'<trkpt lat="{46.0 + i * 0.001:.3f}" lon="7.9"><ele>{ele}</ele></trkpt>'
        for i, ele in enumerate(elevations)
    )
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <name>Test Ridge</name>
    <trkseg>
{points}
    </trkseg>
  </trk>
</gpx>
""".encode("utf-8")


@pytest.fixture
def sample_gpx() -> bytes:
    """Point-to-point track: +200 m / -250 m, start at (46.0, 7.9)."""
    return _track_gpx()


@pytest.fixture
def route_gpx() -> bytes:
    """GPX with a named route and no tracks."""
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">
  <metadata><name>Hut Walk</name></metadata>
  <rte>
    <rtept lat="46.000" lon="7.900"><ele>1500</ele></rtept>
    <rtept lat="46.005" lon="7.900"><ele>1700</ele></rtept>
    <rtept lat="46.0001" lon="7.900"><ele>1500</ele></rtept>
  </rte>
</gpx>
"""


@pytest.fixture
def empty_gpx() -> bytes:
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">
</gpx>
"""
