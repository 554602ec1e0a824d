import pytest
from pathlib import Path


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def mystic_path(test_assets_dir) -> Path:
    """Return the path to the Mystic River Basin sample document."""
    return test_assets_dir / 'mystic_basin_trail.gpx'


@pytest.fixture
def mystic_text(mystic_path) -> str:
    """Return the sample document text with its CRLF line endings intact."""
    return mystic_path.read_bytes().decode('utf-8')
