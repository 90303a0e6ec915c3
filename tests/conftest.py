import pytest
from pathlib import Path

from metar_taf.metar.parser import MetarParser


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def metar_samples(test_assets_dir) -> list[str]:
    """Return the sample reports, one per non-blank line."""
    with open(test_assets_dir / 'metar_samples.txt') as f:
        return [line.strip() for line in f if line.strip()]


@pytest.fixture
def parser() -> MetarParser:
    """Parser requiring every singular field."""
    return MetarParser()


@pytest.fixture
def lenient_parser() -> MetarParser:
    """Parser that only requires the header."""
    return MetarParser(required_fields=())
