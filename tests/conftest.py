import pytest

from taipower_grid.conversion import GeodeticProjector, PlanarConverter, RegionDispatcher
from taipower_grid.parsing import CoordinateParser


@pytest.fixture
def parser() -> CoordinateParser:
    return CoordinateParser()


@pytest.fixture
def converter() -> PlanarConverter:
    return PlanarConverter()


@pytest.fixture
def projector() -> GeodeticProjector:
    return GeodeticProjector()


@pytest.fixture
def dispatcher() -> RegionDispatcher:
    return RegionDispatcher()


@pytest.fixture
def parser_config_file(tmp_path):
    """Write a parser YAML config and return its path."""
    def _write(content: str):
        path = tmp_path / "parser.yaml"
        path.write_text(content)
        return path
    return _write
