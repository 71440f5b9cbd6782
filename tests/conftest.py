"""Shared test fixtures for radial diagram tests."""
import pytest
from diagram.config import create_config
from diagram.layout import compose_layout


@pytest.fixture(scope="session")
def sample_data():
    """Two-segment JSON-style config (camelCase keys, as written by the web tool)."""
    return {
        "size": 800,
        "startAngle": -90,
        "center": {"label": "Test Hub", "radius": 100, "color": "#702082"},
        "scale": {"min": 1, "max": 5, "rings": 5},
        "segments": [
            {"name": "Segment One", "color": "#E6A817",
             "facets": [{"name": "Facet A", "score": 3}, {"name": "Facet B", "score": 4}]},
            {"name": "Segment Two", "color": "#C41E3A",
             "facets": [{"name": "Facet C", "score": 2}]},
        ],
    }


@pytest.fixture(scope="session")
def config(sample_data):
    """DiagramConfig with defaults filled in."""
    return create_config(sample_data)


@pytest.fixture(scope="session")
def plan(config):
    """LayoutPlan for the sample config."""
    return compose_layout(config)


@pytest.fixture(scope="session")
def single_facet_config():
    """800px, hub 60, 1-5 scale, one segment with one facet scored 3."""
    return create_config({
        "size": 800, "startAngle": -90,
        "center": {"label": "Core", "radius": 60, "color": "#8B3A62"},
        "scale": {"min": 1, "max": 5, "rings": 5},
        "segments": [{"name": "Only", "color": "#336699",
                      "facets": [{"name": "F", "score": 3}]}],
    })
