"""Test configuration and fixtures."""
import pytest

from app import create_app
from shapecam.models import Circle, MachineSettings, Rectangle, Scene, Text


class TestConfig:
    """Test configuration."""
    TESTING = True
    LOG_LEVEL = 'DEBUG'
    API_KEY = None  # Disable auth for tests
    CORS_ORIGINS = '*'
    DEFAULT_FEED_RATE = 800.0
    DEFAULT_SAFE_HEIGHT = 5.0
    DEFAULT_CUT_DEPTH = 2.0
    DEFAULT_TOOL_DIAMETER = 3.175
    PROGRAM_FILENAME = 'toolpath.gcode'
    SHAPE_GENERATOR = None
    PROGRAM_EXPLAINER = None


@pytest.fixture
def app():
    """Create and configure a test application instance."""
    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def machine_settings():
    """Default machine settings (800 mm/min, 5 mm safe Z, 2 mm deep, 1/8\" tool)."""
    return MachineSettings(feed_rate=800, safe_height=5, cut_depth=2, tool_diameter=3.175)


@pytest.fixture
def sample_rectangle():
    return Rectangle(id='rect1', x=50, y=50, width=50, height=50)


@pytest.fixture
def sample_circle():
    return Circle(id='circle1', x=100, y=100, radius=25)


@pytest.fixture
def sample_text():
    return Text(id='text1', x=50, y=150, text='CNC', font_size=24)


@pytest.fixture
def sample_scene(sample_rectangle, sample_circle, sample_text):
    """Scene with one of each shape, in insertion order."""
    return Scene([sample_rectangle, sample_circle, sample_text])


@pytest.fixture
def sample_shape_dicts():
    """Editor-style shape dicts."""
    return [
        {'id': 'rect1', 'type': 'RECTANGLE', 'x': 50, 'y': 50, 'width': 50, 'height': 50},
        {'id': 'circle1', 'type': 'CIRCLE', 'x': 100, 'y': 100, 'radius': 25},
    ]
