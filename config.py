import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Flask application configuration."""

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Authentication
    API_KEY = os.environ.get('API_KEY')  # None means no auth required

    # CORS
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Default machine settings for new sessions (mm, mm/min)
    DEFAULT_FEED_RATE = float(os.environ.get('DEFAULT_FEED_RATE', 800))
    DEFAULT_SAFE_HEIGHT = float(os.environ.get('DEFAULT_SAFE_HEIGHT', 5))
    DEFAULT_CUT_DEPTH = float(os.environ.get('DEFAULT_CUT_DEPTH', 2))
    DEFAULT_TOOL_DIAMETER = float(os.environ.get('DEFAULT_TOOL_DIAMETER', 3.175))

    # Program download
    PROGRAM_FILENAME = os.environ.get('PROGRAM_FILENAME', 'toolpath.gcode')

    # Generative-AI collaborators: callables injected by the host, None = not configured
    SHAPE_GENERATOR = None
    PROGRAM_EXPLAINER = None
