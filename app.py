import logging

from flask import Flask
from flask_cors import CORS

from config import Config
from web.services.session_service import SessionStore


def create_app(config_class=Config):
    """Application factory for creating Flask app instances."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    # In-memory editing sessions, one store per app instance
    app.extensions['edit_sessions'] = SessionStore()

    CORS(app, resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS', '*')}})

    # Import and register blueprints inside factory to avoid circular imports
    from web.routes.main import main_bp
    from web.routes.api import api_bp
    from web.routes.sessions import sessions_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(sessions_bp, url_prefix='/api/sessions')

    return app


# Create app instance for gunicorn and flask CLI
app = create_app()

if __name__ == '__main__':
    app.run(debug=True, port=5001)
