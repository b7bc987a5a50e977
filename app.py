"""
Guess The Word - a party game where one player guesses the words the others act out.
Main Flask application entry point focusing on app creation, dependency injection, and service wiring.
"""

from flask import Flask
from flask_socketio import SocketIO
import os
import logging
import atexit
import sys
import yaml

from src.content_manager import ContentValidationError
from container import configure_container
from config_factory import AppConfig, ConfigurationFactory, load_config
from src.routes.api import create_api_blueprint
from src.handlers.socket_handlers import register_socket_handlers

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _resolve_words_file(words_file: str) -> str:
    if not words_file or os.path.isabs(words_file):
        return words_file
    return os.path.join(BASE_DIR, words_file)


def create_app(app_config: AppConfig = None, scheduler=None):
    """
    Create the Flask app and its SocketIO instance with all services wired.

    Args:
        app_config: Configuration to use, loaded from the environment when omitted
        scheduler: Optional scheduler for the countdown ticks (tests use a manual one)

    Returns:
        Tuple of (app, socketio)
    """
    config_factory = ConfigurationFactory()
    if app_config is None:
        app_config = load_config()
    else:
        config_factory.use_config(app_config)

    app = Flask(__name__)
    app.config.update(config_factory.get_flask_config())

    # In production, restrict to explicitly allowed origins from SOCKETIO_CORS_ALLOWED_ORIGINS (comma-separated)
    if app_config.is_production:
        allowed_origins_env = os.environ.get('SOCKETIO_CORS_ALLOWED_ORIGINS', '')
        cors_allowed = [o.strip() for o in allowed_origins_env.split(',') if o.strip()]
        socketio = SocketIO(app, cors_allowed_origins=cors_allowed or [], async_mode=app_config.async_mode)
    else:
        # Development/testing: permissive for local workflows
        socketio = SocketIO(app, cors_allowed_origins="*", async_mode=app_config.async_mode)

    container_config = config_factory.to_dict()
    container_config['app_config'] = app_config
    container_config['words_file'] = _resolve_words_file(app_config.words_file)
    container = configure_container(socketio=socketio, config=container_config, scheduler=scheduler)

    # Load words on startup
    content_manager = container.get('ContentManager')
    try:
        content_manager.load()
        logger.info(f"Loaded {content_manager.get_word_count()} words")
    except (FileNotFoundError, yaml.YAMLError, ContentValidationError) as e:
        logger.critical(f"FATAL: Word file validation failed, which is critical for game play. Server shutting down. Error: {e}")
        sys.exit(1)

    # Register REST endpoints
    app.register_blueprint(create_api_blueprint({
        'session_service': container.get('SessionService'),
        'content_manager': content_manager
    }))

    # Register Socket.IO handlers
    register_socket_handlers(socketio)

    session_service = container.get('SessionService')

    def cleanup_on_exit():
        """Close every game so no countdown outlives the server."""
        logger.info("Shutting down Guess The Word server...")
        session_service.close_all()

    atexit.register(cleanup_on_exit)
    app.extensions['guesstheword_cleanup'] = cleanup_on_exit

    return app, socketio


if __name__ == '__main__':
    app, socketio = create_app()
    app_config = ConfigurationFactory().get_config()

    logger.info(f"Starting Guess The Word server on {app_config.host}:{app_config.port}")
    try:
        socketio.run(app, host=app_config.host, port=app_config.port, debug=app_config.debug)
    except KeyboardInterrupt:
        logger.info("Received interrupt signal")
    finally:
        app.extensions['guesstheword_cleanup']()
