"""
Gunicorn configuration for the Guess The Word application.
Runs a single eventlet worker so every game countdown lives in one process.
"""

import os
import sys
import logging
import yaml
from src.content_manager import ContentManager, ContentValidationError
from config_factory import load_config

# Load configuration (renamed to avoid conflicts with gunicorn's internal 'config')
app_config = load_config()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _words_path():
    if not app_config.words_file or os.path.isabs(app_config.words_file):
        return app_config.words_file
    return os.path.join(BASE_DIR, app_config.words_file)


def on_starting(server):
    """
    Server hook that runs when the master process is starting.
    Validates the words YAML file before the worker is forked, so a broken
    vocabulary stops the server instead of failing every start_game.
    """
    logger = logging.getLogger(__name__)
    words_path = _words_path()
    if not words_path:
        logger.info("No words file configured, using the built-in vocabulary")
        return

    logger.info(f"Validating {words_path} before starting workers...")
    try:
        content_manager = ContentManager(words_path)
        content_manager.load()
        logger.info(f"Vocabulary ready with {content_manager.get_word_count()} words")
    except (FileNotFoundError, yaml.YAMLError, ContentValidationError) as e:
        logger.critical(f"FATAL: Word file validation failed. Server shutting down. Error: {e}")
        sys.exit(1)


def worker_exit(server, worker):
    """Running games live in the worker and end with it."""
    server.log.info(f"Worker {worker.pid} exiting")


# Server socket
bind = f"{app_config.host}:{app_config.port}"

# Sessions and their countdowns live in worker memory: exactly one worker
workers = 1
worker_class = "eventlet"
worker_connections = app_config.worker_connections
timeout = app_config.timeout
keepalive = app_config.keepalive

# No max_requests: a recycled worker would drop every running game

# Logging
accesslog = "-"
errorlog = "-"
loglevel = app_config.log_level

# Process naming
proc_name = "guesstheword"

preload_app = False  # each worker builds its own SocketIO instance
daemon = False
