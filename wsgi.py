"""
WSGI entry point for the Guess The Word application.
Used for production deployment with Gunicorn (see gunicorn.conf.py).
"""

from app import create_app
from config_factory import get_config

app, socketio = create_app()
application = app

if __name__ == "__main__":
    # For development without Gunicorn
    app_config = get_config()
    socketio.run(app, host=app_config.host, port=app_config.port, debug=app_config.debug)
