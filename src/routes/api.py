"""
REST API endpoints for the Guess The Word application.
"""

import logging
from flask import Blueprint, jsonify

logger = logging.getLogger(__name__)


def create_api_blueprint(services):
    """Create and configure the API Blueprint with service dependencies."""
    session_service = services['session_service']
    content_manager = services['content_manager']

    api = Blueprint('api', __name__)

    @api.route('/api/health')
    def health():
        """Report that the server is up and how many games it hosts."""
        return jsonify({
            'status': 'ok',
            'active_sessions': session_service.get_sessions_count(),
            'word_count': content_manager.get_word_count()
        })

    return api
