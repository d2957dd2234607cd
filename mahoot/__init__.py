"""
Mahoot Server Application Package

Account and gameplay-history store for the Mahoot quiz application,
exposed as a JSON HTTP API.
"""

from flask import Flask, jsonify, request
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Loads the user collection from ``USERS_FILE`` into the global user
    service, so each call starts from what is on disk.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    from .services.user_service import initialize_user_service
    initialize_user_service(app.config['USERS_FILE'], app.config['PASSWORD_HASH_SCHEME'])

    # Register blueprints
    from .controllers.auth_controller import auth_bp
    from .controllers.user_controller import user_bp
    from .controllers.admin_controller import admin_bp, health_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(user_bp, url_prefix='/api/users')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(health_bp, url_prefix='/api')

    register_error_handlers(app)

    return app


def register_error_handlers(app):
    """JSON responses for unknown endpoints and unhandled errors."""
    from .utils.server_logger import server_logger

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'success': False,
            'error': 'Endpoint not found',
            'path': request.path,
            'method': request.method
        }), 404

    @app.errorhandler(500)
    def internal_error(error):
        original = getattr(error, 'original_exception', None) or error
        server_logger.log_error(request, original, 'unhandled')
        return jsonify({
            'success': False,
            'error': 'Internal server error',
            'message': str(original)
        }), 500
