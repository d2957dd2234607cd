"""
Controller Decorators

Shared plumbing for the HTTP endpoints: service lookup, response logging
and the 500 fallback for unexpected exceptions.
"""

from functools import wraps
from flask import request, jsonify

from .server_logger import server_logger


def user_service_endpoint(action: str):
    """
    Decorator for endpoints that call the user service.

    The wrapped view receives the service as its first argument and returns
    ``(result, status_code)``. The result is logged and serialized to JSON;
    any unexpected exception is logged and turned into a 500 response.

    Args:
        action: Operation name used in log entries
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            from ..services.user_service import get_user_service

            try:
                user_service = get_user_service()
                if not user_service:
                    error_response = {
                        'success': False,
                        'error': 'User service unavailable'
                    }
                    server_logger.log_server_response(request, action, False, error_response, 500)
                    return jsonify(error_response), 500

                result, status_code = f(user_service, *args, **kwargs)

                server_logger.log_server_response(request, action, result.get('success', False), result, status_code)
                return jsonify(result), status_code

            except Exception as e:
                server_logger.log_error(request, e, action)
                error_response = {
                    'success': False,
                    'error': 'Internal server error',
                    'message': str(e)
                }
                server_logger.log_server_response(request, action, False, error_response, 500)
                return jsonify(error_response), 500

        return decorated_function
    return decorator


def json_body() -> dict:
    """Parsed JSON request body, or an empty dict when absent or invalid."""
    data = request.get_json(silent=True)
    return data if data is not None else {}
