"""
Authentication Controller

Handles registration and login endpoints.
"""

from flask import Blueprint, request
from ..utils.decorators import user_service_endpoint, json_body
from ..utils.server_logger import server_logger

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/register', methods=['POST'])
@user_service_endpoint('register')
def register(user_service):
    """Register a new user."""
    data = json_body()
    if not isinstance(data, dict):
        return {'success': False, 'error': 'Request body must be an object'}, 400

    username = data.get('username')
    email = data.get('email')
    password = data.get('password')

    server_logger.log_user_action(request, 'register', username=username, email=email)

    if password != data.get('passwordConfirm'):
        return {'success': False, 'error': 'Passwords do not match'}, 400

    result = user_service.register(username, email, password)
    return result, 201 if result['success'] else 400


@auth_bp.route('/login', methods=['POST'])
@user_service_endpoint('login')
def login(user_service):
    """Login a user with email and password."""
    data = json_body()
    if not isinstance(data, dict):
        return {'success': False, 'error': 'Request body must be an object'}, 400

    email = data.get('email')
    password = data.get('password')

    server_logger.log_user_action(request, 'login', email=email)

    if not email or not password:
        return {'success': False, 'error': 'Email and password required'}, 400

    result = user_service.login(email, password)
    return result, 200 if result['success'] else 401
