"""
User Controller

Handles user lookup, stats, quiz and game history endpoints.
"""

from flask import Blueprint, request
from ..utils.decorators import user_service_endpoint, json_body
from ..utils.server_logger import server_logger

user_bp = Blueprint('users', __name__)


@user_bp.route('/<int:user_id>', methods=['GET'])
@user_service_endpoint('get_user')
def get_user(user_service, user_id):
    """Get user by ID."""
    server_logger.log_user_action(request, 'get_user', user_id=user_id)

    result = user_service.get_user(user_id)
    return result, 200 if result['success'] else 404


@user_bp.route('/email/<email>', methods=['GET'])
@user_service_endpoint('get_user_by_email')
def get_user_by_email(user_service, email):
    """Get user by email."""
    server_logger.log_user_action(request, 'get_user_by_email', email=email)

    result = user_service.get_user_by_email(email)
    return result, 200 if result['success'] else 404


@user_bp.route('/<int:user_id>/stats', methods=['PUT'])
@user_service_endpoint('update_stats')
def update_stats(user_service, user_id):
    """Overwrite cached stats fields for a user."""
    stats = json_body()

    server_logger.log_user_action(request, 'update_stats', user_id=user_id, stats=stats)

    result = user_service.update_stats(user_id, stats)
    return result, 200 if result['success'] else 400


@user_bp.route('/<int:user_id>/quiz', methods=['POST'])
@user_service_endpoint('add_quiz')
def add_quiz(user_service, user_id):
    """Record a quiz created by the user."""
    data = json_body()
    quiz_id = data.get('quizId') if isinstance(data, dict) else None

    server_logger.log_user_action(request, 'add_quiz', user_id=user_id, quiz_id=quiz_id)

    result = user_service.add_quiz(user_id, quiz_id)
    return result, 200 if result['success'] else 400


@user_bp.route('/<int:user_id>/gamehistory', methods=['POST'])
@user_service_endpoint('add_game_history')
def add_game_history(user_service, user_id):
    """Append a completed game to the user's history."""
    game_data = json_body()

    server_logger.log_user_action(request, 'add_game_history', user_id=user_id, game=game_data)

    result = user_service.add_game_history(user_id, game_data)
    return result, 200 if result['success'] else 400
