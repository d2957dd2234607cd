"""
Admin Controller

Handles user administration endpoints and the health check.
"""

from flask import Blueprint, request
from ..utils.decorators import user_service_endpoint
from ..utils.helpers import utc_timestamp
from ..utils.server_logger import server_logger

admin_bp = Blueprint('admin', __name__)
health_bp = Blueprint('health', __name__)


@admin_bp.route('/users', methods=['GET'])
@user_service_endpoint('list_users')
def list_users(user_service):
    """Get all users with limited info."""
    server_logger.log_user_action(request, 'list_users')

    return user_service.get_all_users(), 200


@admin_bp.route('/users/<int:user_id>', methods=['DELETE'])
@user_service_endpoint('delete_user')
def delete_user(user_service, user_id):
    """Delete a user."""
    server_logger.log_user_action(request, 'delete_user', user_id=user_id)

    result = user_service.delete_user(user_id)
    return result, 200 if result['success'] else 404


@admin_bp.route('/reset', methods=['POST'])
@user_service_endpoint('reset')
def reset(user_service):
    """Remove every user. Cannot be undone."""
    server_logger.log_user_action(request, 'reset')
    server_logger.logger.warning("Admin reset requested: all users will be removed")

    return user_service.clear_all_users(), 200


@health_bp.route('/health', methods=['GET'])
@user_service_endpoint('health')
def health(user_service):
    """Report that the server is up and how many users it holds."""
    return {
        'success': True,
        'message': 'Mahoot Backend Server is running',
        'timestamp': utc_timestamp(),
        'usersCount': user_service.user_count()
    }, 200
