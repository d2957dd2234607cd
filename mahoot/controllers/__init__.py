"""
Controllers Package

Flask blueprints exposing the user service over HTTP.
"""

from .auth_controller import auth_bp
from .user_controller import user_bp
from .admin_controller import admin_bp, health_bp

__all__ = ['auth_bp', 'user_bp', 'admin_bp', 'health_bp']
