"""
Utilities Package

Contains utility functions and helper modules.
"""

from .helpers import get_user_identity, utc_timestamp, IdGenerator
from .server_logger import server_logger

__all__ = ['get_user_identity', 'utc_timestamp', 'IdGenerator', 'server_logger']
