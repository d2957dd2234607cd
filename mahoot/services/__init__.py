"""
Services Package

Contains all business logic and service classes.
"""

from .account_registry import AccountRegistry
from .persistent_store import PersistentStore
from .stats_aggregator import StatsAggregator
from .user_service import UserService, get_user_service, initialize_user_service

__all__ = [
    'AccountRegistry', 'PersistentStore', 'StatsAggregator',
    'UserService', 'get_user_service', 'initialize_user_service'
]
