"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .user import User, UserStats, GameRecord

__all__ = ['User', 'UserStats', 'GameRecord']
