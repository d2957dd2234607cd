"""
Configuration Package

Contains the Flask application configuration (environment-based).
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config

__all__ = ['Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config']
