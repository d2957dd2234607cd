"""
Server Logger Module for Mahoot Server

This module provides structured logging for user actions, server responses,
store events and errors.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity


# Keys whose values must never reach the log files
SENSITIVE_KEYS = {'password', 'passwordConfirm', 'password_confirm', 'newPassword'}


class ServerLogger:
    """
    Centralized logging system for the Mahoot server.

    Features:
    - User action tracking with IP identification
    - Server response logging with sensitive fields masked
    - Store events (load, save, failures)
    - JSON structured log entries for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main server logger with file and console handlers."""
        logger = logging.getLogger('mahoot_server')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        log_file = self.log_dir / f"server_log_{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Only warnings and errors go to the console
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Optional[Dict[str, str]],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, request, action: str, **kwargs):
        """
        Log an incoming user action.

        Args:
            request: Flask request object
            action: Name of the operation (e.g. 'register', 'add_game_history')
            **kwargs: Additional details to log
        """
        details = {
            'method': request.method,
            'path': request.path,
            **self._sanitize(kwargs)
        }

        log_message = self._create_log_entry('USER_ACTION', action, get_user_identity(request), details)
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            status_code: Optional[int] = None):
        """
        Log the response returned for an action.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            status_code: HTTP status code of the response
        """
        details = {
            'success': success,
            'status_code': status_code,
            'response_data': self._sanitize(response_data)
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, get_user_identity(request), details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.warning(log_message)

    def log_store_event(self, event: str, error: Optional[Exception] = None, **kwargs):
        """
        Log persistence events. Events carrying an error are logged at ERROR.

        Args:
            event: Type of store event (e.g. 'load', 'save_failed')
            error: Exception raised by the store, if any
            **kwargs: Additional details to log
        """
        details = dict(kwargs)
        if error is not None:
            details['error_type'] = type(error).__name__
            details['error_message'] = str(error)

        log_message = self._create_log_entry('STORE_EVENT', event, None, details)
        if error is not None:
            self.logger.error(log_message)
        else:
            self.logger.info(log_message)

    def log_error(self, request, error: Exception, action: str):
        """
        Log an unhandled error with request context.

        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, get_user_identity(request), details)
        self.logger.error(log_message)

    def _sanitize(self, data: Any) -> Any:
        """Mask sensitive fields in (possibly nested) response data."""
        if isinstance(data, dict):
            return {
                key: '***' if key in SENSITIVE_KEYS else self._sanitize(value)
                for key, value in data.items()
            }
        if isinstance(data, list):
            return [self._sanitize(item) for item in data]
        return data


# Global logger instance
server_logger = ServerLogger(Config.LOG_DIR, Config.LOG_LEVEL)
