"""
Core error definitions for the Guess The Word game

Provides error codes and validation exception that don't depend on other services.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorCode(Enum):
    """Standardized error codes for the application."""

    # Request Data Errors
    INVALID_DATA = "INVALID_DATA"

    # Game Session Errors
    NO_ACTIVE_GAME = "NO_ACTIVE_GAME"
    GAME_ALREADY_FINISHED = "GAME_ALREADY_FINISHED"
    GAME_NOT_FINISHED = "GAME_NOT_FINISHED"
    START_GAME_FAILED = "START_GAME_FAILED"

    # Score Screen Errors
    NO_SCORE_AVAILABLE = "NO_SCORE_AVAILABLE"

    # System Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ValidationError(Exception):
    """Custom exception for validation errors."""

    def __init__(self, code: ErrorCode, message: str, details: Optional[Dict] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)
