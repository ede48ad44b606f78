"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories and implement business rules.

Usage:
    from notes_app.services.base import BaseService

    class NoteService(BaseService):
        def __init__(self, repo: NoteRepository) -> None:
            super().__init__()
            self.repo = repo
"""

from typing import Any

from notes_app.core.exceptions import ValidationError
from notes_app.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides:
    - Logging context
    - Common validation patterns
    """

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__module__)

    def _validate_choice(
        self,
        value: str,
        field_name: str,
        allowed: frozenset[str],
    ) -> None:
        """
        Validate that a value is one of an allowed set.

        Args:
            value: Value to check
            field_name: Name of the field for error messages
            allowed: Accepted values

        Raises:
            ValidationError: If value is not allowed
        """
        if value not in allowed:
            raise ValidationError(
                f"Invalid {field_name}: {value!r}",
                details={field_name: f"Must be one of {sorted(allowed)}"},
            )

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
