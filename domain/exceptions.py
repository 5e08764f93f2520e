"""
Error taxonomy for the meal planner domain.

Every error raised by the core derives from ``MealPlannerError`` so callers
(the interactive shell, the HTTP API) can report it without terminating.
"""


class MealPlannerError(Exception):
    """Base class for all meal planner errors."""


class ValidationError(MealPlannerError, ValueError):
    """Malformed category, name or ingredient list, or a duplicate name."""


class NotFoundError(MealPlannerError, LookupError):
    """A meal lookup by id or name found nothing."""


class NotPlannedError(MealPlannerError):
    """A shopping list was requested before any plan was made."""

    def __init__(self, message: str = "Plan your meals first."):
        super().__init__(message)


class StorageError(MealPlannerError, OSError):
    """The database or the target file could not be written or read."""
