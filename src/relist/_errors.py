"""Relist error hierarchy.

All relist-specific errors inherit from RelistError for easy catching.
Contract violations also inherit from the matching builtin so callers
that already handle ``IndexError`` / ``ValueError`` keep working.
"""


class RelistError(Exception):
    """Base error for all relist operations."""


class IndexOutOfRange(RelistError, IndexError):
    """A primitive was called with a position outside the current bounds."""

    def __init__(self, operation: str, position: int, size: int, *, inclusive: bool = False) -> None:
        upper = "]" if inclusive else ")"
        super().__init__(
            f"{operation}: position {position} out of range [0, {size}{upper}"
        )
        self.operation = operation
        self.position = position
        self.size = size


class InvalidArgument(RelistError, ValueError):
    """A bulk operation was called with an unacceptable argument."""


class ShrinkingReplacement(InvalidArgument):
    """insert_ignore_items() got fewer items than the store currently holds."""

    def __init__(self, current_size: int, replacement_size: int) -> None:
        super().__init__(
            "insert_ignore_items: shrinking replacement not permitted "
            f"({replacement_size} < {current_size})"
        )
        self.current_size = current_size
        self.replacement_size = replacement_size


class ConfigError(RelistError):
    """Invalid or missing configuration."""


class BindingError(RelistError):
    """Invalid view-binding registration."""
