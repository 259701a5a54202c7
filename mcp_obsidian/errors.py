"""Exceptions raised by the Obsidian MCP server."""

from __future__ import annotations

from typing import Optional, Sequence


class ObsidianError(Exception):
    """Base exception for every error raised by this package."""


class ObsidianAPIError(ObsidianError):
    """The Local REST API answered with an error status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: Optional[int] = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        if error_code is not None:
            super().__init__(f"API error {error_code}: {message}")
        else:
            super().__init__(f"HTTP error {status_code}: {message}")


class TargetNotFoundError(ObsidianError, ValueError):
    """A heading, path or block target could not be located in a note."""

    def __init__(self, target: str, available: Sequence[str], filepath: str = "") -> None:
        self.target = target
        self.available = list(available)
        self.filepath = filepath
        location = f" in '{filepath}'" if filepath else ""
        super().__init__(
            f"Target '{target}' not found{location}. Available headings: {self.available}"
        )


class InvalidOperationError(ObsidianError, ValueError):
    """Patch operation is not one of append, prepend or replace."""

    def __init__(self, operation: str, valid: Sequence[str]) -> None:
        self.operation = operation
        super().__init__(
            f"Invalid operation '{operation}'. Must be one of: {', '.join(valid)}"
        )


class InvalidTargetTypeError(ObsidianError, ValueError):
    """Patch target type is not one of heading, block or frontmatter."""

    def __init__(self, target_type: str, valid: Sequence[str]) -> None:
        self.target_type = target_type
        super().__init__(
            f"Invalid target type '{target_type}'. Must be one of: {', '.join(valid)}"
        )
