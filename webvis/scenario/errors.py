"""Scenario load errors.

Fatal problems raise a ``ScenarioError`` subclass and abort the load.
Recognition-table misses are ``ScenarioWarning`` subclasses: logged and
collected on the Scenario, never raised.
"""

from __future__ import annotations


class ScenarioError(ValueError):
    """Base class for fatal scenario parse errors."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MalformedHeader(ScenarioError):
    pass


class UnresolvedVisgroupReference(ScenarioError):
    pass


class EmptyModuleBlock(ScenarioError):
    pass


class MalformedField(ScenarioError):
    pass


class ScenarioWarning(UserWarning):
    """Base class for recoverable scenario diagnostics."""


class UnknownShapeType(ScenarioWarning):
    pass


class UnrecognizedDirectionCode(ScenarioWarning):
    pass


class ScenarioSourceError(OSError):
    """Scenario text could not be retrieved (distinct from parse errors)."""
