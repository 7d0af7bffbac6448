"""exceptions

Common exception classes used by the acceptance test actions.

Defines a common base exception `AcceptanceActionsError` and
subclasses for the two failure kinds the actions raise: an element
lookup that matched nothing, and a select widget call that names
neither an id prefix nor a label.
"""

from __future__ import annotations


class AcceptanceActionsError(Exception):
    """Base exception for the entire library."""


class ElementNotFoundError(AcceptanceActionsError, LookupError):
    """A locator matched nothing in the current page."""

    def __init__(self, message: str, selector: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.selector = selector


class SelectSourceMissingError(AcceptanceActionsError, ValueError):
    """Neither an id prefix nor a label was supplied for a select widget."""

    def __init__(self) -> None:
        super().__init__("You must supply either a label or an id_prefix")
