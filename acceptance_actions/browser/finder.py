"""browser.finder

Element lookup with a caller-supplied failure message.

Playwright reports a locator that matches nothing as a ``TimeoutError`` once
its wait expires. The actions want a readable explanation instead
("no select box with id '#post_publish_at_1i' found"), so every lookup goes
through :func:`find`, which converts the timeout into
:class:`~acceptance_actions.exceptions.ElementNotFoundError`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .. import constants
from ..exceptions import ElementNotFoundError
from ..utils import add_debug_log, log_operation_error

if TYPE_CHECKING:  # pragma: no cover
    from playwright.sync_api import Locator, Page

logger = logging.getLogger(__name__)

__all__ = ["find"]


def find(
    scope: Union["Page", "Locator"],
    selector: str,
    message: str,
    *,
    has_text: Optional[str] = None,
    timeout_ms: Optional[int] = None,
) -> "Locator":
    """Return the first element matching ``selector`` inside ``scope``.

    Args:
        scope: Page or Locator to search in (relative XPath is resolved
            against a Locator scope)
        selector: Playwright selector (CSS, or XPath with the ``xpath=`` prefix)
        message: Failure message for the raised ElementNotFoundError
        has_text: Only match elements whose text contains this substring
        timeout_ms: How long to wait for a match (defaults to DEFAULT_TIMEOUT_MS)

    Raises:
        ElementNotFoundError: nothing matched before the timeout
    """

    locator = scope.locator(selector)
    if has_text is not None:
        locator = locator.filter(has_text=has_text)
    locator = locator.first

    timeout = constants.DEFAULT_TIMEOUT_MS if timeout_ms is None else timeout_ms
    add_debug_log(f"find: {selector} (has_text={has_text!r}, timeout={timeout}ms)")
    try:
        locator.wait_for(state="attached", timeout=timeout)
    except PlaywrightTimeoutError as exc:
        log_operation_error(
            "find", message, {"selector": selector, "has_text": has_text}
        )
        raise ElementNotFoundError(message, selector) from exc
    return locator
