"""browser.form_completer

Fills a Rails ``form_for`` form field by field.

Field ids follow the form builder convention ``<base>_<field>``, so for
``form_for @post`` the author input is ``#post_author``. Instances are
normally obtained from :func:`acceptance_actions.browser.actions.complete_form`.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Optional

from ..utils import add_debug_log
from .finder import find
from .locators import css_id
from .selects import ById, select_date, select_datetime, select_time

if TYPE_CHECKING:  # pragma: no cover
    from playwright.sync_api import Locator, Page

logger = logging.getLogger(__name__)


def _sanitized_value(value: Any) -> str:
    """Radio button id suffix the same way Rails derives it from the value"""
    text = re.sub(r"[\s.]", "_", str(value))
    return re.sub(r"[^-\w]", "", text).lower()


class FormCompleter:
    """Completes the form named ``base`` on ``page``"""

    def __init__(self, page: "Page", base: Any) -> None:
        if not base:
            raise ValueError("form base name must be a non-empty string")
        self.page = page
        self.base = str(base)
        self._submitted = False

    @property
    def submitted(self) -> bool:
        return self._submitted

    def field_id(self, field: Any) -> str:
        return f"{self.base}_{field}"

    def text_field(self, field: Any, value: Any) -> None:
        self._find(self.field_id(field), "fill in field").fill(str(value))

    def text_area(self, field: Any, value: Any) -> None:
        self.text_field(field, value)

    def checkbox(self, field: Any, value: Any) -> None:
        box = self._find(self.field_id(field), "toggle checkbox")
        if value:
            box.check()
        else:
            box.uncheck()

    def select(self, field: Any, value: Any) -> None:
        self._find(self.field_id(field), "select option").select_option(label=str(value))

    def radio(self, field: Any, value: Any) -> None:
        radio_id = f"{self.field_id(field)}_{_sanitized_value(value)}"
        self._find(radio_id, "choose radio button").check()

    def date(self, field: Any, when: Any) -> None:
        select_date(self.page, when, ById(self.field_id(field)))

    def datetime(self, field: Any, when: Any) -> None:
        select_datetime(self.page, when, ById(self.field_id(field)))

    def time(self, field: Any, when: Any) -> None:
        select_time(self.page, when, ById(self.field_id(field)))

    def submit(self, selector: Optional[str] = None) -> None:
        """Click the submit control.

        Args:
            selector: CSS or XPath locator of a custom submit control
                (defaults to ``#<base>_submit``)
        """

        selector = selector or css_id(self.field_id("submit"))
        message = f"cannot submit form '{self.base}', no submit control '{selector}' found"
        find(self.page, selector, message).click()
        self._submitted = True
        add_debug_log(f"FormCompleter.submit: submitted '{self.base}' via {selector}")

    def _find(self, field_id: str, action: str) -> "Locator":
        message = f"cannot {action}, no field with id '#{field_id}' found"
        return find(self.page, css_id(field_id), message)

    def __repr__(self) -> str:
        return f"FormCompleter(base={self.base!r}, submitted={self._submitted})"
