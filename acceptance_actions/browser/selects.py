"""browser.selects

Filling Rails-style multi-part date/time select widgets.

A ``datetime_select`` for ``post[publish_at]`` renders five dropdowns with
ids ``post_publish_at_1i`` (year) through ``post_publish_at_5i`` (minute).
The widget is addressed either directly by that id prefix or through the
text of its ``<label>``, whose ``for`` attribute points at one of the parts:

    select_datetime(page, when, ById("post_publish_at"))
    select_date(page, when, label="Publish At")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Union

from ..exceptions import ElementNotFoundError, SelectSourceMissingError
from ..utils import add_debug_log
from .finder import find
from .locators import (DAY, HOUR, MINUTE, MONTH, YEAR, css_id, label_xpath,
                       option_by_value_xpath, select_part_id,
                       strip_part_suffix)

if TYPE_CHECKING:  # pragma: no cover
    from playwright.sync_api import Page

logger = logging.getLogger(__name__)

__all__ = [
    "ById",
    "ByLabel",
    "SelectSource",
    "select_source",
    "resolve_prefix",
    "select_datetime",
    "select_date",
    "select_time",
    "find_and_select_option",
]


@dataclass(frozen=True)
class ById:
    """The widget's id prefix, e.g. ``post_publish_at``"""

    prefix: str

    def __post_init__(self) -> None:
        if not self.prefix:
            raise ValueError("id prefix must be a non-empty string")


@dataclass(frozen=True)
class ByLabel:
    """Text contained in the widget's ``<label>``, e.g. ``Publish At``"""

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("label text must be a non-empty string")


SelectSource = Union[ById, ByLabel]


def select_source(id_prefix: Any = None, label: Optional[str] = None) -> SelectSource:
    """Build a SelectSource from keyword options; the id prefix wins when both are given.

    Raises:
        SelectSourceMissingError: neither option was supplied
    """

    if id_prefix:
        return ById(str(id_prefix))
    if label:
        return ByLabel(str(label))
    raise SelectSourceMissingError()


def _coerce_source(
    source: Optional[SelectSource], id_prefix: Any, label: Optional[str]
) -> SelectSource:
    if source is None:
        return select_source(id_prefix=id_prefix, label=label)
    if id_prefix is not None or label is not None:
        raise TypeError("pass either a source or id_prefix/label keywords, not both")
    if not isinstance(source, (ById, ByLabel)):
        raise TypeError(f"expected ById or ByLabel, got {type(source).__name__}")
    return source


def resolve_prefix(page: "Page", source: SelectSource) -> str:
    """Return the id prefix the widget's dropdowns share."""

    if isinstance(source, ById):
        return source.prefix

    message = f"cannot select option, select with label '{source.text}' not found"
    label = find(page, label_xpath(source.text), message)
    target = label.get_attribute("for")
    if not target:
        raise ElementNotFoundError(message, label_xpath(source.text))
    prefix = strip_part_suffix(target)
    add_debug_log(f"resolve_prefix: label '{source.text}' -> {prefix}")
    return prefix


def select_datetime(
    page: "Page",
    when: Any,
    source: Optional[SelectSource] = None,
    *,
    id_prefix: Any = None,
    label: Optional[str] = None,
) -> None:
    """Select year, month, day, hour and minute dropdowns for ``when``."""

    prefix = resolve_prefix(page, _coerce_source(source, id_prefix, label))

    select_time(page, when, ById(prefix))
    select_date(page, when, ById(prefix))


def select_time(
    page: "Page",
    when: Any,
    source: Optional[SelectSource] = None,
    *,
    id_prefix: Any = None,
    label: Optional[str] = None,
) -> None:
    """Select the hour and minute dropdowns (two-digit values) for ``when``."""

    prefix = resolve_prefix(page, _coerce_source(source, id_prefix, label))

    find_and_select_option(page, select_part_id(prefix, HOUR), f"{when.hour:02d}")
    find_and_select_option(page, select_part_id(prefix, MINUTE), f"{when.minute:02d}")


def select_date(
    page: "Page",
    when: Any,
    source: Optional[SelectSource] = None,
    *,
    id_prefix: Any = None,
    label: Optional[str] = None,
) -> None:
    """Select the year, month and day dropdowns for ``when``."""

    prefix = resolve_prefix(page, _coerce_source(source, id_prefix, label))

    find_and_select_option(page, select_part_id(prefix, YEAR), when.year)
    find_and_select_option(page, select_part_id(prefix, MONTH), when.month)
    find_and_select_option(page, select_part_id(prefix, DAY), when.day)


def find_and_select_option(page: "Page", select_id: str, value: Any) -> str:
    """Find the dropdown with id ``select_id`` and select the first option whose value contains ``value``.

    Args:
        page: Page to search
        select_id: Element id of the dropdown, without ``#``
        value: Value (or part of it) of the option to select

    Returns:
        The full value of the selected option
    """

    select_err = f"cannot select option, no select box with id '#{select_id}' found"
    option_err = (
        f"cannot select option, no option with text '{value}' in select box '#{select_id}'"
    )

    select = find(page, css_id(select_id), select_err)
    option = find(select, option_by_value_xpath(value), option_err)

    option_value = option.get_attribute("value")
    select.select_option(value=option_value)
    add_debug_log(f"find_and_select_option: #{select_id} = {option_value!r}")
    return option_value
