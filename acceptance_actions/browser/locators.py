"""browser.locators

Selector templating for the browser actions.

Everything here is pure string work: CSS id selectors for the Rails-style
``<prefix>_<n>i`` select widgets and the XPath expressions used to find
options, labels and table-row links. Values are embedded with
:func:`xpath_literal` so text containing quotes still produces a valid
expression.
"""

from __future__ import annotations

import re

__all__ = [
    "xpath_literal",
    "css_id",
    "select_part_id",
    "option_by_value_xpath",
    "label_xpath",
    "row_link_xpath",
    "strip_part_suffix",
]

# Rails date/time select parts: 1i=year 2i=month 3i=day 4i=hour 5i=minute
YEAR, MONTH, DAY, HOUR, MINUTE = 1, 2, 3, 4, 5

_PART_SUFFIX = re.compile(r"_\di$")


def xpath_literal(value: object) -> str:
    """Quote ``value`` as an XPath 1.0 string literal."""

    text = str(value)
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    # Both quote kinds present: stitch single-quoted pieces with "'"
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"


def css_id(element_id: str) -> str:
    if not element_id:
        raise ValueError("element id must be a non-empty string")
    return f"#{element_id}"


def select_part_id(prefix: str, part: int) -> str:
    """``post_publish_at`` + 4 -> ``post_publish_at_4i``"""
    return f"{prefix}_{part}i"


def option_by_value_xpath(value: object) -> str:
    return f"xpath=.//option[contains(./@value, {xpath_literal(value)})]"


def label_xpath(label: str) -> str:
    return f"xpath=//label[contains(normalize-space(string(.)), {xpath_literal(label)})]"


def row_link_xpath(row_content: str) -> str:
    return f"xpath=//tr[contains(., {xpath_literal(row_content)})]/td/a"


def strip_part_suffix(element_id: str) -> str:
    """Turn a part id (``post_publish_at_1i``) back into its prefix."""
    return _PART_SUFFIX.sub("", element_id)
