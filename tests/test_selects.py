import datetime
import unittest

from fakes import element, make_page

from acceptance_actions.browser.locators import label_xpath, option_by_value_xpath
from acceptance_actions.browser.selects import (ById, ByLabel,
                                                find_and_select_option,
                                                resolve_prefix, select_date,
                                                select_datetime, select_source,
                                                select_time)
from acceptance_actions.exceptions import (ElementNotFoundError,
                                           SelectSourceMissingError)

WHEN = datetime.datetime(2024, 3, 7, 9, 5)


class TestSelectSource(unittest.TestCase):
    """Building the id-prefix / label variant"""

    def test_id_prefix(self):
        self.assertEqual(select_source(id_prefix="post_publish_at"), ById("post_publish_at"))

    def test_label(self):
        self.assertEqual(select_source(label="Publish At"), ByLabel("Publish At"))

    def test_id_prefix_wins_over_label(self):
        self.assertEqual(
            select_source(id_prefix="post_publish_at", label="Publish At"),
            ById("post_publish_at"),
        )

    def test_neither_raises_usage_error(self):
        with self.assertRaises(SelectSourceMissingError):
            select_source()
        with self.assertRaises(ValueError):
            select_source(id_prefix="", label=None)

    def test_empty_variants_rejected(self):
        with self.assertRaises(ValueError):
            ById("")
        with self.assertRaises(ValueError):
            ByLabel("")


class TestSelectTime(unittest.TestCase):

    def test_hour_and_minute_are_zero_padded(self):
        page = make_page()
        select_time(page, WHEN, ById("post_publish_at"))

        self.assertEqual(list(page.locators), ["#post_publish_at_4i", "#post_publish_at_5i"])
        hour = element(page, "#post_publish_at_4i")
        minute = element(page, "#post_publish_at_5i")
        self.assertEqual(list(hour.locators), [option_by_value_xpath("09")])
        self.assertEqual(list(minute.locators), [option_by_value_xpath("05")])

    def test_keyword_id_prefix(self):
        page = make_page()
        select_time(page, datetime.time(23, 59), id_prefix="event_starts")
        self.assertEqual(list(page.locators), ["#event_starts_4i", "#event_starts_5i"])

    def test_missing_source_makes_no_lookup(self):
        page = make_page()
        with self.assertRaises(SelectSourceMissingError):
            select_time(page, WHEN)
        page.locator.assert_not_called()

    def test_rejects_unknown_source_type(self):
        with self.assertRaises(TypeError):
            select_time(make_page(), WHEN, "post_publish_at")

    def test_rejects_source_with_keywords(self):
        page = make_page()
        with self.assertRaises(TypeError):
            select_time(page, WHEN, ById("post_publish_at"), label="Publish At")
        with self.assertRaises(TypeError):
            select_date(page, WHEN, ByLabel("Publish At"), id_prefix="post_publish_at")
        page.locator.assert_not_called()


class TestSelectDate(unittest.TestCase):

    def test_year_month_day_lookups(self):
        page = make_page()
        select_date(page, datetime.date(2024, 3, 7), ById("post_publish_at"))

        self.assertEqual(
            list(page.locators),
            ["#post_publish_at_1i", "#post_publish_at_2i", "#post_publish_at_3i"],
        )
        self.assertEqual(
            list(element(page, "#post_publish_at_1i").locators), [option_by_value_xpath("2024")]
        )
        self.assertEqual(
            list(element(page, "#post_publish_at_2i").locators), [option_by_value_xpath("3")]
        )
        self.assertEqual(
            list(element(page, "#post_publish_at_3i").locators), [option_by_value_xpath("7")]
        )

    def test_missing_source_raises(self):
        with self.assertRaises(SelectSourceMissingError):
            select_date(make_page(), WHEN)


class TestSelectDatetime(unittest.TestCase):

    def test_time_then_date(self):
        page = make_page()
        select_datetime(page, WHEN, id_prefix="post_publish_at")

        self.assertEqual(
            list(page.locators),
            [
                "#post_publish_at_4i",
                "#post_publish_at_5i",
                "#post_publish_at_1i",
                "#post_publish_at_2i",
                "#post_publish_at_3i",
            ],
        )

    def test_label_is_resolved_once(self):
        label = label_xpath("Publish At")
        page = make_page(attributes={(label, "for"): "post_publish_at_1i"})

        select_datetime(page, WHEN, ByLabel("Publish At"))

        self.assertEqual(list(page.locators)[0], label)
        self.assertEqual(list(page.locators).count(label), 1)
        self.assertIn("#post_publish_at_3i", page.locators)

    def test_missing_source_raises(self):
        with self.assertRaises(SelectSourceMissingError):
            select_datetime(make_page(), WHEN)


class TestResolvePrefix(unittest.TestCase):

    def test_by_id_makes_no_lookup(self):
        page = make_page()
        self.assertEqual(resolve_prefix(page, ById("post_publish_at")), "post_publish_at")
        page.locator.assert_not_called()

    def test_by_label_strips_part_suffix(self):
        label = label_xpath("Publish At")
        page = make_page(attributes={(label, "for"): "post_publish_at_4i"})
        self.assertEqual(resolve_prefix(page, ByLabel("Publish At")), "post_publish_at")

    def test_unknown_label(self):
        label = label_xpath("Nope")
        page = make_page(missing=[label])
        with self.assertRaises(ElementNotFoundError) as ctx:
            resolve_prefix(page, ByLabel("Nope"))
        self.assertEqual(
            str(ctx.exception), "cannot select option, select with label 'Nope' not found"
        )

    def test_label_without_for_attribute(self):
        with self.assertRaises(ElementNotFoundError):
            resolve_prefix(make_page(), ByLabel("Publish At"))


class TestFindAndSelectOption(unittest.TestCase):

    def test_selects_matching_option_value(self):
        option = option_by_value_xpath("09")
        page = make_page(attributes={(option, "value"): "09"})

        self.assertEqual(find_and_select_option(page, "post_publish_at_4i", "09"), "09")

        select = element(page, "#post_publish_at_4i")
        select.select_option.assert_called_once_with(value="09")
        element(select, option).wait_for.assert_called_once()

    def test_missing_select_box(self):
        page = make_page(missing=["#post_publish_at_4i"])
        with self.assertRaises(ElementNotFoundError) as ctx:
            find_and_select_option(page, "post_publish_at_4i", "09")
        self.assertEqual(
            ctx.exception.message,
            "cannot select option, no select box with id '#post_publish_at_4i' found",
        )
        self.assertEqual(ctx.exception.selector, "#post_publish_at_4i")

    def test_missing_option(self):
        option = option_by_value_xpath("13")
        page = make_page(missing=[option])
        with self.assertRaises(ElementNotFoundError) as ctx:
            find_and_select_option(page, "post_publish_at_2i", 13)
        self.assertEqual(
            str(ctx.exception),
            "cannot select option, no option with text '13' in select box '#post_publish_at_2i'",
        )
        element(page, "#post_publish_at_2i").select_option.assert_not_called()


if __name__ == "__main__":
    unittest.main()
