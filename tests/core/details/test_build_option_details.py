"""Tests for BuildOptionDetails lookups."""

import pytest

from buildopts.core.details import BuildOptionDetails, Label
from tests.fixtures.option_groups import ABSENT, Maybe, MoreOptions, Options


@pytest.fixture
def details_for(parse_options):
    def _details(group_classes, *args):
        return BuildOptionDetails.for_options_for_testing(parse_options(group_classes, *args))

    return _details


class TestGetOptionClass:
    def test_returns_class_of_present_options(self, details_for):
        details = details_for([Options])
        assert details.get_option_class("boolean_option") is Options

    def test_selects_correct_class_when_multiple_are_present(self, details_for):
        details = details_for([Options, MoreOptions])
        assert details.get_option_class("boolean_option") is Options
        assert details.get_option_class("other_option") is MoreOptions

    def test_returns_none_if_group_is_not_part_of_details(self, details_for):
        details = details_for([Options])
        assert details.get_option_class("other_option") is None

    def test_selects_correct_class_even_when_value_is_none(self, details_for):
        details = details_for([Options])
        assert details.get_option_class("null_default") is Options

    def test_returns_none_when_option_is_undefined(self, details_for):
        details = details_for([Options])
        assert details.get_option_class("undefined_option") is None

    def test_returns_none_if_option_is_internal(self, details_for):
        details = details_for([Options])
        assert details.get_option_class("internal option") is None


class TestGetOptionValue:
    def test_returns_default_value_if_not_set(self, details_for):
        details = details_for([Options])
        assert details.get_option_value("boolean_option") is True

    def test_returns_command_line_value_if_set(self, details_for):
        details = details_for([Options], "--noboolean_option")
        assert details.get_option_value("boolean_option") is False

    def test_returns_empty_tuple_for_unspecified_multi_options(self, details_for):
        details = details_for([Options], "--noboolean_option")
        assert details.get_option_value("multi_option") == ()

    def test_returns_values_in_order_for_specified_multi_options(self, details_for):
        details = details_for(
            [Options],
            "--multi_option=one",
            "--multi_option=2",
            "--multi_option=iii",
        )
        assert details.get_option_value("multi_option") == ("one", "2", "iii")

    def test_draws_values_from_all_groups(self, details_for):
        details = details_for([Options, MoreOptions], "--other_option=set")
        assert details.get_option_value("other_option") == "set"

    def test_uses_converters_if_specified(self, details_for):
        details = details_for([Options], "--convertible_option=Set")
        assert details.get_option_value("convertible_option") == Maybe.of("Set")

    def test_uses_converters_for_defaults(self, details_for):
        details = details_for([Options])
        assert details.get_option_value("convertible_option") == ABSENT

    def test_returns_none_if_option_is_not_defined(self, details_for):
        details = details_for([Options])
        assert details.get_option_value("undefined_option") is None

    def test_returns_none_if_option_is_internal(self, details_for):
        details = details_for([Options])
        assert details.get_option_value("internal option") is None

    def test_returns_none_if_option_is_defined_in_non_included_group(self, details_for):
        details = details_for([Options])
        assert details.get_option_value("other_option") is None

    def test_returns_none_if_default_is_none(self, details_for):
        details = details_for([Options])
        assert details.get_option_value("null_default") is None


class TestAllowsMultipleValues:
    def test_false_for_undefined_option(self, details_for):
        details = details_for([Options])
        assert details.allows_multiple_values("undefined_option") is False

    def test_false_for_non_multi_option(self, details_for):
        details = details_for([Options])
        assert details.allows_multiple_values("boolean_option") is False

    def test_false_for_internal_non_multi_option(self, details_for):
        details = details_for([Options])
        assert details.allows_multiple_values("internal option") is False

    def test_false_for_internal_multi_option(self, details_for):
        details = details_for([Options])
        assert details.allows_multiple_values("internal multi option") is False

    def test_true_for_multi_option(self, details_for):
        details = details_for([Options])
        assert details.allows_multiple_values("multi_option") is True


@pytest.mark.parametrize("name", ["internal option", "internal multi option"])
def test_internal_options_are_invisible_to_every_lookup(details_for, name):
    details = details_for([Options])
    assert details.get_option_class(name) is None
    assert details.get_option_value(name) is None
    assert details.allows_multiple_values(name) is False
    assert name not in details


class TestExternalSettings:
    def test_returns_value_for_label(self, parse_options):
        label = Label.parse_canonical("//test:setting")
        details = BuildOptionDetails.for_options(parse_options([Options]), {label: "value"})
        assert details.get_option_value(label) == "value"

    def test_labels_do_not_create_name_entries(self, parse_options):
        label = Label.parse_canonical("//test:setting")
        details = BuildOptionDetails.for_options(parse_options([Options]), {label: "value"})
        assert details.get_option_value("//test:setting") is None
        assert details.get_option_class("//test:setting") is None
        assert "//test:setting" not in details
        assert label in details

    def test_unknown_label_returns_none(self, parse_options):
        details = BuildOptionDetails.for_options(parse_options([Options]))
        assert details.get_option_value(Label.parse_canonical("//test:missing")) is None

    def test_values_are_returned_verbatim(self, parse_options):
        label = Label.parse_canonical("@repo//flags:level")
        value = ["not", "converted"]
        details = BuildOptionDetails.for_options(parse_options([Options]), {label: value})
        assert details.get_option_value(label) is value


class TestListing:
    def test_option_names_exclude_internal_options(self, details_for):
        details = details_for([Options, MoreOptions])
        assert details.option_names() == (
            "boolean_option",
            "convertible_option",
            "late_bound_default",
            "multi_option",
            "null_default",
            "other_option",
        )

    def test_describe_rows(self, details_for):
        details = details_for([Options], "--multi_option=a")
        rows = {row.name: row for row in details.describe()}
        assert rows["multi_option"].allows_multiple is True
        assert rows["multi_option"].value == ("a",)
        assert rows["boolean_option"].group_name == "Options"
        assert "internal option" not in rows


def test_unknown_log_level_does_not_break_construction(monkeypatch, parse_options):
    monkeypatch.setenv("BUILDOPTS_LOG_LEVEL", "verbose")
    details = BuildOptionDetails.for_options_for_testing(parse_options([Options]))
    assert details.get_option_value("boolean_option") is True
