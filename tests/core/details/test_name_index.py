import logging

import pytest

from buildopts.core.details.descriptors import extract_descriptors
from buildopts.core.details.name_index import NameIndex
from buildopts.core.exceptions import ConversionError
from buildopts.core.options import INTEGER, OptionDefinition, OptionGroup
from buildopts.core.utils.config import BuildOptsConfig, set_config
from tests.fixtures.option_groups import MoreOptions, Options, ShadowingOptions


class CountedOptions(OptionGroup):
    OPTIONS = (
        OptionDefinition("jobs", default="4", converter=INTEGER),
        OptionDefinition("ports", allow_multiple=True, converter=INTEGER),
    )


def test_extract_descriptors_drops_internal_options():
    names = [d.name for d in extract_descriptors(Options())]
    assert "internal option" not in names
    assert "internal multi option" not in names
    assert "boolean_option" in names


def test_descriptor_reads_raw_value_from_group():
    group = MoreOptions({"other_option": "x"})
    (descriptor,) = extract_descriptors(group)
    assert descriptor.owning_group_type is MoreOptions
    assert descriptor.value_accessor(group) == "x"


def test_first_group_wins_on_duplicate_names():
    index = NameIndex([Options(), ShadowingOptions()])
    assert index.class_of("boolean_option") is Options
    assert index.value_of("boolean_option") is True
    assert index.class_of("shadowing_only") is ShadowingOptions


def test_order_decides_owner():
    index = NameIndex([ShadowingOptions(), Options()])
    assert index.class_of("boolean_option") is ShadowingOptions
    assert index.value_of("boolean_option") is False


def test_shadowed_option_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="buildopts"):
        NameIndex([Options(), ShadowingOptions()])
    assert "boolean_option" in caplog.text
    assert "shadowed" in caplog.text


def test_shadow_warning_can_be_disabled(caplog):
    config = BuildOptsConfig()
    config.registry.warn_on_shadowed_options = False
    set_config(config)
    with caplog.at_level(logging.WARNING, logger="buildopts"):
        NameIndex([Options(), ShadowingOptions()])
    assert "shadowed" not in caplog.text


def test_converter_applies_to_each_multi_value():
    index = NameIndex([CountedOptions({"ports": ("80", "443")})])
    assert index.value_of("ports") == (80, 443)
    assert index.value_of("jobs") == 4


def test_conversion_failure_names_the_option():
    with pytest.raises(ConversionError) as excinfo:
        NameIndex([CountedOptions({"jobs": "many"})])
    assert "jobs" in excinfo.value.message
    assert excinfo.value.context["option"] == "jobs"


def test_empty_index():
    index = NameIndex([])
    assert len(index) == 0
    assert index.value_of("anything") is None
    assert index.allows_multiple("anything") is False
