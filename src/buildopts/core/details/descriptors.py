"""Per-option descriptors extracted from option group tables."""

from __future__ import annotations

from dataclasses import dataclass
from operator import methodcaller
from typing import Any, Callable, Optional, Tuple, Type

from buildopts.core.options.converters import Converter
from buildopts.core.options.definitions import OptionGroup, Visibility


@dataclass(frozen=True)
class OptionDescriptor:
    """Lookup metadata for one public option."""

    name: str
    owning_group_type: Type[OptionGroup]
    value_accessor: Callable[[OptionGroup], Any]
    converter: Optional[Converter] = None
    allows_multiple: bool = False
    visibility: Visibility = Visibility.PUBLIC


def extract_descriptors(group: OptionGroup) -> Tuple[OptionDescriptor, ...]:
    """
    Describe every option declared by ``group``'s class.

    Internal options are dropped here so no later lookup can reach them.
    """
    group_type = type(group)
    return tuple(
        OptionDescriptor(
            name=definition.name,
            owning_group_type=group_type,
            value_accessor=methodcaller("raw_value", definition.attribute),
            converter=definition.converter,
            allows_multiple=definition.allow_multiple,
            visibility=definition.visibility,
        )
        for definition in group_type.OPTIONS
        if not definition.is_internal
    )
