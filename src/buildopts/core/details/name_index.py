"""Name-keyed index over the public options of several option groups."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple, Type

from buildopts.core.exceptions import ConversionError
from buildopts.core.options.definitions import OptionGroup
from buildopts.core.utils.config import get_config
from buildopts.core.utils.logger import log_debug, log_warning

from .descriptors import OptionDescriptor, extract_descriptors


@dataclass(frozen=True)
class IndexEntry:
    descriptor: OptionDescriptor
    group: OptionGroup
    value: Any


def resolve_value(descriptor: OptionDescriptor, group: OptionGroup) -> Any:
    """
    Read ``descriptor``'s option from ``group`` and apply its converter.

    Multi-valued options always resolve to a tuple, empty when the option
    was never supplied. A ``None`` raw value is returned as is.
    """
    raw = descriptor.value_accessor(group)
    converter = descriptor.converter
    if descriptor.allows_multiple:
        values = tuple(raw or ())
        if converter is None:
            return values
        return tuple(converter.convert(item) for item in values)
    if raw is None or converter is None:
        return raw
    return converter.convert(raw)


class NameIndex:
    """
    Immutable mapping from option name to its owning group and value.

    When two groups declare the same name, the first group in the supplied
    order owns it.
    """

    def __init__(self, groups: Iterable[OptionGroup]) -> None:
        warn_on_shadowed = get_config().registry.warn_on_shadowed_options
        entries: dict[str, IndexEntry] = {}
        group_count = 0
        for group in groups:
            group_count += 1
            for descriptor in extract_descriptors(group):
                existing = entries.get(descriptor.name)
                if existing is not None:
                    if warn_on_shadowed:
                        log_warning(
                            "NAME_INDEX",
                            f"Option '{descriptor.name}' of "
                            f"{descriptor.owning_group_type.__name__} is shadowed",
                            context=f"owned by {existing.descriptor.owning_group_type.__name__}",
                        )
                    continue
                try:
                    value = resolve_value(descriptor, group)
                except ConversionError as e:
                    raise ConversionError(
                        f"Option '{descriptor.name}': {e.message}",
                        context={**e.context, "option": descriptor.name},
                    ) from e
                entries[descriptor.name] = IndexEntry(descriptor, group, value)
        self._entries: Mapping[str, IndexEntry] = MappingProxyType(entries)
        log_debug(
            "NAME_INDEX",
            f"Indexed {len(entries)} public option(s) from {group_count} group(s)",
        )

    def descriptor(self, name: str) -> Optional[OptionDescriptor]:
        entry = self._entries.get(name)
        return entry.descriptor if entry is not None else None

    def class_of(self, name: str) -> Optional[Type[OptionGroup]]:
        entry = self._entries.get(name)
        return entry.descriptor.owning_group_type if entry is not None else None

    def value_of(self, name: str) -> Any:
        entry = self._entries.get(name)
        return entry.value if entry is not None else None

    def allows_multiple(self, name: str) -> bool:
        entry = self._entries.get(name)
        return entry is not None and entry.descriptor.allows_multiple

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._entries))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
