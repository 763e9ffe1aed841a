"""
Read-only lookup surface over parsed build options.

BuildOptionDetails combines a :class:`NameIndex` over parsed option groups
with an :class:`ExternalSettingIndex` of label-addressed settings. Option
names and labels are separate key spaces: which index answers a
``get_option_value`` call depends only on whether the key is a
:class:`Label`.

Every index is built once in the constructor and never changes afterwards,
so a BuildOptionDetails can be shared between threads without locking.
Lookups never raise; an unknown or internal key yields ``None`` (or
``False`` for ``allows_multiple_values``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple, Type, Union

from buildopts.core.options.definitions import OptionGroup
from buildopts.core.utils.logger import log_debug

from .external import ExternalSettingIndex
from .labels import Label
from .name_index import NameIndex


@dataclass(frozen=True)
class OptionRow:
    """One public option as shown by ``describe``."""

    name: str
    group_name: str
    allows_multiple: bool
    value: Any


class BuildOptionDetails:
    """Name and label addressable view of one build configuration's options."""

    def __init__(
        self,
        groups: Iterable[OptionGroup],
        external_settings: Optional[Mapping[Label, Any]] = None,
    ) -> None:
        self._name_index = NameIndex(groups)
        self._external_index = ExternalSettingIndex(external_settings)
        log_debug(
            "REGISTRY",
            f"Built option details with {len(self._name_index)} option(s) "
            f"and {len(self._external_index)} external setting(s)",
        )

    @classmethod
    def for_options(
        cls,
        groups: Iterable[OptionGroup],
        external_settings: Optional[Mapping[Label, Any]] = None,
    ) -> "BuildOptionDetails":
        return cls(groups, external_settings)

    @classmethod
    def for_options_for_testing(cls, groups: Iterable[OptionGroup]) -> "BuildOptionDetails":
        return cls(groups, None)

    def get_option_class(self, name: str) -> Optional[Type[OptionGroup]]:
        """Return the group class that owns ``name``, or None."""
        return self._name_index.class_of(name)

    def get_option_value(self, key: Union[str, Label]) -> Any:
        """
        Return the value of an option name or of an external setting label.

        Multi-valued options resolve to a tuple, empty when never supplied.
        """
        if isinstance(key, Label):
            return self._external_index.value_of(key)
        return self._name_index.value_of(key)

    def allows_multiple_values(self, name: str) -> bool:
        return self._name_index.allows_multiple(name)

    def option_names(self) -> Tuple[str, ...]:
        return self._name_index.names()

    def external_labels(self) -> Tuple[Label, ...]:
        return self._external_index.labels()

    def describe(self) -> Iterator[OptionRow]:
        for name in self._name_index.names():
            group_class = self._name_index.class_of(name)
            yield OptionRow(
                name=name,
                group_name=group_class.__name__ if group_class else "",
                allows_multiple=self._name_index.allows_multiple(name),
                value=self._name_index.value_of(name),
            )

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Label):
            return key in self._external_index
        return key in self._name_index
