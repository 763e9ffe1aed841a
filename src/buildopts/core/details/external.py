"""Index of externally-resolved settings keyed by label."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from .labels import Label


class ExternalSettingIndex:
    """
    Label to value mapping, already resolved by its producer.

    Values are returned verbatim: no conversion and no visibility filtering.
    """

    def __init__(self, settings: Optional[Mapping[Label, Any]] = None) -> None:
        self._settings: Mapping[Label, Any] = MappingProxyType(dict(settings or {}))

    def value_of(self, label: Label) -> Any:
        return self._settings.get(label)

    def labels(self) -> Tuple[Label, ...]:
        return tuple(sorted(self._settings))

    def __contains__(self, label: object) -> bool:
        return label in self._settings

    def __len__(self) -> int:
        return len(self._settings)
