"""Option declarations and the option group base class."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional, Tuple

from buildopts.core.exceptions import UnknownOptionError
from buildopts.core.options.converters import BooleanConverter, Converter


class Visibility(Enum):
    PUBLIC = "public"
    INTERNAL = "internal"


def _attribute_for(name: str) -> str:
    return re.sub(r"\W", "_", name)


@dataclass(frozen=True)
class OptionDefinition:
    """
    Static declaration of one option.

    ``default`` is the textual default as it would be typed on the command
    line, or ``None`` for options without one. ``attribute`` is the storage
    slot on the group and defaults to ``name`` with non-word characters
    replaced by underscores.
    """

    name: str
    default: Optional[str] = None
    converter: Optional[Converter] = None
    allow_multiple: bool = False
    visibility: Visibility = Visibility.PUBLIC
    help: str = ""
    attribute: str = field(default="")

    def __post_init__(self) -> None:
        if not self.attribute:
            object.__setattr__(self, "attribute", _attribute_for(self.name))

    @property
    def is_boolean(self) -> bool:
        return isinstance(self.converter, BooleanConverter)

    @property
    def is_internal(self) -> bool:
        return self.visibility is Visibility.INTERNAL


class OptionGroup:
    """
    Base class for a parsed bundle of related options.

    Subclasses list their options in ``OPTIONS``. An instance holds the raw
    values produced by the parser: a string (or ``None``) for single-valued
    options and a tuple of strings for multi-valued ones. Values are fixed at
    construction.
    """

    OPTIONS: ClassVar[Tuple[OptionDefinition, ...]] = ()

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        supplied = dict(values or {})
        declared = {definition.attribute for definition in self.OPTIONS}
        unknown = sorted(set(supplied) - declared)
        if unknown:
            raise UnknownOptionError(
                f"{type(self).__name__} does not declare: {', '.join(unknown)}",
                context={"group": type(self).__name__, "attributes": unknown},
            )

        raw: dict[str, Any] = {}
        for definition in self.OPTIONS:
            if definition.allow_multiple:
                supplied_values = supplied.get(definition.attribute, ())
                if isinstance(supplied_values, str):
                    supplied_values = (supplied_values,)
                raw[definition.attribute] = tuple(supplied_values)
            else:
                raw[definition.attribute] = supplied.get(
                    definition.attribute, definition.default
                )
        object.__setattr__(self, "_values", MappingProxyType(raw))

    def raw_value(self, attribute: str) -> Any:
        return self._values[attribute]

    def __getattr__(self, attribute: str) -> Any:
        try:
            return self.__dict__["_values"][attribute]
        except KeyError:
            raise AttributeError(attribute) from None

    def __setattr__(self, attribute: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return dict(self._values) == dict(other._values)

    def __hash__(self) -> int:
        return hash((type(self), tuple(self._values.items())))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"{type(self).__name__}({fields})"
