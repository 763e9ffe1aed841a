"""Converters turning raw option text into typed values."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from buildopts.core.exceptions import ConversionError

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


class Converter(ABC):
    """
    Strategy converting the textual form of an option value.

    Converters are applied to supplied values and to textual defaults alike,
    so ``convert`` must accept whatever a declaration uses as its default.
    """

    type_description: str = "a string"

    @abstractmethod
    def convert(self, text: Any) -> Any:
        """Convert ``text`` or raise :class:`ConversionError`."""

    def _reject(self, text: Any) -> ConversionError:
        return ConversionError(
            f"'{text}' is not {self.type_description}",
            context={"input": text, "converter": type(self).__name__},
        )


class StringConverter(Converter):
    def convert(self, text: Any) -> Any:
        return str(text)


class BooleanConverter(Converter):
    type_description = "a boolean"

    def convert(self, text: Any) -> Any:
        if isinstance(text, bool):
            return text
        lowered = str(text).strip().lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        raise self._reject(text)


class IntegerConverter(Converter):
    type_description = "an integer"

    def convert(self, text: Any) -> Any:
        if isinstance(text, int) and not isinstance(text, bool):
            return text
        try:
            return int(str(text).strip())
        except ValueError:
            raise self._reject(text) from None


class FloatConverter(Converter):
    type_description = "a number"

    def convert(self, text: Any) -> Any:
        if isinstance(text, (int, float)) and not isinstance(text, bool):
            return float(text)
        try:
            return float(str(text).strip())
        except ValueError:
            raise self._reject(text) from None


class CommaSeparatedConverter(Converter):
    """Split ``a,b`` (or a JSON list) into a tuple of stripped items."""

    type_description = "a comma-separated list of values"

    def convert(self, text: Any) -> Any:
        if isinstance(text, (list, tuple)):
            return tuple(text)
        trimmed = str(text).strip()
        if trimmed.startswith("["):
            try:
                parsed = json.loads(trimmed)
            except json.JSONDecodeError:
                raise self._reject(text) from None
            return tuple(parsed)
        return tuple(item.strip() for item in trimmed.split(",") if item.strip())


BOOLEAN = BooleanConverter()
INTEGER = IntegerConverter()
FLOAT = FloatConverter()
STRING = StringConverter()
COMMA_SEPARATED = CommaSeparatedConverter()
