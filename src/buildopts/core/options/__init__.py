"""Option declarations, converters and the command-line adapter."""

from .converters import (
    BOOLEAN,
    COMMA_SEPARATED,
    FLOAT,
    INTEGER,
    STRING,
    BooleanConverter,
    CommaSeparatedConverter,
    Converter,
    FloatConverter,
    IntegerConverter,
    StringConverter,
)
from .definitions import OptionDefinition, OptionGroup, Visibility
from .parser import parse_option_groups

__all__ = [
    "BOOLEAN",
    "COMMA_SEPARATED",
    "FLOAT",
    "INTEGER",
    "STRING",
    "BooleanConverter",
    "CommaSeparatedConverter",
    "Converter",
    "FloatConverter",
    "IntegerConverter",
    "OptionDefinition",
    "OptionGroup",
    "StringConverter",
    "Visibility",
    "parse_option_groups",
]
