"""
Command-line adapter producing option group instances.

This is a thin argparse front end over the option tables: it tokenizes
arguments and stores the raw text of each supplied value on the declaring
groups. Typed conversion happens later, when the registry is built.
"""

from __future__ import annotations

import argparse
from typing import Dict, Iterable, List, Sequence, Type

from buildopts.core.exceptions import OptionsParsingError
from buildopts.core.options.definitions import OptionDefinition, OptionGroup
from buildopts.core.utils.logger import log_debug


class _RaisingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise OptionsParsingError(message)


def _collect_definitions(
    group_classes: Sequence[Type[OptionGroup]],
) -> Dict[str, OptionDefinition]:
    """First declaration of each option name, in class order."""
    definitions: Dict[str, OptionDefinition] = {}
    for group_class in group_classes:
        for definition in group_class.OPTIONS:
            definitions.setdefault(definition.name, definition)
    return definitions


def _normalize_boolean_flags(
    args: Iterable[str], definitions: Dict[str, OptionDefinition]
) -> List[str]:
    """Rewrite ``--flag`` and ``--noflag`` into explicit ``--flag=value`` form."""
    normalized: List[str] = []
    passthrough = False
    for arg in args:
        if passthrough or not arg.startswith("--") or "=" in arg:
            normalized.append(arg)
            passthrough = passthrough or arg == "--"
            continue
        name = arg[2:]
        definition = definitions.get(name)
        if definition is not None and definition.is_boolean:
            normalized.append(f"--{name}=true")
            continue
        if name.startswith("no"):
            negated = definitions.get(name[2:])
            if negated is not None and negated.is_boolean:
                normalized.append(f"--{name[2:]}=false")
                continue
        normalized.append(arg)
    return normalized


def _build_parser(definitions: Dict[str, OptionDefinition]) -> argparse.ArgumentParser:
    parser = _RaisingArgumentParser(add_help=False, allow_abbrev=False)
    for name, definition in definitions.items():
        parser.add_argument(
            f"--{name}",
            dest=name,
            action="append" if definition.allow_multiple else "store",
            default=None,
            help=definition.help,
        )
    return parser


def parse_option_groups(
    group_classes: Sequence[Type[OptionGroup]],
    args: Sequence[str] = (),
    allow_residue: bool = False,
) -> List[OptionGroup]:
    """
    Parse ``args`` against the options declared by ``group_classes``.

    Args:
        group_classes: Option group classes, in priority order
        args: Command-line arguments, without the program name
        allow_residue: Whether positional arguments are tolerated

    Returns:
        One instance per class, in the order of ``group_classes``

    Raises:
        OptionsParsingError: On unknown options, missing values or
            unexpected positional arguments
    """
    definitions = _collect_definitions(group_classes)
    parser = _build_parser(definitions)
    namespace, extras = parser.parse_known_args(
        _normalize_boolean_flags(args, definitions)
    )

    unknown = [arg for arg in extras if arg.startswith("-") and arg != "--"]
    if unknown:
        raise OptionsParsingError(
            f"Unrecognized options: {' '.join(unknown)}",
            context={"unknown": unknown},
        )
    residue = [arg for arg in extras if arg != "--"]
    if residue and not allow_residue:
        raise OptionsParsingError(
            f"Unrecognized arguments: {' '.join(residue)}",
            context={"residue": residue},
        )

    supplied = {
        name: value for name, value in vars(namespace).items() if value is not None
    }
    log_debug(
        "PARSER",
        f"Parsed {len(supplied)} supplied option(s) for {len(group_classes)} group(s)",
    )

    groups: List[OptionGroup] = []
    for group_class in group_classes:
        values = {
            definition.attribute: supplied[definition.name]
            for definition in group_class.OPTIONS
            if definition.name in supplied
        }
        groups.append(group_class(values))
    return groups
