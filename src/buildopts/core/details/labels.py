"""Structured identifiers for externally-resolved settings."""

from __future__ import annotations

import re
from dataclasses import dataclass

from buildopts.core.exceptions import InvalidLabelError

_LABEL_RE = re.compile(
    r"^(?:@@?(?P<repository>[\w.~+-]*))?//(?P<package>[^:]*?)(?::(?P<name>[^:]+))?$"
)


@dataclass(frozen=True, order=True)
class Label:
    """
    A canonical label such as ``@repo//some/package:target``.

    An empty ``repository`` refers to the main repository.
    """

    repository: str
    package: str
    name: str

    @classmethod
    def parse_canonical(cls, text: str) -> "Label":
        """
        Parse ``//pkg:name``, ``//pkg``, ``@repo//pkg:name`` or ``@@repo//pkg:name``.

        ``//pkg`` is shorthand for ``//pkg:<last package component>``.

        Raises:
            InvalidLabelError: If ``text`` is not a canonical label
        """
        match = _LABEL_RE.match(text)
        if match is None:
            raise InvalidLabelError(f"Invalid label '{text}'", context={"label": text})
        repository = match.group("repository") or ""
        package = match.group("package")
        name = match.group("name")
        if package.startswith("/") or package.endswith("/") or "//" in package:
            raise InvalidLabelError(
                f"Invalid package in label '{text}'", context={"label": text}
            )
        if name is None:
            if not package:
                raise InvalidLabelError(
                    f"Label '{text}' has no target name", context={"label": text}
                )
            name = package.rsplit("/", 1)[-1]
        return cls(repository=repository, package=package, name=name)

    def __str__(self) -> str:
        prefix = f"@@{self.repository}" if self.repository else ""
        return f"{prefix}//{self.package}:{self.name}"
