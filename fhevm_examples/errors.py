"""Exceptions raised by the registry, the contract parser and the scaffolders.

Library code raises these; only the CLI entry points turn them into an error
message and a non-zero exit status.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class ScaffoldError(Exception):
    """Base exception for every generator failure."""


class UnknownIdentifierError(ScaffoldError):
    """A name that is not in the example or category registry."""

    kind = "identifier"

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        listing = "\n".join(f"  - {item}" for item in self.available)
        super().__init__(f"Unknown {self.kind}: {name}\n\nAvailable {self.kind}s:\n{listing}")


class UnknownExampleError(UnknownIdentifierError):
    kind = "example"


class UnknownCategoryError(UnknownIdentifierError):
    kind = "category"


class OutputExistsError(ScaffoldError):
    """The output directory is already on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Output directory already exists: {path}")


class MissingSourceError(ScaffoldError):
    """A registry entry points at a file that does not exist."""

    def __init__(self, kind: str, relative_path: str | Path) -> None:
        self.kind = kind
        self.relative_path = str(relative_path)
        super().__init__(f"{kind.capitalize()} not found: {relative_path}")


class ContractParseError(ScaffoldError):
    """The contract source does not declare exactly one concrete contract."""

    def __init__(self, message: str, names: Iterable[str] = ()) -> None:
        self.names = list(names)
        super().__init__(message)


class InvalidTemplateError(ScaffoldError):
    """The base template holds a file the generator cannot merge into."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid template file {path}: {reason}")
