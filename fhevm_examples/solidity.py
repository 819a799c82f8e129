"""Minimal Solidity source inspection.

Only two things are read out of a contract file: the name of the single
concrete contract it declares, and a one-line description taken from its
NatSpec header.  Everything else is treated as opaque text.
"""

from __future__ import annotations

import re
from pathlib import Path

from .errors import ContractParseError

# Strings are matched so that comment markers inside them are left alone.
_STRIP_RE = re.compile(
    r'"(?:\\.|[^"\\\n])*"'
    r"|'(?:\\.|[^'\\\n])*'"
    r"|//[^\n]*"
    r"|/\*.*?\*/",
    re.DOTALL,
)

_DECLARATION_RE = re.compile(
    r"(?<![\w$.])(?P<abstract>abstract\s+)?contract\s+(?P<name>[A-Za-z_$][\w$]*)\s*(?:is\b|\{)"
)

_DOC_BLOCK_RE = re.compile(r"/\*\*\s*\n\s*\*\s*(?P<line>[^\n]+?)\s*\n")
_NOTICE_RE = re.compile(r"@notice\s+(?P<line>[^\n]+)")


def strip_comments(source: str) -> str:
    """Remove ``//`` and ``/* */`` comments and blank out string literals.

    Newlines inside block comments are kept so line numbers stay stable.
    """

    def _replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token.startswith(("//", "/*")):
            return "\n" * token.count("\n")
        return token[0] * 2

    return _STRIP_RE.sub(_replace, source)


def find_contract_names(source: str) -> list[str]:
    """Names of every concrete ``contract`` declared in *source*, in order.

    ``abstract contract``, ``interface`` and ``library`` declarations are
    not included, nor is anything inside a comment.
    """
    code = strip_comments(source)
    return [
        match.group("name")
        for match in _DECLARATION_RE.finditer(code)
        if not match.group("abstract")
    ]


def parse_contract_name(source: str, origin: str = "contract source") -> str:
    """Return the name of the one concrete contract declared in *source*.

    Args:
        source: Solidity source text.
        origin: Used in error messages, usually the file's relative path.

    Raises:
        ContractParseError: If there is no concrete contract declaration, or
            more than one.
    """
    names = find_contract_names(source)
    if not names:
        raise ContractParseError(f"Could not extract contract name from {origin}")
    if len(names) > 1:
        raise ContractParseError(
            f"{origin} declares {len(names)} contracts ({', '.join(names)}); expected exactly one",
            names,
        )
    return names[0]


def read_source(path: Path, origin: str | None = None) -> str:
    """Read a Solidity file as UTF-8.

    Raises:
        ContractParseError: If the file is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        raise ContractParseError(f"{origin or path.name} is not valid UTF-8") from None


def read_contract_name(path: Path, origin: str | None = None) -> str:
    """Read *path* and parse its contract name."""
    origin = origin or path.name
    return parse_contract_name(read_source(path, origin), origin)


def extract_description(source: str) -> str:
    """First line of the leading ``/** ... */`` block, else the first ``@notice``."""
    block = _DOC_BLOCK_RE.search(source)
    if block:
        return re.sub(r"^@(?:title|notice|dev)\s+", "", block.group("line"))
    notice = _NOTICE_RE.search(source)
    if notice:
        return notice.group("line").strip()
    return ""
