"""Static registries of the examples and categories the generators know about.

Both tables are defined here, in source, and never change at runtime.  Paths
are relative to the repository root (see ``Settings.root_dir``).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnknownCategoryError, UnknownExampleError
from .utils import title_from_identifier


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class ExampleConfig(BaseModel):
    """A single standalone example: one contract and its test suite."""

    model_config = ConfigDict(frozen=True)

    contract: str = Field(..., description="Path to the Solidity contract, e.g. 'contracts/FHEAdd.sol'")
    test: str = Field(..., description="Path to the TypeScript test file")
    description: str = Field(..., description="What this example demonstrates")
    title: str = Field(default="", description="Display title; derived from the identifier when empty")
    docs_description: str = Field(
        default="", description="Introduction of the docs page; the short description is used when empty"
    )
    section: str = Field(default="Basic", description="Docs section heading in SUMMARY.md")
    tags: tuple[str, ...] = Field(default=())


class ContractItem(BaseModel):
    """One contract of a category, with its test and optional support files."""

    model_config = ConfigDict(frozen=True)

    path: str
    test: str
    fixture: str | None = None
    additional_files: tuple[str, ...] = ()


class CategoryConfig(BaseModel):
    """A named group of contracts scaffolded together into one project."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    contracts: tuple[ContractItem, ...]


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

EXAMPLES: dict[str, ExampleConfig] = {
    "privacy-compliance-audit": ExampleConfig(
        contract="contracts/PrivacyComplianceAudit.sol",
        test="test/PrivacyComplianceAudit.test.ts",
        description=(
            "Privacy-preserving compliance audit system with encrypted scoring "
            "and risk assessment"
        ),
        title="Privacy Compliance Audit",
        docs_description=(
            "This example demonstrates a privacy-preserving compliance audit system using FHEVM. "
            "It supports multiple compliance standards (GDPR, HIPAA, CCPA, SOX, PCI-DSS, ISO27001) "
            "with encrypted scoring, risk assessment, and access control."
        ),
        section="Advanced",
        tags=("compliance", "audit", "access-control"),
    ),
    "fhe-counter": ExampleConfig(
        contract="contracts/FHECounter.sol",
        test="test/FHECounter.test.ts",
        description="A simple FHE counter demonstrating basic encrypted operations",
        title="FHE Counter",
        docs_description=(
            "This example demonstrates how to build a confidential counter using FHEVM, "
            "in comparison to a simple counter."
        ),
        tags=("counter", "arithmetic", "fhe-add", "fhe-sub"),
    ),
    "fhe-add": ExampleConfig(
        contract="contracts/FHEAdd.sol",
        test="test/FHEAdd.test.ts",
        description="Demonstrates FHE addition operations",
        title="FHE Add Operation",
        docs_description=(
            "This example demonstrates how to perform addition operations on encrypted values."
        ),
        tags=("arithmetic", "fhe-add"),
    ),
    "fhe-eq": ExampleConfig(
        contract="contracts/FHEEq.sol",
        test="test/FHEEq.test.ts",
        description="Demonstrates FHE equality comparison operations",
        title="FHE Equality Comparison",
        docs_description=(
            "This example demonstrates how to perform equality comparison operations "
            "on encrypted values."
        ),
        tags=("comparison", "fhe-eq"),
    ),
}

CATEGORIES: dict[str, CategoryConfig] = {
    "compliance": CategoryConfig(
        name="Privacy Compliance Examples",
        description="Privacy-preserving compliance and audit systems using FHEVM",
        contracts=(
            ContractItem(
                path="contracts/PrivacyComplianceAudit.sol",
                test="test/PrivacyComplianceAudit.test.ts",
            ),
        ),
    ),
    "basic": CategoryConfig(
        name="Basic FHEVM Examples",
        description=(
            "Fundamental FHEVM operations including encryption, decryption, "
            "and basic FHE operations"
        ),
        contracts=(
            ContractItem(path="contracts/FHECounter.sol", test="test/FHECounter.test.ts"),
            ContractItem(path="contracts/FHEAdd.sol", test="test/FHEAdd.test.ts"),
            ContractItem(path="contracts/FHEEq.sol", test="test/FHEEq.test.ts"),
        ),
    ),
}


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def get_example(name: str) -> ExampleConfig:
    """Return the registry entry for *name*.

    Raises:
        UnknownExampleError: If *name* is not registered.
    """
    try:
        return EXAMPLES[name]
    except KeyError:
        raise UnknownExampleError(name, EXAMPLES) from None


def get_category(name: str) -> CategoryConfig:
    """Return the category entry for *name*.

    Raises:
        UnknownCategoryError: If *name* is not registered.
    """
    try:
        return CATEGORIES[name]
    except KeyError:
        raise UnknownCategoryError(name, CATEGORIES) from None


def example_title(name: str) -> str:
    """Display title of an example, falling back to the identifier."""
    return get_example(name).title or title_from_identifier(name)


def examples_by_tag(tag: str) -> list[str]:
    """Identifiers of every example carrying *tag* (case-insensitive)."""
    wanted = tag.lower()
    return [name for name, example in EXAMPLES.items() if wanted in example.tags]


def all_tags() -> list[str]:
    return sorted({tag for example in EXAMPLES.values() for tag in example.tags})


def validate_registry(root_dir: Path) -> list[str]:
    """Report every registry path that does not exist under *root_dir*.

    Fixtures and additional files are included.  An empty list means every
    example and category can be scaffolded without warnings.
    """
    problems: list[str] = []
    for name, example in EXAMPLES.items():
        for rel in (example.contract, example.test):
            if not (root_dir / rel).is_file():
                problems.append(f"Example '{name}' references missing file '{rel}'")

    for name, category in CATEGORIES.items():
        for item in category.contracts:
            paths = [item.path, item.test, *item.additional_files]
            if item.fixture:
                paths.append(item.fixture)
            for rel in paths:
                if not (root_dir / rel).is_file():
                    problems.append(f"Category '{name}' references missing file '{rel}'")
    return problems
