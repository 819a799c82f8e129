"""FHEVM example generator configuration.

Centralised, typed settings for the generator commands. All settings use
Pydantic v2 models so they can be validated at construction time and serialised
to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_EXCLUDE_DIRS: list[str] = [
    "node_modules",
    "artifacts",
    "cache",
    "coverage",
    "types",
    "dist",
    ".git",
]

# Base-template directories whose contents are replaced by the example files.
TEMPLATE_OVERLAY_DIRS: list[str] = ["contracts", "test", "deploy"]


class Settings(BaseModel):
    """Settings shared by ``create-fhevm-example``, ``create-fhevm-category``
    and ``generate-fhevm-docs``.

    Registry paths are relative to ``root_dir``.  Instances are typically
    created once by the CLI entry point and then passed to the scaffolders.
    """

    root_dir: Path = Field(default_factory=Path.cwd)
    output_root: Path | None = Field(
        default=None, description="Where default output directories go (defaults to <root>/output)"
    )
    base_template: Path | None = Field(
        default=None, description="Optional Hardhat project skeleton copied under the example files"
    )
    homepage_base: str = Field(default="https://github.com/fhevm-examples")
    docs_dir: str = Field(default="docs")
    exclude_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def output_base(self) -> Path:
        """Parent directory for output directories chosen by default."""
        return self.output_root or (self.root_dir / "output")

    @property
    def docs_path(self) -> Path:
        """Directory that holds generated documentation pages."""
        return self.root_dir / self.docs_dir

    @property
    def summary_path(self) -> Path:
        """Path to the GitBook ``SUMMARY.md`` table of contents."""
        return self.docs_path / "SUMMARY.md"

    def resolve(self, relative: str | Path) -> Path:
        """Resolve a registry path against the repository root."""
        return self.root_dir / relative

    def default_example_output(self, name: str) -> Path:
        return self.output_base / f"fhevm-example-{name}"

    def default_category_output(self, name: str) -> Path:
        return self.output_base / f"fhevm-category-{name}"

    def homepage_for(self, name: str) -> str:
        return f"{self.homepage_base.rstrip('/')}/{name}"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the settings to a JSON file.

        Args:
            path: Destination file.

        Returns:
            The path where the file was written.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load previously-saved settings from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, **overrides: Any) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            FHEVM_ROOT_DIR, FHEVM_OUTPUT_ROOT, FHEVM_BASE_TEMPLATE,
            FHEVM_HOMEPAGE_BASE.

        Keyword arguments whose value is not ``None`` take precedence over the
        environment, so CLI flags can be passed straight through.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FHEVM_ROOT_DIR"):
            kwargs["root_dir"] = Path(os.environ["FHEVM_ROOT_DIR"])
        if os.environ.get("FHEVM_OUTPUT_ROOT"):
            kwargs["output_root"] = Path(os.environ["FHEVM_OUTPUT_ROOT"])
        if os.environ.get("FHEVM_BASE_TEMPLATE"):
            kwargs["base_template"] = Path(os.environ["FHEVM_BASE_TEMPLATE"])
        if os.environ.get("FHEVM_HOMEPAGE_BASE"):
            kwargs["homepage_base"] = os.environ["FHEVM_HOMEPAGE_BASE"]

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)
