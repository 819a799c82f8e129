"""Shared machinery for the example and category scaffolders.

Both scaffolders follow the same sequence: validate everything up front,
create the output directory (optionally seeded from a base Hardhat
template), copy sources into ``contracts/`` and ``test/``, then render
``deploy/deploy.ts``, ``package.json`` and ``README.md``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from ..config import TEMPLATE_OVERLAY_DIRS, Settings
from ..errors import InvalidTemplateError, MissingSourceError, OutputExistsError
from ..utils import copy_file, copy_tree, load_json, print_warning, save_json
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class ScaffoldResult(BaseModel):
    """What a scaffolding run produced."""

    output_dir: Path
    contract_names: list[str] = Field(default_factory=list)
    files: list[Path] = Field(default_factory=list, description="Every file written, in order")
    warnings: list[str] = Field(default_factory=list)

    def relative_files(self) -> list[str]:
        """Written files relative to ``output_dir``, POSIX-style."""
        return [p.relative_to(self.output_dir).as_posix() for p in self.files]


# ---------------------------------------------------------------------------
# Base scaffolder
# ---------------------------------------------------------------------------


class ProjectScaffolder:
    """Common steps shared by ``ExampleScaffolder`` and ``CategoryScaffolder``."""

    package_prefix = "fhevm-project"

    def __init__(
        self,
        settings: Settings | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.renderer = renderer or TemplateRenderer()

    # -- Validation --------------------------------------------------------

    def _check_output_free(self, output_dir: Path) -> None:
        if output_dir.exists():
            raise OutputExistsError(output_dir)

    def _check_template(self) -> None:
        template = self.settings.base_template
        if template is None:
            return
        if not template.is_dir():
            raise MissingSourceError("base template", template)
        package_json = template / "package.json"
        if package_json.is_file():
            try:
                load_json(package_json)
            except ValueError as exc:
                raise InvalidTemplateError(package_json, str(exc)) from None

    def _require_source(self, kind: str, relative: str) -> Path:
        path = self.settings.resolve(relative)
        if not path.is_file():
            raise MissingSourceError(kind, relative)
        return path

    # -- Output tree -------------------------------------------------------

    def _create_output(self, output_dir: Path, result: ScaffoldResult) -> None:
        """Create *output_dir*, seeding it from the base template if set."""
        try:
            output_dir.mkdir(parents=True)
        except FileExistsError:
            raise OutputExistsError(output_dir) from None

        template = self.settings.base_template
        if template is not None:
            result.files.extend(
                copy_tree(
                    template,
                    output_dir,
                    exclude=self.settings.exclude_dirs,
                    exclude_top_level=TEMPLATE_OVERLAY_DIRS,
                )
            )
        for sub in ("contracts", "test"):
            (output_dir / sub).mkdir(exist_ok=True)

    def _copy_into(
        self, source: Path, output_dir: Path, subdir: str, result: ScaffoldResult, name: str | None = None
    ) -> Path:
        target = copy_file(source, output_dir / subdir / (name or source.name))
        result.files.append(target)
        return target

    def _warn(self, result: ScaffoldResult, message: str) -> None:
        result.warnings.append(message)
        print_warning(message)

    # -- Generated files ---------------------------------------------------

    def _write_deploy_script(
        self, output_dir: Path, contract_names: list[str], deploy_id: str, result: ScaffoldResult
    ) -> Path:
        path = self.renderer.render_to_file(
            "deploy.ts.j2",
            output_dir / "deploy" / "deploy.ts",
            {"contract_names": contract_names, "deploy_id": deploy_id},
        )
        result.files.append(path)
        return path

    def _write_package_json(
        self, output_dir: Path, identifier: str, description: str, result: ScaffoldResult
    ) -> Path:
        """Create ``package.json``, or update the one the base template brought."""
        path = output_dir / "package.json"
        package: dict[str, Any] = load_json(path) if path.exists() else {}
        package["name"] = f"{self.package_prefix}-{identifier}"
        package["description"] = description
        package.setdefault("version", "1.0.0")
        package["homepage"] = self.settings.homepage_for(identifier)
        save_json(package, path)
        if path not in result.files:
            result.files.append(path)
        return path

    def _write_readme(
        self, output_dir: Path, template: str, context: dict[str, Any], result: ScaffoldResult
    ) -> Path:
        path = self.renderer.render_to_file(template, output_dir / "README.md", context)
        if path not in result.files:
            result.files.append(path)
        return path
