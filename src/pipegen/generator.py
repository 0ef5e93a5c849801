# generator.py
from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from . import settings
from .definition import PipelineDefinition
from .git_facts.git import repo_root as git_repo_root
from .pipelines import dotnet_build_pipeline, dotnet_pr_pipeline
from .pools import BuildPool
from .serializer import SCHEMA_VERSION, SchemaError, serialize
from .ui.console import get_console


# ----------------------------------------------------------------------
# Errors / results
# ----------------------------------------------------------------------

@dataclass
class GenerationError(Exception):
    """
    Fatal generation error: the run cannot continue at all
    (e.g. the output directory cannot be created).
    """
    kind: str
    message: str
    definition: Optional[str] = None  # None when no single definition is at fault
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.kind}: {self.message}"]
        if self.definition:
            lines.append(f"definition={self.definition}")
        for k, v in self.details.items():
            lines.append(f"{k}={v}")
        return "\n".join(lines)


@dataclass(frozen=True)
class GenerationResult:
    name: str
    path: Path
    status: str  # "ok" | "failed"
    size: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


ERROR_HINTS = {
    SchemaError: "Fix the pipeline definition; Azure DevOps would reject this YAML.",
    PermissionError: "Check write permissions for the output directory.",
    OSError: "Check that the target path is writable and not a directory.",
}


def _hint_for(exc: Exception) -> Optional[str]:
    for exc_type, hint in ERROR_HINTS.items():
        if isinstance(exc, exc_type):
            return hint
    return None


def _display(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


# ----------------------------------------------------------------------
# Definitions
# ----------------------------------------------------------------------

def default_definitions(
    build_file: str = settings.BUILD_FILE,
    pr_file: str = settings.PR_FILE,
    pool: BuildPool = BuildPool.UBUNTU_LATEST,
    folder: str = settings.OUTPUT_DIR,
) -> List[PipelineDefinition]:
    """The standard .NET build pipeline and PR validation pipeline."""
    return [
        dotnet_build_pipeline(build_file, build_pool=pool, publish_pool=pool),
        dotnet_pr_pipeline(pr_file, folder, pool=pool),
    ]


def find_repo_root(start: str | Path | None = None) -> Path:
    """Git work tree root, or `start` (default: cwd) outside a repository."""
    try:
        return git_repo_root(cwd=start)
    except (subprocess.CalledProcessError, FileNotFoundError):
        fallback = Path(start or ".").resolve()
        get_console().print_debug(f"Not inside a git work tree, using {fallback} as repository root")
        return fallback


def resolve_output_dir(output_dir: str | Path | None, root: str | Path) -> Path:
    """Output directory for a run; relative paths hang off the repository root."""
    out = Path(output_dir) if output_dir is not None else Path(settings.OUTPUT_DIR)
    if not out.is_absolute():
        out = Path(root) / out
    return out


def render(definition: PipelineDefinition, schema_version: int = SCHEMA_VERSION) -> str:
    """YAML for one definition, without touching the filesystem."""
    return serialize(definition, schema_version=schema_version)


# ----------------------------------------------------------------------
# Orchestration
# ----------------------------------------------------------------------

def _prepare_output_dir(output_dir: Path) -> None:
    console = get_console()
    existed = output_dir.is_dir()
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise GenerationError(
            kind="output_dir",
            message=f"Could not create output directory {output_dir}",
            details={"reason": str(e)},
        ) from e
    if not existed:
        console.print_created_directory(_display(output_dir))


def _write_definition(
    definition: PipelineDefinition,
    output_dir: Path,
    root: Path,
    schema_version: int,
) -> GenerationResult:
    text = serialize(definition, schema_version=schema_version)

    path = definition.resolve_path(output_dir, root)
    path.parent.mkdir(parents=True, exist_ok=True)

    # write to tmp next to the target, then atomic rename
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        tmp.write_text(text, encoding="utf-8")
        tmp.replace(path)
    finally:
        tmp.unlink(missing_ok=True)

    return GenerationResult(
        name=definition.name,
        path=path,
        status="ok",
        size=path.stat().st_size,
    )


def generate(
    definitions: Iterable[PipelineDefinition],
    *,
    output_dir: str | Path | None = None,
    repo_root: str | Path | None = None,
    schema_version: int = SCHEMA_VERSION,
) -> List[GenerationResult]:
    """
    Serialize and write each definition, in order.

    A definition that fails to serialize or write is reported and recorded
    as "failed"; the remaining definitions are still generated.

    Relative `output_dir` values are resolved against the repository root.

    Raises:
        GenerationError: the output directory cannot be created
    """
    console = get_console()
    definitions = list(definitions)

    root = Path(repo_root).resolve() if repo_root is not None else find_repo_root()
    out = resolve_output_dir(output_dir, root)

    console.print_generation_started(_display(out), len(definitions))
    _prepare_output_dir(out)

    results: List[GenerationResult] = []
    for definition in definitions:
        console.print_processing(definition.name)
        try:
            result = _write_definition(definition, out, root, schema_version)
        except Exception as e:
            console.print_failure(definition.name, str(e), hint=_hint_for(e))
            console.print_debug(f"{type(e).__name__} while generating {definition.name}")
            results.append(
                GenerationResult(
                    name=definition.name,
                    path=definition.resolve_path(out, root),
                    status="failed",
                    error=str(e),
                )
            )
            continue

        console.print_generated(_display(result.path))
        results.append(result)

    return results
