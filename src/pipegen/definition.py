# definition.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .model import AnyPipeline, Pipeline, SingleStagePipeline


class TargetPathType(Enum):
    """How a definition's `target_file` is resolved when written."""
    RELATIVE_TO_OUTPUT_DIR = "output-dir"  # under the generator's .azdo directory
    RELATIVE_TO_GIT_ROOT = "git-root"


@dataclass(frozen=True)
class PipelineDefinition:
    """
    A pipeline plus where its YAML goes.

    `pipeline` is either a multi-stage `Pipeline` or a `SingleStagePipeline`;
    the serializer emits ``stages:`` or ``jobs:`` accordingly.
    """
    name: str
    pipeline: AnyPipeline
    target_file: str
    target_path_type: TargetPathType = TargetPathType.RELATIVE_TO_OUTPUT_DIR

    @property
    def is_multi_stage(self) -> bool:
        return isinstance(self.pipeline, Pipeline)

    @property
    def is_single_stage(self) -> bool:
        return isinstance(self.pipeline, SingleStagePipeline)

    def resolve_path(self, output_dir: str | Path, repo_root: str | Path) -> Path:
        """Absolute-or-relative path the YAML file is written to."""
        if self.target_path_type is TargetPathType.RELATIVE_TO_GIT_ROOT:
            return Path(repo_root) / self.target_file
        return Path(output_dir) / self.target_file
