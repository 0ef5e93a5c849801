# pipelines/dotnet_pr.py
# Lightweight pull request validation: restore, build and test only.
from __future__ import annotations

from ..definition import PipelineDefinition, TargetPathType
from ..dsl import checkout, job, jobs
from ..pools import BuildPool
from ..step_workflows import dotnet


def dotnet_pr_pipeline(
    file_name: str = "dotnet-pr.yml",
    folder: str = ".azdo",
    *,
    pool: BuildPool = BuildPool.UBUNTU_LATEST,
) -> PipelineDefinition:
    """
    PR validation never produces artifacts, so there is no publish step.

    The file lands at ``<folder>/<file_name>`` relative to the git root.
    """
    pipeline = jobs(
        job(
            "PRValidation",
            checkout(),
            dotnet.restore(),
            dotnet.build(),
            dotnet.test(),
            display_name="Pull Request Validation",
            pool=pool,
        ),
    )

    return PipelineDefinition(
        name="DotNetPRPipeline",
        pipeline=pipeline,
        target_file=f"{folder}/{file_name}",
        target_path_type=TargetPathType.RELATIVE_TO_GIT_ROOT,
    )
