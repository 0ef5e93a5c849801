# pipelines/dotnet_build.py
# Multi-stage .NET pipeline: build + test, then a separate publish stage.
from __future__ import annotations

from ..definition import PipelineDefinition, TargetPathType
from ..dsl import checkout, job, stage, stages
from ..pools import BuildPool
from ..step_workflows import dotnet


def dotnet_build_pipeline(
    target_file: str = "dotnet-build.yml",
    *,
    build_pool: BuildPool = BuildPool.UBUNTU_LATEST,
    publish_pool: BuildPool = BuildPool.UBUNTU_LATEST,
    path_type: TargetPathType = TargetPathType.RELATIVE_TO_OUTPUT_DIR,
) -> PipelineDefinition:
    pipeline = stages(
        stage(
            "Build",
            job(
                "BuildJob",
                checkout(),
                dotnet.restore(),
                dotnet.build(),
                dotnet.test(),
                display_name="Build and Test .NET Application",
                pool=build_pool,
            ),
            display_name="Build and Test",
        ),
        stage(
            "Publish",
            job(
                "PublishJob",
                checkout(),
                dotnet.restore(),
                dotnet.build(),
                dotnet.publish(),
                display_name="Publish .NET Application",
                pool=publish_pool,
            ),
            display_name="Publish Application",
        ),
    )

    return PipelineDefinition(
        name="DotNetBuildPipeline",
        pipeline=pipeline,
        target_file=target_file,
        target_path_type=path_type,
    )
