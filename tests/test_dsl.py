import pytest

from pipegen.dsl import checkout, job, jobs, stage, stages
from pipegen.model import CheckoutStep, HostedPool, Pipeline, SingleStagePipeline
from pipegen.pools import BuildPool
from pipegen.step_workflows import dotnet


def test_task_factories():
    r, b, t, p = dotnet.restore(), dotnet.build(), dotnet.test(), dotnet.publish()

    assert (r.command, r.display_name, r.projects, r.arguments) == (
        "restore", "Restore NuGet packages", "**/*.csproj", None,
    )
    assert (b.command, b.display_name, b.projects, b.arguments) == (
        "build", "Build solution", "**/*.sln", "--configuration Release --no-restore",
    )
    assert (t.command, t.display_name, t.projects, t.arguments) == (
        "test", "Run unit tests", "**/*Tests.csproj",
        "--configuration Release --no-build --verbosity normal",
    )
    assert (p.command, p.display_name, p.projects) == ("publish", "Publish application", "**/*.csproj")
    assert p.arguments == "--configuration Release --no-build --output $(Build.ArtifactStagingDirectory)"


def test_task_factories_return_equal_values():
    assert dotnet.build() == dotnet.build()


def test_job_keeps_step_order_and_maps_pool():
    j = job("J", checkout(), dotnet.restore(), dotnet.build(), pool=BuildPool.WINDOWS_2022)

    assert [getattr(s, "command", "checkout") for s in j.steps] == ["checkout", "restore", "build"]
    assert j.pool == HostedPool("windows-2022")
    assert j.display_name == "J"


def test_job_accepts_hosted_pool_and_steps_list():
    j = job("J", dotnet.build(), steps_list=[checkout(), dotnet.restore()], pool=HostedPool("custom-image"))

    assert isinstance(j.steps[0], CheckoutStep)
    assert [getattr(s, "command", None) for s in j.steps[1:]] == ["restore", "build"]
    assert j.pool.vm_image == "custom-image"


def test_job_requires_steps():
    with pytest.raises(ValueError, match="at least one step"):
        job("Empty")


def test_job_rejects_task_before_checkout():
    with pytest.raises(ValueError, match="must start with a checkout"):
        job("Bad", dotnet.restore(), checkout())


def test_job_rejects_task_only_steps():
    with pytest.raises(ValueError, match="must start with a checkout"):
        job("NoCheckout", dotnet.restore(), dotnet.build())


def test_stage_requires_jobs():
    with pytest.raises(ValueError, match="at least one job"):
        stage("Empty")


def test_pipeline_shapes():
    j = job("J", checkout())
    assert isinstance(stages(stage("S", j)), Pipeline)
    assert isinstance(jobs(j), SingleStagePipeline)
    assert stages(stage("A", j), stage("B", j)).stages[1].name == "B"
