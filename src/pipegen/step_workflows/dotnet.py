# step_workflows/dotnet.py
from __future__ import annotations

from ..model import DotNetCliStep


# ---------------------------------------------------------------------
# Reusable .NET CLI tasks
# ---------------------------------------------------------------------

ARTIFACT_STAGING_DIRECTORY = "$(Build.ArtifactStagingDirectory)"


def restore() -> DotNetCliStep:
    """Restore NuGet packages for every project."""
    return DotNetCliStep(
        command="restore",
        display_name="Restore NuGet packages",
        projects="**/*.csproj",
    )


def build() -> DotNetCliStep:
    """Build all solutions in Release; expects restore() to have run."""
    return DotNetCliStep(
        command="build",
        display_name="Build solution",
        projects="**/*.sln",
        arguments="--configuration Release --no-restore",
    )


def test() -> DotNetCliStep:
    """Run every *Tests project against the Release build."""
    return DotNetCliStep(
        command="test",
        display_name="Run unit tests",
        projects="**/*Tests.csproj",
        arguments="--configuration Release --no-build --verbosity normal",
    )


def publish() -> DotNetCliStep:
    return DotNetCliStep(
        command="publish",
        display_name="Publish application",
        projects="**/*.csproj",
        arguments=f"--configuration Release --no-build --output {ARTIFACT_STAGING_DIRECTORY}",
    )
