# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class HostedPool:
    """A Microsoft-hosted agent pool, identified by its VM image name."""
    vm_image: str


@dataclass(frozen=True)
class CheckoutStep:
    """Checks out a repository (``self`` = the repo the pipeline lives in)."""
    repository: str = "self"


@dataclass(frozen=True)
class DotNetCliStep:
    """
    A ``DotNetCoreCLI`` task invocation.

    `projects` is a glob selecting the project/solution files the command
    runs against. `arguments` is passed through verbatim, so provider
    variables such as ``$(Build.ArtifactStagingDirectory)`` stay unresolved.
    """
    command: str
    display_name: str
    projects: str
    arguments: Optional[str] = None


Step = Union[CheckoutStep, DotNetCliStep]


@dataclass(frozen=True)
class Job:
    """A job: ordered steps executed on one agent from `pool`."""
    name: str
    display_name: str
    pool: HostedPool
    steps: Tuple[Step, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Stage:
    name: str
    display_name: str
    jobs: Tuple[Job, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Pipeline:
    """Multi-stage pipeline (top-level ``stages:``)."""
    stages: Tuple[Stage, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SingleStagePipeline:
    """Pipeline with jobs only (top-level ``jobs:``, no stage wrapper)."""
    jobs: Tuple[Job, ...] = field(default_factory=tuple)


AnyPipeline = Union[Pipeline, SingleStagePipeline]
