# src/pipegen/dsl.py
from __future__ import annotations

from typing import Iterable, Optional, Union

from .model import (
    CheckoutStep,
    HostedPool,
    Job,
    Pipeline,
    SingleStagePipeline,
    Stage,
    Step,
)
from .pools import BuildPool, to_hosted_pool


# ---------------------------------------------------------------------
# Step helpers
# ---------------------------------------------------------------------

def checkout(repository: str = "self") -> CheckoutStep:
    """Create a checkout step."""
    return CheckoutStep(repository=repository)


# ---------------------------------------------------------------------
# Functional job / stage helpers
# ---------------------------------------------------------------------

def job(
    name: str,
    *steps: Step,  # allow: job("x", checkout(), restore(), ...)
    display_name: Optional[str] = None,
    pool: Union[BuildPool, HostedPool] = BuildPool.UBUNTU_LATEST,
    steps_list: Optional[Iterable[Step]] = None,  # allow: job("x", steps_list=[...])
) -> Job:
    steps_final: list[Step] = []
    if steps_list:
        steps_final.extend(steps_list)
    steps_final.extend(steps)

    if not steps_final:
        raise ValueError(f"job({name!r}) must have at least one step")

    # task steps run against checked-out sources
    if not isinstance(steps_final[0], CheckoutStep):
        raise ValueError(f"job({name!r}) must start with a checkout step")

    hosted = pool if isinstance(pool, HostedPool) else to_hosted_pool(pool)

    return Job(
        name=name,
        display_name=display_name or name,
        pool=hosted,
        steps=tuple(steps_final),
    )


def stage(name: str, *jobs: Job, display_name: Optional[str] = None) -> Stage:
    if not jobs:
        raise ValueError(f"stage({name!r}) must have at least one job")
    return Stage(name=name, display_name=display_name or name, jobs=tuple(jobs))


def stages(*items: Stage) -> Pipeline:
    """Multi-stage pipeline helper: stages(stage(...), stage(...))."""
    return Pipeline(stages=tuple(items))


def jobs(*items: Job) -> SingleStagePipeline:
    """Single-stage pipeline helper: jobs(job(...), ...)."""
    return SingleStagePipeline(jobs=tuple(items))
