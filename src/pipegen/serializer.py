# serializer.py
"""
Turn a `PipelineDefinition` into Azure DevOps pipeline YAML.

Two passes:
  1. validate the object graph against the constraints Azure DevOps enforces
     when it loads a pipeline (non-empty stages/jobs/steps, identifier-shaped
     unique names, a pool image on every job)
  2. map it to plain dicts/lists in schema order and dump with PyYAML

The output for a given definition is byte-for-byte stable: no timestamps,
no sorting, no environment lookups.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

import yaml

from .definition import PipelineDefinition
from .model import CheckoutStep, DotNetCliStep, Job, Pipeline, SingleStagePipeline, Stage, Step


SCHEMA_VERSION = 1
SUPPORTED_SCHEMA_VERSIONS = (1,)

DOTNET_CLI_TASK = "DotNetCoreCLI@2"

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

HEADER = (
    "### DO NOT EDIT THIS FILE MANUALLY ###\n"
    "### It is generated by pipegen from the {name} definition. ###\n"
    "### Change the definition and regenerate instead. ###\n"
    "\n"
)


@dataclass
class SchemaError(Exception):
    """The pipeline graph violates an Azure DevOps schema constraint."""
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


# ----------------------------------------------------------------------
# Validation
# ----------------------------------------------------------------------

def _check_name(kind: str, name: str, path: str) -> None:
    if not name:
        raise SchemaError(path, f"{kind} name must not be empty")
    if not _IDENTIFIER.match(name):
        raise SchemaError(
            path,
            f"{kind} name {name!r} may only contain letters, digits and '_' "
            "and must not start with a digit",
        )


def _check_unique(kind: str, names: Iterable[str], path: str) -> None:
    seen: set[str] = set()
    for n in names:
        if n in seen:
            raise SchemaError(path, f"duplicate {kind} name {n!r}")
        seen.add(n)


def _validate_step(step: Step, path: str) -> None:
    if isinstance(step, CheckoutStep):
        if not step.repository:
            raise SchemaError(path, "checkout step needs a repository")
        return
    if isinstance(step, DotNetCliStep):
        if not step.command:
            raise SchemaError(path, "DotNetCoreCLI task needs a command")
        if not step.projects:
            raise SchemaError(path, f"DotNetCoreCLI '{step.command}' task needs a projects glob")
        return
    raise SchemaError(path, f"unsupported step type {type(step).__name__}")


def _validate_job(job: Job, path: str) -> None:
    _check_name("job", job.name, path)
    if not job.pool or not job.pool.vm_image:
        raise SchemaError(path, f"job '{job.name}' has no pool vmImage")
    if not job.steps:
        raise SchemaError(path, f"job '{job.name}' has no steps")
    if not isinstance(job.steps[0], CheckoutStep):
        raise SchemaError(path, f"job '{job.name}' must check out sources before its first task")
    for i, step in enumerate(job.steps):
        _validate_step(step, f"{path}.steps[{i}]")


def _validate_jobs(jobs: Iterable[Job], path: str) -> None:
    jobs = list(jobs)
    if not jobs:
        raise SchemaError(path, "at least one job is required")
    _check_unique("job", (j.name for j in jobs), path)
    for i, j in enumerate(jobs):
        _validate_job(j, f"{path}.jobs[{i}]")


def validate(definition: PipelineDefinition) -> None:
    """Raise SchemaError if the definition cannot be loaded by Azure DevOps."""
    pipeline = definition.pipeline
    root = definition.name or "pipeline"

    if isinstance(pipeline, Pipeline):
        if not pipeline.stages:
            raise SchemaError(root, "at least one stage is required")
        _check_unique("stage", (s.name for s in pipeline.stages), root)
        for i, st in enumerate(pipeline.stages):
            path = f"{root}.stages[{i}]"
            _check_name("stage", st.name, path)
            _validate_jobs(st.jobs, path)
        return

    if isinstance(pipeline, SingleStagePipeline):
        _validate_jobs(pipeline.jobs, root)
        return

    raise SchemaError(root, f"unsupported pipeline type {type(pipeline).__name__}")


# ----------------------------------------------------------------------
# Mapping to plain data
# ----------------------------------------------------------------------

def _step_to_dict(step: Step) -> Dict[str, Any]:
    if isinstance(step, CheckoutStep):
        return {"checkout": step.repository}

    inputs: Dict[str, Any] = {
        "command": step.command,
        "projects": step.projects,
    }
    if step.arguments:
        inputs["arguments"] = step.arguments
    return {
        "task": DOTNET_CLI_TASK,
        "displayName": step.display_name,
        "inputs": inputs,
    }


def _job_to_dict(job: Job) -> Dict[str, Any]:
    return {
        "job": job.name,
        "displayName": job.display_name,
        "pool": {"vmImage": job.pool.vm_image},
        "steps": [_step_to_dict(s) for s in job.steps],
    }


def _stage_to_dict(stage: Stage) -> Dict[str, Any]:
    return {
        "stage": stage.name,
        "displayName": stage.display_name,
        "jobs": [_job_to_dict(j) for j in stage.jobs],
    }


def to_dict(definition: PipelineDefinition) -> Dict[str, List[Dict[str, Any]]]:
    """Plain-data form of the pipeline, keys in Azure DevOps schema order."""
    pipeline = definition.pipeline
    if isinstance(pipeline, Pipeline):
        return {"stages": [_stage_to_dict(s) for s in pipeline.stages]}
    return {"jobs": [_job_to_dict(j) for j in pipeline.jobs]}


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def serialize(definition: PipelineDefinition, schema_version: int = SCHEMA_VERSION) -> str:
    """
    Validate and render a definition as YAML text.

    Raises:
        SchemaError: unsupported schema version or an invalid pipeline graph
    """
    if schema_version not in SUPPORTED_SCHEMA_VERSIONS:
        raise SchemaError(
            definition.name or "pipeline",
            f"unsupported schema version {schema_version!r} "
            f"(supported: {', '.join(map(str, SUPPORTED_SCHEMA_VERSIONS))})",
        )

    validate(definition)
    body = yaml.safe_dump(
        to_dict(definition),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=4096,  # keep long argument strings on one line
    )
    return HEADER.format(name=definition.name) + body
