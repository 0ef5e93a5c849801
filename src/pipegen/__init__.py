from .definition import PipelineDefinition, TargetPathType
from .dsl import checkout, job, jobs, stage, stages
from .generator import generate, render
from .model import CheckoutStep, DotNetCliStep, HostedPool, Job, Pipeline, SingleStagePipeline, Stage
from .pools import BuildPool, to_hosted_pool
from .serializer import SchemaError, serialize

__all__ = [
    "PipelineDefinition", "TargetPathType",
    "checkout", "job", "jobs", "stage", "stages",
    "generate", "render",
    "CheckoutStep", "DotNetCliStep", "HostedPool", "Job", "Pipeline", "SingleStagePipeline", "Stage",
    "BuildPool", "to_hosted_pool",
    "SchemaError", "serialize",
]
