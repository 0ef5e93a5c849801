from .dotnet_build import dotnet_build_pipeline
from .dotnet_pr import dotnet_pr_pipeline

__all__ = ["dotnet_build_pipeline", "dotnet_pr_pipeline"]
