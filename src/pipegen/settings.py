from __future__ import annotations
import os

# Directory (relative to the repository root) that generated pipelines go to
OUTPUT_DIR = os.environ.get("PIPEGEN_OUTPUT_DIR", ".azdo")
BUILD_FILE = os.environ.get("PIPEGEN_BUILD_FILE", "azure-pipelines.yml")
PR_FILE = os.environ.get("PIPEGEN_PR_FILE", "azure-pipelines-pr.yml")
POOL = os.environ.get("PIPEGEN_POOL", "UbuntuLatest")
