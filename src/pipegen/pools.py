# pools.py
from __future__ import annotations

from enum import Enum

from .model import HostedPool


DEFAULT_VM_IMAGE = "ubuntu-latest"


class BuildPool(Enum):
    """Hosted agent images a job can run on."""
    UBUNTU_LATEST = "UbuntuLatest"
    WINDOWS_LATEST = "WindowsLatest"
    MACOS_LATEST = "MacOSLatest"
    UBUNTU_2004 = "Ubuntu2004"
    UBUNTU_2204 = "Ubuntu2204"
    WINDOWS_2019 = "Windows2019"
    WINDOWS_2022 = "Windows2022"
    MACOS_11 = "MacOS11"
    MACOS_12 = "MacOS12"

    @classmethod
    def parse(cls, text: str) -> BuildPool:
        """
        Resolve a pool from its name, e.g. "UbuntuLatest" or "ubuntu2204".

        Raises:
            ValueError: if the name is not a known pool
        """
        wanted = text.strip().lower()
        for pool in cls:
            if pool.value.lower() == wanted or pool.name.lower() == wanted:
                return pool
        valid = ", ".join(p.value for p in cls)
        raise ValueError(f"Unknown build pool {text!r}. Valid pools: {valid}")


_VM_IMAGES = {
    BuildPool.UBUNTU_LATEST: "ubuntu-latest",
    BuildPool.WINDOWS_LATEST: "windows-latest",
    BuildPool.MACOS_LATEST: "macos-latest",
    BuildPool.UBUNTU_2004: "ubuntu-20.04",
    BuildPool.UBUNTU_2204: "ubuntu-22.04",
    BuildPool.WINDOWS_2019: "windows-2019",
    BuildPool.WINDOWS_2022: "windows-2022",
    BuildPool.MACOS_11: "macos-11",
    BuildPool.MACOS_12: "macos-12",
}


def to_hosted_pool(pool: BuildPool) -> HostedPool:
    """Map a BuildPool to its hosted pool. Never fails: anything unmapped gets ubuntu-latest."""
    try:
        vm_image = _VM_IMAGES.get(pool, DEFAULT_VM_IMAGE)
    except TypeError:  # unhashable input
        vm_image = DEFAULT_VM_IMAGE
    return HostedPool(vm_image)
