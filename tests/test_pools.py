import pytest

from pipegen.model import HostedPool
from pipegen.pools import BuildPool, DEFAULT_VM_IMAGE, to_hosted_pool


EXPECTED = {
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


def test_every_pool_is_mapped():
    assert set(EXPECTED) == set(BuildPool)


@pytest.mark.parametrize("pool,image", list(EXPECTED.items()))
def test_to_hosted_pool(pool, image):
    assert to_hosted_pool(pool) == HostedPool(image)


@pytest.mark.parametrize("value", ["UbuntuLatest", "windows-2022", None, 42, ["ubuntu"], {"pool": 1}])
def test_unmapped_values_fall_back_to_ubuntu_latest(value):
    assert to_hosted_pool(value).vm_image == DEFAULT_VM_IMAGE == "ubuntu-latest"


def test_parse_accepts_value_and_member_names():
    assert BuildPool.parse("UbuntuLatest") is BuildPool.UBUNTU_LATEST
    assert BuildPool.parse("ubuntu2204") is BuildPool.UBUNTU_2204
    assert BuildPool.parse(" MacOS12 ") is BuildPool.MACOS_12
    assert BuildPool.parse("windows_2019") is BuildPool.WINDOWS_2019


def test_parse_unknown_pool_lists_valid_names():
    with pytest.raises(ValueError) as e:
        BuildPool.parse("solaris")
    assert "solaris" in str(e.value)
    assert "UbuntuLatest" in str(e.value)
