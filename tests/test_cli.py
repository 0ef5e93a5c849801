import yaml
from click.testing import CliRunner

from pipegen.cli import cli


def test_generate_command(tmp_path):
    result = CliRunner().invoke(cli, ["generate", "--repo-root", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / ".azdo" / "azure-pipelines.yml").exists()
    assert (tmp_path / ".azdo" / "azure-pipelines-pr.yml").exists()
    assert "Files generated: 2 of 2" in result.output


def test_generate_command_with_pool_and_names(tmp_path):
    result = CliRunner().invoke(
        cli,
        [
            "generate",
            "--repo-root", str(tmp_path),
            "--output-dir", "pipelines",
            "--build-file", "build.yml",
            "--pr-file", "pr.yml",
            "--pool", "Windows2022",
        ],
    )

    assert result.exit_code == 0, result.output
    data = yaml.safe_load((tmp_path / "pipelines" / "pr.yml").read_text(encoding="utf-8"))
    assert data["jobs"][0]["pool"]["vmImage"] == "windows-2022"
    assert (tmp_path / "pipelines" / "build.yml").exists()


def test_generate_rejects_unknown_pool(tmp_path):
    result = CliRunner().invoke(cli, ["generate", "--repo-root", str(tmp_path), "--pool", "Solaris"])
    assert result.exit_code == 2


def test_generate_fatal_error_exits_non_zero(tmp_path):
    (tmp_path / "blocker").write_text("")
    result = CliRunner().invoke(
        cli, ["generate", "--repo-root", str(tmp_path), "--output-dir", str(tmp_path / "blocker" / "x")]
    )
    assert result.exit_code == 1


def test_show_command_prints_yaml():
    result = CliRunner().invoke(cli, ["show", "pr", "--pool", "MacOS12"])

    assert result.exit_code == 0, result.output
    data = yaml.safe_load(result.output)
    assert data["jobs"][0]["job"] == "PRValidation"
    assert data["jobs"][0]["pool"]["vmImage"] == "macos-12"


def test_pools_command_lists_every_pool():
    result = CliRunner().invoke(cli, ["pools"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 9
    assert lines[0].split() == ["UbuntuLatest", "ubuntu-latest"]


def test_generate_summary_shows_resolved_output_dir(tmp_path):
    result = CliRunner().invoke(cli, ["generate", "--repo-root", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert f"Output directory: {tmp_path.resolve() / '.azdo'}" in result.output
