# cli.py
from __future__ import annotations

import sys
from pathlib import Path

import click

from . import settings
from .generator import (
    GenerationError,
    default_definitions,
    find_repo_root,
    generate,
    render,
    resolve_output_dir,
)
from .pools import BuildPool, to_hosted_pool
from .ui.console import Console, get_console, set_console


POOL_NAMES = [p.value for p in BuildPool]


def _parse_pool(ctx, param, value: str) -> BuildPool:
    try:
        return BuildPool.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.pass_context
def cli(ctx, debug):
    """pipegen: generate Azure DevOps pipeline YAML from Python definitions."""
    console = Console(debug=debug)
    set_console(console)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


@cli.command("generate")
@click.option(
    "--output-dir",
    default=settings.OUTPUT_DIR,
    show_default=True,
    help="Output directory (relative paths are resolved against the repository root)",
)
@click.option("--repo-root", default=None, help="Repository root (defaults to the git work tree root)")
@click.option("--build-file", default=settings.BUILD_FILE, show_default=True, help="File name of the build pipeline")
@click.option("--pr-file", default=settings.PR_FILE, show_default=True, help="File name of the PR validation pipeline")
@click.option(
    "--pool",
    default=settings.POOL,
    show_default=True,
    callback=_parse_pool,
    help=f"Hosted pool for every job ({', '.join(POOL_NAMES)})",
)
@click.pass_context
def generate_cmd(ctx, output_dir, repo_root, build_file, pr_file, pool):
    """Generate all pipeline definitions."""
    console = get_console()

    definitions = default_definitions(build_file, pr_file, pool=pool, folder=output_dir)

    root = Path(repo_root).resolve() if repo_root is not None else find_repo_root()
    out = resolve_output_dir(output_dir, root)

    try:
        results = generate(definitions, output_dir=out, repo_root=root)
    except GenerationError as e:
        console.print_error(
            "Pipeline generation aborted",
            e.message,
            details=[f"{k}: {v}" for k, v in e.details.items()],
        )
        sys.exit(1)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)

    console.print_summary(str(out), results)

    if any(not r.ok for r in results):
        sys.exit(1)
    console.print_info("\nPipeline generation completed successfully!")


@cli.command()
@click.argument("which", type=click.Choice(["build", "pr"]))
@click.option("--pool", default=settings.POOL, show_default=True, callback=_parse_pool, help="Hosted pool for every job")
@click.pass_context
def show(ctx, which, pool):
    """Print the YAML of one pipeline definition to stdout."""
    console = get_console()
    build_def, pr_def = default_definitions(pool=pool)
    definition = build_def if which == "build" else pr_def

    try:
        click.echo(render(definition), nl=False)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


@cli.command()
def pools():
    """List build pools and their hosted image names."""
    width = max(len(n) for n in POOL_NAMES)
    for pool in BuildPool:
        click.echo(f"{pool.value.ljust(width)}  {to_hosted_pool(pool).vm_image}")


if __name__ == "__main__":
    cli()
