"""commitpick CLI main entry point."""

import json

import click

from commitpick import __version__
from commitpick.config import settings
from commitpick.git import CommitMetadata, GitRepository, GitRepositoryError
from commitpick.logging import configure_logging


def _format_commit(meta: CommitMetadata) -> str:
    lines = [
        f"commit {meta.hash}",
        f"Author: {meta.author}",
        f"Date:   {meta.date.isoformat()}",
    ]
    if meta.message:
        lines.append("")
        lines.extend(f"    {line}".rstrip() for line in meta.message.splitlines())
    return "\n".join(lines)


def _emit(ctx: click.Context, meta: CommitMetadata) -> None:
    if ctx.obj["json"]:
        click.echo(json.dumps(meta.to_dict(), indent=2))
    else:
        click.echo(_format_commit(meta))


def _open_repository(ctx: click.Context, seed: int | None = None) -> GitRepository:
    try:
        return GitRepository(
            ctx.obj["repo_path"],
            search_parent_directories=settings.search_parent_directories,
            seed=seed,
        )
    except GitRepositoryError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="commitpick")
@click.option(
    "--repo",
    "repo_path",
    default=None,
    help="Repository path (default: COMMITPICK_REPO_PATH or current directory).",
)
@click.option("--log-level", default=None, help="Logging level (e.g. DEBUG).")
@click.option("--json", "as_json", is_flag=True, help="Print commit as JSON.")
@click.pass_context
def cli(
    ctx: click.Context,
    repo_path: str | None,
    log_level: str | None,
    as_json: bool,
) -> None:
    """commitpick - look up or randomly sample git commits."""
    configure_logging(log_level or settings.log_level, settings.log_format)
    ctx.ensure_object(dict)
    ctx.obj["repo_path"] = repo_path or settings.repo_path
    ctx.obj["json"] = as_json


@cli.command()
@click.argument("rev")
@click.pass_context
def show(ctx: click.Context, rev: str) -> None:
    """Show the commit REV resolves to."""
    with _open_repository(ctx) as repo:
        try:
            meta = repo.get_commit(rev)
        except GitRepositoryError as e:
            raise click.ClickException(str(e))
    _emit(ctx, meta)


@cli.command("random")
@click.option("--seed", type=int, default=None, help="Seed for the random draw.")
@click.pass_context
def random_cmd(ctx: click.Context, seed: int | None) -> None:
    """Show a random non-merge commit reachable from HEAD."""
    if seed is None:
        seed = settings.seed
    with _open_repository(ctx, seed=seed) as repo:
        try:
            meta = repo.random_commit()
        except GitRepositoryError as e:
            raise click.ClickException(str(e))
    _emit(ctx, meta)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
