"""``apizza-release`` — build and publish GitHub releases."""

from __future__ import annotations

from pathlib import Path

import click

from apizza import __version__
from apizza.config.logging import configure_logging
from apizza.release.build import build_release, validate_tag
from apizza.release.github import GitHubClient

DEFAULT_REPO = "harrybrwn/apizza"


class ReleaseContext:
    """Inputs shared by every release subcommand."""

    def __init__(self, repo: str, release_dir: Path, token: str | None) -> None:
        self.repo = repo
        self.release_dir = release_dir
        self.token = token

    def client(self) -> GitHubClient:
        if not self.token:
            raise click.UsageError("a GitHub token is required (--token or GITHUB_TOKEN)")
        return GitHubClient(self.repo, self.token)


@click.group()
@click.option("--repo", default=DEFAULT_REPO, show_default=True, help="owner/name on GitHub.")
@click.option(
    "--release-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("release"),
    show_default=True,
    help="Directory for built archives.",
)
@click.option("--token", envvar="GITHUB_TOKEN", default=None, help="GitHub access token.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.pass_context
def release(
    ctx: click.Context, repo: str, release_dir: Path, token: str | None, verbose: bool
) -> None:
    """Build, publish and remove apizza releases."""
    configure_logging(verbose=verbose, stream=click.get_text_stream("stderr"))
    ctx.obj = ReleaseContext(repo, release_dir, token)


@release.command()
@click.option("--version", "version", default=__version__, show_default=True)
@click.pass_obj
def build(rel: ReleaseContext, version: str) -> None:
    """Build release archives for every target platform."""
    for path in build_release(rel.release_dir, version):
        click.echo(str(path))


@release.command()
@click.argument("tag")
@click.option("--title", default=None, help="Release title (defaults to the tag).")
@click.option("-d", "--description", default="", help="Release notes.")
@click.option("--draft", is_flag=True, help="Create the release as a draft.")
@click.option("--prerelease", is_flag=True, help="Mark the release as a pre-release.")
@click.pass_obj
def new(
    rel: ReleaseContext,
    tag: str,
    title: str | None,
    description: str,
    draft: bool,
    prerelease: bool,
) -> None:
    """Build archives, create release TAG and upload the archives."""
    client = rel.client()
    try:
        version = validate_tag(tag, client.tags())
        artifacts = build_release(rel.release_dir, version)
        created = client.create_release(
            tag, title=title, body=description, draft=draft, prerelease=prerelease
        )
        for path in artifacts:
            client.upload_asset(created, path)
            click.echo(f"uploaded {path.name}")
    finally:
        client.close()
    click.echo(created.get("html_url", tag))


@release.command()
@click.argument("tag")
@click.pass_obj
def remove(rel: ReleaseContext, tag: str) -> None:
    """Delete the published release TAG."""
    client = rel.client()
    try:
        client.delete_release(tag)
    finally:
        client.close()
    click.echo(f"removed {tag}")


def main() -> None:
    release(prog_name="apizza-release")
