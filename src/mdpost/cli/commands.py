"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdpost.config import Settings, load_config
from mdpost.core.listing import all_posts, published
from mdpost.core.pipeline import discover_files, load_dir, load_file, run_build
from mdpost.errors import ContentError
from mdpost.log import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def main_callback(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Front matter content loader and HTML renderer for Markdown posts."""
    configure_logging(_settings(overrides={"log_level": log_level}).log_level)


def render_cmd(
    file: Annotated[str, typer.Argument(help="Content file to render")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the rendered HTML body of a single file."""
    settings = _settings(overrides={"parser_config": parser})
    try:
        doc = load_file(Path(file), settings)
    except (ContentError, OSError) as e:
        _fail("Render failed", e)
    typer.echo(doc.rendered_body, nl=False)


def check_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to validate")],
    ):
    """Validate front matter and markup of every file; exit 1 if any fails."""
    settings = _settings()
    files = discover_files(Path(path))
    if not files:
        _fail(f"No .md/.mdx files found under {path}")

    failed = 0
    for p in files:
        try:
            doc = load_file(p, settings)
        except (ContentError, OSError) as e:
            failed += 1
            typer.echo(f"  error: {e}", err=True)
            continue
        typer.echo(f"  ok: {p} ({doc.slug})")
    typer.echo(f"Checked {len(files)} file(s), {failed} failed")
    if failed:
        raise typer.Exit(1)


def list_cmd(
    path: Annotated[str, typer.Argument(help="File or directory of posts")],
    drafts: Annotated[bool, typer.Option("--drafts", help="Include draft posts")] = False,
    ):
    """List posts newest first; drafts are hidden unless --drafts is given."""
    settings = _settings()
    try:
        docs = load_dir(Path(path), settings)
    except (ContentError, OSError) as e:
        _fail("Load failed", e)

    entries = all_posts(docs) if drafts else published(docs)
    if not entries:
        typer.echo("No published posts found.")
        raise typer.Exit(1)
    for doc in entries:
        marker = " [draft]" if doc.draft else ""
        typer.echo(f"{doc.date.isoformat()}  {doc.slug}  {doc.title}{marker}")


def build_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to build")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    drafts: Annotated[Optional[bool], typer.Option("--drafts/--no-drafts", help="Also write draft posts")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Render every post to HTML + sidecar JSON and write the published index."""
    settings = _settings(overrides={"output_dir": out, "include_drafts": drafts, "parser_config": parser})
    output_dir = Path(settings.output_dir)
    try:
        results = run_build(Path(path), output_dir, settings)
    except (ContentError, OSError) as e:
        _fail("Build failed", e)
    for slug, html_path in results:
        typer.echo(f"  {slug} -> {html_path}")
    typer.echo(f"Built {len(results)} document(s) to {output_dir}/")
