#!/usr/bin/env python3
"""
Resume Rendering CLI

Renders plain-text resumes to paginated PDFs and validates rendered PDFs using
the rendering context.

Commands:
    render   - Render a resume text file to PDF
    preview  - Render the bundled sample resume with a skin
    skins    - List available skins
    fields   - Show the identity header extracted from a resume
    validate - Check a rendered PDF against a skin's margins

Examples:\n

    render_pdf.py render resume.txt                        # Render with the default skin

    render_pdf.py render resume.txt --skin banner          # Render with a specific skin

    render_pdf.py preview --skin framed -o framed.pdf      # Preview a skin

    render_pdf.py validate outs/results/2025-11-14/john_doe_banner.pdf --skin banner
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.intake import extract_fields
from folio.contexts.rendering import (
    A4_SIZE,
    DEFAULT_SKIN,
    MetricsProviderError,
    get_skin,
    list_skins,
    render_preview,
    render_resume,
    validate_pdf,
)

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path.cwd()))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(Path(path).relative_to(PROJECT_ROOT))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Render plain-text resumes to paginated PDFs and validate rendered PDFs",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _report_render(result) -> None:
    typer.echo("")
    if result.success:
        typer.secho("✓ Render succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Pages: {result.page_count}")
        typer.echo(f"  PDF: {display_path(result.pdf_path)}")
    else:
        typer.secho(f"✗ Render failed with {len(result.errors)} errors", fg=typer.colors.RED, bold=True)
        for error in result.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED)

    if result.log_dir:
        typer.echo(f"  Log: {display_path(result.log_dir / 'render.log')}")
    typer.echo("")


@app.command("render")
def render_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="Plain-text resume file", exists=True, dir_okay=False, readable=True),
    ],
    skin: Annotated[
        str,
        typer.Option("--skin", "-s", help="Skin to render with (see 'skins')"),
    ] = DEFAULT_SKIN,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF path (default: dated results directory)"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log to the render log file"),
    ] = False,
):
    """
    Render a resume text file to PDF.

    The first line is the headline, the second the name; contact lines follow
    until the first section header or bullet.

    Examples:\n

        $ render_pdf.py render resume.txt                     # Default skin

        $ render_pdf.py render resume.txt -s corner_accent    # Specific skin

        $ render_pdf.py render resume.txt -o out/resume.pdf   # Explicit output path
    """
    typer.secho(f"\nRendering: {input_file.name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Skin: {skin}")

    raw_text = input_file.read_text(encoding="utf-8")
    try:
        result = render_resume(raw_text, skin, output_path=output, console=not quiet)
    except (ValueError, MetricsProviderError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _report_render(result)
    raise typer.Exit(code=0 if result.success else 1)


@app.command("preview")
def preview_command(
    skin: Annotated[
        str,
        typer.Option("--skin", "-s", help="Skin to preview (see 'skins')"),
    ] = DEFAULT_SKIN,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF path (default: dated results directory)"),
    ] = None,
    all_skins: Annotated[
        bool,
        typer.Option("--all", "-a", help="Preview every skin (ignores --skin and --output)"),
    ] = False,
):
    """
    Render the bundled sample resume with one skin, or all of them.

    Examples:\n

        $ render_pdf.py preview --skin banner      # One skin

        $ render_pdf.py preview --all              # Every skin
    """
    try:
        if all_skins:
            results = [render_preview(key, console=False) for key, _ in list_skins()]
        else:
            results = [render_preview(skin, output_path=output)]
    except (ValueError, MetricsProviderError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for result in results:
        typer.secho(f"\nPreview: {result.skin_key}", fg=typer.colors.BLUE, bold=True)
        _report_render(result)

    raise typer.Exit(code=0 if all(result.success for result in results) else 1)


@app.command("skins")
def skins_command():
    """List available skins in display order."""
    typer.secho("\nAvailable skins:", fg=typer.colors.BLUE, bold=True)
    try:
        skins = list_skins()
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for key, label in skins:
        marker = " (default)" if key == DEFAULT_SKIN else ""
        typer.echo(f"  {key:<15} {label}{marker}")
    typer.echo("")


@app.command("fields")
def fields_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="Plain-text resume file", exists=True, dir_okay=False, readable=True),
    ],
):
    """
    Show the identity header extracted from a resume, and where the body starts.
    """
    fields = extract_fields(input_file.read_text(encoding="utf-8"))

    typer.secho(f"\nIdentity fields: {input_file.name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"  {'headline':<10} {fields.headline or '-'}")
    typer.echo(f"  {'name':<10} {fields.name or '-'}")
    for name, value in fields.contact_items():
        if value:
            typer.echo(f"  {name:<10} {value}")
        else:
            typer.secho(f"  {name:<10} (not found)", fg=typer.colors.YELLOW)
    typer.echo(f"\n  Body starts at line {fields.body_start + 1}")
    typer.echo("")


@app.command("validate")
def validate_command(
    pdf_path: Annotated[
        Path,
        typer.Argument(help="Rendered PDF to check"),
    ],
    skin: Annotated[
        str,
        typer.Option("--skin", "-s", help="Skin the PDF was rendered with (sets the bottom margin)"),
    ] = DEFAULT_SKIN,
    pages: Annotated[
        Optional[int],
        typer.Option("--pages", "-p", help="Expected page count", min=1),
    ] = None,
):
    """
    Check that a rendered PDF keeps every line above the skin's bottom margin.

    Examples:\n

        $ render_pdf.py validate resume.pdf                  # Default skin margins

        $ render_pdf.py validate resume.pdf -s framed -p 2   # Expect two pages
    """
    typer.secho(f"\nValidating: {display_path(pdf_path)}", fg=typer.colors.BLUE, bold=True)

    try:
        bottom_margin = get_skin(skin).margins.bottom
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    result = validate_pdf(pdf_path, bottom_margin, page_height=A4_SIZE[1], expected_pages=pages)

    if result.is_valid:
        typer.secho("\n✓ Validation passed", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Page count: {result.page_count}")
    else:
        typer.secho("\n✗ Validation failed", fg=typer.colors.RED, bold=True)
        typer.echo(f"  Page count: {result.page_count}")
        for issue in result.issues[:10]:  # Limit to first 10
            typer.secho(f"  - {issue}", fg=typer.colors.RED)
        if len(result.issues) > 10:
            typer.echo(f"  ... and {len(result.issues) - 10} more")
    typer.echo("")

    raise typer.Exit(code=0 if result.is_valid else 1)


if __name__ == "__main__":
    app()
