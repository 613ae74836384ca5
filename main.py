#!/usr/bin/env python3
"""CLI entrypoint for generating locale name bundles from CLDR data."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Annotated

import typer

from localenames.fallback import AliasFallbackError
from localenames.io import DownloadError, ExtractionError, download_file, extract_archive
from localenames.logging_setup import setup_logging
from localenames.models import normalize_tag
from localenames.processing import LocaleDataGenerator, generate_data

CLDR_RELEASE = "48.0.0"
CLDR_ARCHIVE_NAME = f"cldr-{CLDR_RELEASE}-json-full.zip"
CLDR_URL = (
    "https://github.com/unicode-org/cldr-json/releases/download/"
    f"{CLDR_RELEASE}/{CLDR_ARCHIVE_NAME}"
)
CLDR_PACKAGES = ("cldr-core/", "cldr-localenames-full/")

__SCRIPT_DIR = Path(__file__).resolve().parent
CACHE_DIR = __SCRIPT_DIR / "cldr"
CLDR_CACHE_PATH = CACHE_DIR / CLDR_ARCHIVE_NAME
DEFAULT_OUTPUT = __SCRIPT_DIR / "data" / "locales"

app = typer.Typer(
    help="Generate per-locale locale name bundles from CLDR data.",
    add_completion=False,
)


def fail(message: str) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def prepare_cldr_tree(cldr_zip: Path | None, tmp_path: Path) -> Path:
    """Locate or download the CLDR archive and extract it under ``tmp_path``."""
    if cldr_zip:
        archive_path = cldr_zip
        typer.echo(f"Using existing CLDR archive: {archive_path}")
    elif CLDR_CACHE_PATH.is_file():
        archive_path = CLDR_CACHE_PATH
        typer.echo(f"Using cached CLDR archive: {archive_path}")
    else:
        archive_path = CLDR_CACHE_PATH
        typer.echo(f"Downloading {CLDR_URL}...")
        try:
            download_file(CLDR_URL, archive_path)
        except DownloadError as e:
            raise fail(str(e)) from e

    typer.echo(f"Extracting {archive_path.name}...")
    extract_dir = tmp_path / "cldr"
    try:
        extract_archive(archive_path, extract_dir, prefixes=CLDR_PACKAGES)
    except ExtractionError as e:
        raise fail(str(e)) from e
    return extract_dir


@app.command()
def main(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Destination directory for per-locale JSON bundles.",
            file_okay=False,
            dir_okay=True,
            writable=True,
            resolve_path=True,
        ),
    ] = DEFAULT_OUTPUT,
    cldr_zip: Annotated[
        Path | None,
        typer.Option(
            "--cldr-zip",
            help="Path to an existing CLDR archive. If missing, the archive will be downloaded to a local cache.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    cldr_dir: Annotated[
        Path | None,
        typer.Option(
            "--cldr-dir",
            help="Path to an already extracted CLDR JSON tree.",
            exists=True,
            file_okay=False,
            dir_okay=True,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    display_locales: Annotated[
        list[str] | None,
        typer.Option(
            "--display-locale",
            help="Only generate these display locales (repeatable). Defaults to all locales.",
        ),
    ] = None,
    workers: Annotated[
        int,
        typer.Option("--workers", min=1, help="Number of parallel display-locale workers."),
    ] = 1,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)."),
    ] = "WARNING",
) -> None:
    """Generate locale name bundles and meta.json from CLDR data."""
    setup_logging(log_level)

    with tempfile.TemporaryDirectory() as tmp_dir:
        extract_dir = cldr_dir or prepare_cldr_tree(cldr_zip, Path(tmp_dir))

        typer.echo("Scanning locales...")
        try:
            generator = LocaleDataGenerator.from_cldr(extract_dir)
        except (AliasFallbackError, ValueError) as e:
            raise fail(f"Error: {e}") from e
        typer.echo(
            f"Found {len(generator.locales)} locales and {len(generator.aliases)} aliases."
        )

        targets = (
            [normalize_tag(locale) for locale in display_locales]
            if display_locales
            else None
        )
        unknown = sorted(set(targets or ()) - set(generator.locales))
        if unknown:
            raise fail(f"Error: unknown display locale(s): {', '.join(unknown)}")

        typer.echo(f"Writing locale bundles to {output}...")
        written = generate_data(
            generator,
            output,
            display_locales=targets,
            workers=workers,
            show_progress=True,
        )

    typer.secho(
        f"\nSuccessfully wrote {written} locale bundles to {output}",
        fg=typer.colors.GREEN,
        bold=True,
    )


if __name__ == "__main__":
    app()
