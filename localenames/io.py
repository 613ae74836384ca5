"""File I/O helpers for fetching CLDR archives and writing bundles."""

from __future__ import annotations

import json
import zipfile
from pathlib import Path
from typing import Any

import requests
from tqdm import tqdm

DEFAULT_USER_AGENT = "cldr-locale-names/1.0"
DEFAULT_TIMEOUT_SECONDS = 60


class DownloadError(Exception):
    """Raised when a file download fails."""


class ExtractionError(Exception):
    """Raised when archive extraction fails."""


def download_file(url: str, destination: Path) -> None:
    """Download a file from URL with progress bar.

    Args:
        url: URL to download from.
        destination: Local path to save the file.

    Raises:
        DownloadError: If the download fails.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    partial = destination.with_name(destination.name + ".part")
    try:
        with requests.get(
            url,
            stream=True,
            timeout=DEFAULT_TIMEOUT_SECONDS,
            headers={"User-Agent": DEFAULT_USER_AGENT},
        ) as response:
            response.raise_for_status()
            total_size = int(response.headers.get("content-length", 0))

            with (
                partial.open("wb") as output,
                tqdm(
                    desc=f"Downloading {destination.name}",
                    total=total_size,
                    unit="iB",
                    unit_scale=True,
                    unit_divisor=1024,
                ) as bar,
            ):
                for chunk in response.iter_content(chunk_size=8192):
                    size = output.write(chunk)
                    bar.update(size)

    except requests.RequestException as e:
        partial.unlink(missing_ok=True)
        raise DownloadError(f"Error downloading file: {e}") from e

    partial.replace(destination)


def extract_archive(
    archive_path: Path, destination: Path, prefixes: tuple[str, ...] = ()
) -> None:
    """Extract a ZIP archive with progress bar.

    Args:
        archive_path: Path to the ZIP archive.
        destination: Directory to extract to.
        prefixes: When given, only members starting with one of them.

    Raises:
        ExtractionError: If extraction fails.
    """
    try:
        with zipfile.ZipFile(archive_path) as archive:
            member_list = [
                member
                for member in archive.infolist()
                if not prefixes or member.filename.startswith(prefixes)
            ]
            with tqdm(
                total=len(member_list),
                desc=f"Extracting {archive_path.name}",
                unit="file",
            ) as bar:
                for member in member_list:
                    archive.extract(member, destination)
                    bar.update(1)
    except zipfile.BadZipFile as e:
        raise ExtractionError(
            f"Failed to open zip file '{archive_path}'. It may be corrupted."
        ) from e
    except OSError as e:
        raise ExtractionError(f"Error extracting archive: {e}") from e


def load_json(path: Path) -> dict:
    """Load JSON file from disk."""
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def write_json(path: Path, data: dict[str, Any]) -> None:
    """Write a bundle as pretty-printed UTF-8 JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(
        json.dumps(data, ensure_ascii=False, indent=4) + "\n", encoding="utf-8"
    )
