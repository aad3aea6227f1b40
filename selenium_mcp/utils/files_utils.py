"""Output path helpers for screenshots and PDFs."""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional


def resolve_output_dir(output_dir: Optional[str], subdir: str) -> Path:
    """Return ``<output_dir>/<subdir>``, creating it when missing.

    Falls back to the current working directory when no output directory is
    configured.
    """
    base = Path(output_dir).expanduser() if output_dir else Path(os.getcwd())
    target = base / subdir
    target.mkdir(parents=True, exist_ok=True)
    return target


def timestamped_filename(prefix: str, extension: str) -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    return f"{prefix}_{timestamp}.{extension.lstrip('.')}"


def resolve_output_file(
    output_dir: Optional[str],
    subdir: str,
    filename: Optional[str],
    prefix: str,
    extension: str,
) -> Path:
    """Resolve the file a tool writes to.

    A caller-supplied ``filename`` keeps only its final path component and
    gets ``extension`` appended when it has none.
    """
    directory = resolve_output_dir(output_dir, subdir)
    if not filename:
        return directory / timestamped_filename(prefix, extension)
    name = Path(filename).name
    if not Path(name).suffix:
        name = f"{name}.{extension.lstrip('.')}"
    return directory / name
