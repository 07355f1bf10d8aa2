"""First-run installation of default assets into the data directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Union


def _set_permissions(path: Path) -> None:
    os.chmod(path, 0o700)


def populate_data_dir(
    data_dir: Union[str, os.PathLike], assets: Mapping[str, bytes], version: str
) -> None:
    """Install assets and the VERSION file; existing files are replaced only
    when the recorded version differs."""
    root = Path(data_dir)
    all_assets = dict(assets)
    all_assets["VERSION"] = version.encode()
    version_file = root / "VERSION"
    try:
        last_version = version_file.read_text()
    except (OSError, UnicodeDecodeError):
        last_version = ""
    out_of_date = last_version != version
    for relative, content in all_assets.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        _set_permissions(path.parent)
        if out_of_date or not path.exists():
            path.write_bytes(content)