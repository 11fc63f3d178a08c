"""Output file naming and persistence for rendered paths."""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Union

from .config import BuildConfig


def get_out_root(config: BuildConfig) -> Path:
    return config.output_root


def _file_path(pathname: str) -> str:
    return pathname.rstrip("/") or "/"


def _under_root(root: Path, url_path: str) -> Path:
    relative = url_path.strip("/")
    return root / relative if relative else root


def get_out_folder(config: BuildConfig, pathname: str, route_type: str) -> Path:
    """Return the directory a path is written into."""
    out_root = get_out_root(config)
    if route_type == "endpoint":
        return _under_root(out_root, posixpath.dirname(pathname))
    if route_type == "page":
        if config.page_url_format == "directory":
            return _under_root(out_root, pathname)
        if config.page_url_format == "file":
            return _under_root(out_root, posixpath.dirname(_file_path(pathname)))
        raise ValueError(f"Unknown page URL format: {config.page_url_format!r}")
    raise ValueError(f"Unknown route type: {route_type!r}")


def get_out_file(config: BuildConfig, out_folder: Path, pathname: str, route_type: str) -> Path:
    """Return the file a path is written to inside ``out_folder``."""
    if route_type == "endpoint":
        return out_folder / posixpath.basename(pathname)
    if route_type == "page":
        if config.page_url_format == "directory":
            return out_folder / "index.html"
        if config.page_url_format == "file":
            base_name = posixpath.basename(_file_path(pathname))
            return out_folder / f"{base_name or 'index'}.html"
        raise ValueError(f"Unknown page URL format: {config.page_url_format!r}")
    raise ValueError(f"Unknown route type: {route_type!r}")


def write_output(
    config: BuildConfig,
    pathname: str,
    route_type: str,
    body: Union[str, bytes],
) -> Path:
    """Write a rendered body to its output file, creating directories as needed.

    Filesystem failures propagate as ``OSError``.
    """
    out_folder = get_out_folder(config, pathname, route_type)
    out_file = get_out_file(config, out_folder, pathname, route_type)
    out_folder.mkdir(parents=True, exist_ok=True)
    if isinstance(body, bytes):
        out_file.write_bytes(body)
    else:
        out_file.write_text(body, encoding="utf-8")
    return out_file
