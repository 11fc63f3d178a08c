from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from pagegen.config import BuildConfig, StaticBuildOptions

PAGE_MODULE = """
from pagegen.models import HtmlResult


async def render(options):
    head = options.head_html()
    return HtmlResult(
        f"<html><head>{head}</head><body>{options.pathname}</body></html>"
    )
"""

ENDPOINT_MODULE = """
def get(options):
    return {"body": '{"path": "%s"}' % options.pathname}
"""


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def write_module(tmp_path: Path):
    def _write(relative: str, source: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_opts(tmp_path: Path, project_root: Path):
    def _make(**overrides) -> StaticBuildOptions:
        settings = {
            "output_root": tmp_path / "dist",
            "project_root": project_root,
            "chunk_root": tmp_path / "chunks",
        }
        settings.update(overrides)
        return StaticBuildOptions(config=BuildConfig(**settings))

    return _make
