"""Configuration objects and constants for static page generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

# Paths of one page rendered at the same time.
MAX_CONCURRENT_RENDERS = 1

DEFAULT_ORIGIN = "http://localhost"
PAGE_URL_FORMATS = ("directory", "file")


@dataclass(frozen=True)
class RendererSpec:
    """A UI framework renderer whose server entrypoint is loaded for every build."""

    name: str
    server_entrypoint: str


@dataclass(frozen=True)
class InjectedScript:
    """A script contributed by an integration, injected at the given stage."""

    stage: str
    content: str


@dataclass
class BuildConfig:
    """Top-level settings that control page generation and output naming."""

    output_root: Path
    project_root: Path = field(default_factory=Path.cwd)
    chunk_root: Optional[Path] = None
    site: Optional[str] = None
    origin: str = DEFAULT_ORIGIN
    concurrency: int = MAX_CONCURRENT_RENDERS
    ssr: bool = False
    page_url_format: str = "directory"
    scripts: Tuple[InjectedScript, ...] = ()
    markdown: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {self.concurrency}")
        if self.page_url_format not in PAGE_URL_FORMATS:
            raise ValueError(
                f"page_url_format must be one of {PAGE_URL_FORMATS}, "
                f"got {self.page_url_format!r}"
            )
        self.output_root = Path(self.output_root)
        self.project_root = Path(self.project_root)
        if self.chunk_root is None:
            self.chunk_root = self.output_root

    def head_inline_scripts(self) -> List[InjectedScript]:
        return [script for script in self.scripts if script.stage == "head-inline"]


@dataclass
class StaticBuildOptions:
    """Per-run options shared by every page and path of one generation."""

    config: BuildConfig
    page_names: List[str] = field(default_factory=list)
