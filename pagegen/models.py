"""Data models used throughout the generation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

from .config import RendererSpec


@dataclass(frozen=True)
class BuildArtifact:
    """One unit of bundler output: an executable chunk or a plain asset."""

    type: str
    file_name: str
    facade_module_id: Optional[str] = None

    @property
    def is_chunk(self) -> bool:
        return self.type == "chunk"


@dataclass(frozen=True)
class RouteData:
    """Route descriptor of a page definition."""

    type: str
    component: str
    route: Optional[str] = None

    @property
    def is_page(self) -> bool:
        return self.type == "page"

    @property
    def is_endpoint(self) -> bool:
        return self.type == "endpoint"


@dataclass(frozen=True)
class PageRecord:
    """Build metadata for a page: its route and the concrete paths to render."""

    route: RouteData
    paths: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SpecifierTable:
    """Maps module specifiers used by rendered pages to their bundled files."""

    entries: Mapping[str, str] = field(default_factory=dict)
    renderers: Tuple[RendererSpec, ...] = ()

    def get(self, specifier: str) -> Optional[str]:
        return self.entries.get(specifier)


@dataclass(frozen=True)
class LoadedRenderer:
    """A renderer with its server entrypoint module imported."""

    name: str
    server_entrypoint: str
    ssr: Any


@dataclass(frozen=True)
class HtmlResult:
    """A page rendered to HTML."""

    html: str


@dataclass(frozen=True)
class RedirectResult:
    """A page that redirected instead of rendering; nothing is written."""

    location: str
    status: int = 302


@dataclass(frozen=True)
class EndpointBody:
    """The body produced by an endpoint handler."""

    body: Union[str, bytes]
    encoding: Optional[str] = None


@dataclass(frozen=True)
class EndpointResponse:
    """A live response object returned by an endpoint handler."""

    response: Any
    status: int = 200


RenderResult = Union[HtmlResult, RedirectResult]
EndpointResult = Union[EndpointBody, EndpointResponse]
