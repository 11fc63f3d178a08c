"""Render options and the default adapters that run compiled page modules.

A page module exposes ``render(options)`` returning HTML (a string or an
:class:`HtmlResult`) or a :class:`RedirectResult`. An endpoint module exposes
one handler per HTTP method, ``get(options)`` for static builds, returning a
body (string, bytes, a mapping with a ``body`` key, or an
:class:`EndpointBody`). Anything else an endpoint returns is treated as a live
response object.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

from .elements import SSRElement, render_elements
from .models import (
    EndpointBody,
    EndpointResponse,
    EndpointResult,
    HtmlResult,
    LoadedRenderer,
    RedirectResult,
    RenderResult,
    RouteData,
)
from .resolver import Resolver


@dataclass
class RenderOptions:
    """Everything the rendering collaborator needs to render one path."""

    pathname: str
    route: RouteData
    mod: Any
    links: List[SSRElement]
    scripts: List[SSRElement]
    renderers: List[LoadedRenderer]
    resolve: Resolver
    origin: str
    site: Optional[str] = None
    ssr: bool = False
    method: str = "GET"
    headers: Dict[str, str] = field(default_factory=dict)
    markdown: Mapping[str, Any] = field(default_factory=dict)

    def head_html(self) -> str:
        """Markup for the stylesheet links and scripts of this page."""
        return render_elements([*self.links, *self.scripts])


PageRender = Callable[[RenderOptions], Awaitable[RenderResult]]
EndpointCall = Callable[[Any, RenderOptions], Awaitable[EndpointResult]]


async def _call(func: Callable[..., Any], *args: Any) -> Any:
    result = func(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def render_page(options: RenderOptions) -> RenderResult:
    """Render a page by calling the ``render`` function of its compiled module."""
    render = getattr(options.mod, "render", None)
    if render is None:
        raise TypeError(f"Page module for {options.route.component} does not define render()")
    result = await _call(render, options)
    if isinstance(result, (HtmlResult, RedirectResult)):
        return result
    if isinstance(result, str):
        return HtmlResult(result)
    raise TypeError(
        f"render() for {options.route.component} returned {type(result).__name__}, "
        "expected HTML or a redirect"
    )


async def call_endpoint(mod: Any, options: RenderOptions) -> EndpointResult:
    """Call the endpoint handler matching the request method."""
    handler_name = options.method.lower()
    handler = getattr(mod, handler_name, None)
    if handler is None:
        raise TypeError(
            f"Endpoint {options.route.component} does not export a {handler_name}() handler"
        )
    result = await _call(handler, options)
    if isinstance(result, (EndpointBody, EndpointResponse)):
        return result
    if isinstance(result, (str, bytes)):
        return EndpointBody(result)
    if isinstance(result, Mapping) and "body" in result:
        return EndpointBody(result["body"], result.get("encoding"))
    return EndpointResponse(result)
