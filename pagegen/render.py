"""Render a single path of a page and write the result.

Every failure while rendering one path is logged and contained here so that
sibling paths and later batches keep generating.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple, Union

from .config import BuildConfig, StaticBuildOptions
from .elements import (
    SSRElement,
    create_inline_script_element,
    create_link_stylesheet_element_set,
    create_module_script_element_with_src_set,
)
from .errors import GenerationError, RenderError, UnsupportedOperationError
from .models import (
    EndpointResponse,
    HtmlResult,
    LoadedRenderer,
    PageRecord,
    RedirectResult,
    SpecifierTable,
)
from .resolver import make_resolver
from .runtime import EndpointCall, PageRender, RenderOptions, call_endpoint, render_page
from .utils import page_name
from .writer import write_output

logger = logging.getLogger("pagegen")


class PathOutcome(str, Enum):
    """How generating one path ended."""

    RENDERED = "rendered"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class GeneratePathOptions:
    """State shared by every path of one page."""

    page: PageRecord
    specifiers: SpecifierTable
    link_ids: Tuple[str, ...]
    hoisted_id: Optional[str]
    mod: Any
    renderers: Sequence[LoadedRenderer]
    render: PageRender = render_page
    call_endpoint: EndpointCall = call_endpoint


def build_element_sets(
    config: BuildConfig, gopts: GeneratePathOptions
) -> Tuple[List[SSRElement], List[SSRElement]]:
    """Create the stylesheet links and scripts for a page."""
    links = create_link_stylesheet_element_set(reversed(gopts.link_ids), config.site)
    scripts = create_module_script_element_with_src_set(
        [gopts.hoisted_id] if gopts.hoisted_id else [], config.site
    )
    for script in config.head_inline_scripts():
        scripts.append(create_inline_script_element(script))
    return links, scripts


def build_render_options(
    pathname: str, config: BuildConfig, gopts: GeneratePathOptions
) -> RenderOptions:
    links, scripts = build_element_sets(config, gopts)
    return RenderOptions(
        pathname=pathname,
        route=gopts.page.route,
        mod=gopts.mod,
        links=links,
        scripts=scripts,
        renderers=list(gopts.renderers),
        resolve=make_resolver(gopts.specifiers, pathname),
        origin=config.origin,
        site=config.site,
        ssr=config.ssr,
        markdown=config.markdown,
    )


async def _render_endpoint(
    pathname: str, options: RenderOptions, config: BuildConfig, gopts: GeneratePathOptions
) -> Optional[Union[str, bytes]]:
    try:
        result = await gopts.call_endpoint(gopts.mod, options)
    except GenerationError:
        raise
    except Exception as exc:
        raise RenderError(pathname, exc) from exc
    if isinstance(result, EndpointResponse):
        if config.ssr:
            logger.debug(
                "Skipping %s: endpoint response (%d) is served at request time",
                pathname,
                result.status,
            )
            return None
        raise UnsupportedOperationError(
            f"Returning a response from an endpoint is not supported in static mode ({pathname})"
        )
    return result.body


async def _render_page(
    pathname: str, options: RenderOptions, gopts: GeneratePathOptions
) -> Optional[str]:
    try:
        result = await gopts.render(options)
    except GenerationError:
        raise
    except Exception as exc:
        raise RenderError(pathname, exc) from exc
    # Redirects and other non-HTML results produce no file.
    if isinstance(result, RedirectResult):
        logger.debug(
            "Skipping %s: redirect (%d) to %s", pathname, result.status, result.location
        )
        return None
    if not isinstance(result, HtmlResult):
        logger.debug("Skipping %s: render returned %s", pathname, type(result).__name__)
        return None
    return result.html


async def generate_path(
    pathname: str, opts: StaticBuildOptions, gopts: GeneratePathOptions
) -> PathOutcome:
    """Render ``pathname`` and write it to the output tree.

    Errors are logged with the path and swallowed.
    """
    config = opts.config
    route = gopts.page.route

    # Page names feed the build stats, whatever the outcome of the render.
    if route.is_page:
        opts.page_names.append(page_name(pathname))

    logger.debug("Generating: %s", pathname)

    try:
        options = build_render_options(pathname, config, gopts)
        if route.is_endpoint:
            body = await _render_endpoint(pathname, options, config, gopts)
        else:
            body = await _render_page(pathname, options, gopts)
        if body is None:
            return PathOutcome.SKIPPED
        out_file = write_output(config, pathname, route.type, body)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Error rendering %s", pathname)
        return PathOutcome.FAILED

    logger.debug("Wrote %s to %s", pathname, out_file)
    return PathOutcome.RENDERED
