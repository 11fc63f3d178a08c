"""High-level orchestration for generating every static page of a build."""

from __future__ import annotations

import asyncio
import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .batching import batches
from .config import StaticBuildOptions
from .facades import FacadeIndex, chunk_is_page
from .loader import ModuleLoader, load_module, load_renderers
from .models import BuildArtifact, LoadedRenderer, SpecifierTable
from .render import GeneratePathOptions, PathOutcome, generate_path
from .runtime import EndpointCall, PageRender, call_endpoint, render_page
from .utils import get_time_stat

logger = logging.getLogger("pagegen")


@dataclass
class GenerationReport:
    """Outcome counts for one generation run."""

    page_names: List[str] = field(default_factory=list)
    outcomes: Counter = field(default_factory=Counter)

    @property
    def rendered(self) -> int:
        return self.outcomes[PathOutcome.RENDERED]

    @property
    def skipped(self) -> int:
        return self.outcomes[PathOutcome.SKIPPED]

    @property
    def failed(self) -> int:
        return self.outcomes[PathOutcome.FAILED]


async def generate_pages(
    build_output: Iterable[BuildArtifact],
    opts: StaticBuildOptions,
    facade_index: FacadeIndex,
    specifiers: SpecifierTable,
    module_loader: ModuleLoader = load_module,
    render: PageRender = render_page,
    endpoint: EndpointCall = call_endpoint,
) -> GenerationReport:
    """Render every path of every page chunk in ``build_output``.

    Loading renderers or page modules and missing page metadata are fatal;
    failures while rendering a single path are logged and skipped.
    """
    logger.info("generating static routes")
    report = GenerationReport(page_names=opts.page_names)

    # Renderers are loaded once and shared by every page.
    renderers = await load_renderers(specifiers.renderers, opts.config)

    for artifact in build_output:
        if not chunk_is_page(artifact, facade_index):
            continue
        outcomes = await generate_page(
            artifact,
            opts,
            facade_index,
            specifiers,
            renderers,
            module_loader=module_loader,
            render=render,
            endpoint=endpoint,
        )
        report.outcomes.update(outcomes)
    return report


async def generate_page(
    artifact: BuildArtifact,
    opts: StaticBuildOptions,
    facade_index: FacadeIndex,
    specifiers: SpecifierTable,
    renderers: Sequence[LoadedRenderer],
    module_loader: ModuleLoader = load_module,
    render: PageRender = render_page,
    endpoint: EndpointCall = call_endpoint,
) -> List[PathOutcome]:
    """Render the paths of one page chunk in bounded, sequential batches."""
    time_start = time.perf_counter()
    config = opts.config
    facade_id = artifact.facade_module_id or ""

    page = facade_index.page_for(facade_id)
    link_ids = facade_index.stylesheets_for(facade_id)
    hoisted_id = facade_index.hoisted_entry_for(facade_id)

    compiled_module = await module_loader(config.chunk_root / artifact.file_name)

    gopts = GeneratePathOptions(
        page=page,
        specifiers=specifiers,
        link_ids=tuple(link_ids),
        hoisted_id=hoisted_id,
        mod=compiled_module,
        renderers=tuple(renderers),
        render=render,
        call_endpoint=endpoint,
    )

    icon = "</>" if page.route.is_page else "{-}"
    logger.info("%s %s", icon, page.route.component)

    outcomes: List[PathOutcome] = []
    for paths in batches(config.concurrency, page.paths):
        # The next batch starts only once every render of this one completed.
        results = await asyncio.gather(*(generate_path(path, opts, gopts) for path in paths))
        outcomes.extend(results)

        time_change = get_time_stat(time_start, time.perf_counter())
        should_log_time_change = not time_change.startswith("0")
        for path in paths:
            time_increase = f" +{time_change}" if should_log_time_change else ""
            logger.info("    ┃ %s%s", path, time_increase)
            # Only the first path of a batch carries the batch time.
            should_log_time_change = False
        time_start = time.perf_counter()
    return outcomes
