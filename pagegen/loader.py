"""Load compiled page modules and renderer server entrypoints."""

from __future__ import annotations

import asyncio
import hashlib
import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Awaitable, Callable, List, Sequence

from .config import BuildConfig, RendererSpec
from .errors import LoaderError
from .models import LoadedRenderer

logger = logging.getLogger("pagegen")

ModuleLoader = Callable[[Path], Awaitable[ModuleType]]


def _module_name_for(path: Path) -> str:
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:12]
    stem = "".join(ch if ch.isalnum() else "_" for ch in path.stem)
    return f"pagegen_chunk_{stem}_{digest}"


async def load_module(path: Path) -> ModuleType:
    """Import a compiled module from a ``.py`` file and return it."""
    path = Path(path)
    module_name = _module_name_for(path.resolve())
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise LoaderError(str(path))
    module = importlib.util.module_from_spec(spec)
    # Visible in sys.modules only while the module body runs.
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise LoaderError(str(path), exc) from exc
    finally:
        sys.modules.pop(module_name, None)
    logger.debug("Loaded module %s from %s", module_name, path)
    return module


def resolve_dependency(entrypoint: str, config: BuildConfig) -> Path:
    """Resolve a file entrypoint against the project root."""
    path = Path(entrypoint)
    if not path.is_absolute():
        path = config.project_root / path
    return path


async def load_renderer(renderer: RendererSpec, config: BuildConfig) -> LoadedRenderer:
    """Import a renderer's server entrypoint (a dotted module or a ``.py`` file).

    The module's ``renderer`` attribute is used when present, the module
    itself otherwise.
    """
    entrypoint = renderer.server_entrypoint
    if entrypoint.endswith(".py"):
        module = await load_module(resolve_dependency(entrypoint, config))
    else:
        try:
            module = importlib.import_module(entrypoint)
        except Exception as exc:
            raise LoaderError(entrypoint, exc) from exc
    return LoadedRenderer(
        name=renderer.name,
        server_entrypoint=entrypoint,
        ssr=getattr(module, "renderer", module),
    )


async def load_renderers(
    renderers: Sequence[RendererSpec], config: BuildConfig
) -> List[LoadedRenderer]:
    return list(await asyncio.gather(*(load_renderer(r, config) for r in renderers)))
