"""Resolve module specifiers referenced by a page to built output paths."""

from __future__ import annotations

import posixpath
from typing import Awaitable, Callable

from .errors import ResolutionError
from .models import SpecifierTable
from .utils import prepend_forward_slash

BEFORE_HYDRATION_SPECIFIER = "astro:scripts/before-hydration.js"
# Inert script reference used when a build emits no before-hydration script.
BEFORE_HYDRATION_PLACEHOLDER = "data:text/javascript;charset=utf-8,//[no before-hydration script]"

Resolver = Callable[[str], Awaitable[str]]


def resolve_specifier(specifier: str, pathname: str, table: SpecifierTable) -> str:
    """Return the path of ``specifier``'s bundle relative to the page at ``pathname``.

    The result always starts with ``./`` or ``../`` so browsers never treat
    it as a bare module specifier. The before-hydration script is the only
    specifier allowed to be missing from ``table``.
    """
    hashed_file_path = table.get(specifier)
    if not isinstance(hashed_file_path, str):
        if specifier == BEFORE_HYDRATION_SPECIFIER:
            return BEFORE_HYDRATION_PLACEHOLDER
        raise ResolutionError(specifier)
    rel_path = posixpath.relpath(
        prepend_forward_slash(hashed_file_path),
        start=prepend_forward_slash(pathname),
    )
    if rel_path in (".", "..") or rel_path.startswith("../"):
        return rel_path
    return "./" + rel_path


def make_resolver(table: SpecifierTable, pathname: str) -> Resolver:
    """Bind the specifier table and pathname into the resolver given to renderers."""

    async def resolve(specifier: str) -> str:
        return resolve_specifier(specifier, pathname, table)

    return resolve
