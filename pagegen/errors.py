"""Error types raised while generating static pages.

Fatal errors abort the whole generation run. The remaining kinds are caught
at the single-path boundary in :mod:`pagegen.render`, logged with the path
that produced them, and the path is left out of the output.
"""

from __future__ import annotations

from typing import Iterable, Optional


class GenerationError(Exception):
    """Base class for every error raised by the generator."""

    fatal = False


class ConfigurationError(GenerationError):
    """Build metadata is structurally inconsistent (e.g. a page has no record)."""

    fatal = True

    @classmethod
    def missing_page(cls, facade_id: str, known: Iterable[str]) -> "ConfigurationError":
        return cls(
            f"Unable to find page build data for the page: {facade_id}. "
            f"Known pages: {', '.join(known)}"
        )


class LoaderError(GenerationError):
    """A renderer module or a compiled page module could not be loaded."""

    fatal = True

    def __init__(self, target: str, cause: Optional[BaseException] = None) -> None:
        message = f"Unable to load module {target}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.target = target
        self.cause = cause


class ResolutionError(GenerationError):
    """A specifier referenced by a rendered page has no built output."""

    def __init__(self, specifier: str) -> None:
        super().__init__(f"Cannot find the built path for {specifier}")
        self.specifier = specifier


class UnsupportedOperationError(GenerationError):
    """An endpoint returned a live response while generating static output."""


class RenderError(GenerationError):
    """The rendering collaborator failed for one path."""

    def __init__(self, pathname: str, cause: BaseException) -> None:
        super().__init__(f"Failed to render {pathname}: {cause}")
        self.pathname = pathname
        self.cause = cause
