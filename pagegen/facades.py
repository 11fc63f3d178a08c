"""Match bundler chunks back to the page definitions they were built from.

The bundler reports each entry chunk with a facade identifier: the absolute
path of the source module, rooted at the filesystem. Page metadata is keyed by
the same module relative to the project root, so both sides are brought to a
single form before comparing: forward slashes only, project root removed, a
leading ``/`` (``/src/pages/index.astro``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Union

from .errors import ConfigurationError
from .models import BuildArtifact, PageRecord
from .utils import prepend_forward_slash, to_posix


def normalize_facade_id(facade_id: str, project_root: Union[str, Path, None] = None) -> str:
    """Return ``facade_id`` relative to ``project_root`` with forward slashes."""
    normalized = to_posix(facade_id)
    if project_root is not None:
        root = to_posix(str(project_root)).rstrip("/")
        if root and (normalized == root or normalized.startswith(root + "/")):
            normalized = normalized[len(root):]
    return prepend_forward_slash(normalized)


class FacadeIndex:
    """Read-only build data for every page, keyed by normalized facade id.

    Lookups accept absolute or root-relative identifiers in either separator
    style.
    """

    def __init__(
        self,
        project_root: Union[str, Path],
        pages: Mapping[str, PageRecord],
        stylesheets: Optional[Mapping[str, Sequence[str]]] = None,
        hoisted: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.project_root = Path(project_root)
        self._pages: Dict[str, PageRecord] = {
            self.normalize(key): value for key, value in pages.items()
        }
        self._stylesheets: Dict[str, tuple] = {
            self.normalize(key): tuple(value) for key, value in (stylesheets or {}).items()
        }
        self._hoisted: Dict[str, str] = {
            self.normalize(key): value for key, value in (hoisted or {}).items()
        }

    def normalize(self, facade_id: str) -> str:
        return normalize_facade_id(facade_id, self.project_root)

    def __contains__(self, facade_id: object) -> bool:
        if not isinstance(facade_id, str):
            return False
        key = self.normalize(facade_id)
        return key in self._pages or key in self._stylesheets or key in self._hoisted

    def __iter__(self) -> Iterator[str]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def page_for(self, facade_id: str) -> PageRecord:
        """Return the page record for ``facade_id`` or raise ConfigurationError."""
        page = self._pages.get(self.normalize(facade_id))
        if page is None:
            raise ConfigurationError.missing_page(facade_id, self._pages.keys())
        return page

    def stylesheets_for(self, facade_id: str) -> List[str]:
        return list(self._stylesheets.get(self.normalize(facade_id), ()))

    def hoisted_entry_for(self, facade_id: str) -> Optional[str]:
        return self._hoisted.get(self.normalize(facade_id))


def chunk_is_page(artifact: BuildArtifact, facade_index: FacadeIndex) -> bool:
    """Determine whether a bundler artifact is the entry chunk of a page."""
    if not artifact.is_chunk:
        return False
    if not artifact.facade_module_id:
        return False
    return artifact.facade_module_id in facade_index
