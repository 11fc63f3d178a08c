"""Read the JSON manifest that describes one bundling pass.

Example::

    {
      "project_root": "/home/me/site",
      "artifacts": [
        {"type": "chunk", "file_name": "chunks/index.py",
         "facade_module_id": "/home/me/site/src/pages/index.astro"}
      ],
      "pages": {
        "/src/pages/index.astro": {
          "route": {"type": "page", "component": "src/pages/index.astro"},
          "paths": ["/", "/about"]
        }
      },
      "stylesheets": {"/src/pages/index.astro": ["assets/index.css"]},
      "hoisted": {"/src/pages/index.astro": "hoisted.js"},
      "specifiers": {"hoisted.js": "assets/hoisted.1c2d.js"},
      "renderers": [{"name": "preact", "server_entrypoint": "renderers/preact.py"}],
      "scripts": [{"stage": "head-inline", "content": "window.x = 1"}]
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Tuple, Union

from .config import InjectedScript, RendererSpec
from .errors import ConfigurationError
from .facades import FacadeIndex
from .models import BuildArtifact, PageRecord, RouteData, SpecifierTable


@dataclass(frozen=True)
class BuildManifest:
    """Inputs for one generation run."""

    project_root: Path
    artifacts: Tuple[BuildArtifact, ...]
    facade_index: FacadeIndex
    specifiers: SpecifierTable
    scripts: Tuple[InjectedScript, ...] = ()


def _page_record(facade_id: str, raw: Mapping[str, Any]) -> PageRecord:
    route = raw.get("route")
    if not isinstance(route, Mapping) or route.get("type") not in ("page", "endpoint"):
        raise ConfigurationError(f"Page {facade_id} has no valid route")
    return PageRecord(
        route=RouteData(
            type=route["type"],
            component=route.get("component", facade_id.lstrip("/")),
            route=route.get("route"),
        ),
        paths=tuple(raw.get("paths", ())),
    )


def parse_manifest(data: Mapping[str, Any], base_dir: Union[str, Path, None] = None) -> BuildManifest:
    """Build manifest objects from decoded JSON."""
    if not isinstance(data, Mapping):
        raise ConfigurationError("Build manifest must be a JSON object")
    try:
        project_root = Path(data.get("project_root") or base_dir or Path.cwd())
        artifacts: List[BuildArtifact] = [
            BuildArtifact(
                type=item["type"],
                file_name=item["file_name"],
                facade_module_id=item.get("facade_module_id"),
            )
            for item in data.get("artifacts", [])
        ]
        pages = {
            facade_id: _page_record(facade_id, raw)
            for facade_id, raw in data.get("pages", {}).items()
        }
        facade_index = FacadeIndex(
            project_root,
            pages,
            stylesheets=data.get("stylesheets", {}),
            hoisted=data.get("hoisted", {}),
        )
        specifiers = SpecifierTable(
            entries=dict(data.get("specifiers", {})),
            renderers=tuple(
                RendererSpec(name=item["name"], server_entrypoint=item["server_entrypoint"])
                for item in data.get("renderers", [])
            ),
        )
        scripts = tuple(
            InjectedScript(stage=item["stage"], content=item["content"])
            for item in data.get("scripts", [])
        )
    except (KeyError, TypeError, AttributeError) as exc:
        raise ConfigurationError(f"Malformed build manifest: {exc!r}") from exc
    return BuildManifest(
        project_root=project_root,
        artifacts=tuple(artifacts),
        facade_index=facade_index,
        specifiers=specifiers,
        scripts=scripts,
    )


def load_manifest(path: Union[str, Path]) -> BuildManifest:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Build manifest {path} is not valid JSON: {exc}") from exc
    return parse_manifest(data, base_dir=path.parent)
