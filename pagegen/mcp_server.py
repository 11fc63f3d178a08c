"""MCP server exposing static page generation as a tool."""

from __future__ import annotations

import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from .cli import run_generation
from .config import BuildConfig
from .manifest import load_manifest

logger = logging.getLogger("pagegen.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="pagegen")


@mcp.tool()
async def generate(
    manifest: str,
    output: str,
) -> str:
    """Generate the static pages described by a build manifest.

    Returns the generated page names, one per line.
    """

    manifest_path = Path(manifest).expanduser()
    if not manifest_path.exists():
        raise FileNotFoundError(f"Build manifest does not exist: {manifest_path}")

    build = load_manifest(manifest_path)
    config = BuildConfig(
        output_root=Path(output).expanduser().resolve(),
        project_root=build.project_root,
        scripts=build.scripts,
    )
    report = await run_generation(build, config)
    if report.failed:
        logger.error("%d paths failed to render", report.failed)
    return "\n".join(name or "/" for name in report.page_names)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
