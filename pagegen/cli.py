"""Command-line entry point for static page generation."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path
from typing import Iterable, Sequence

from .config import MAX_CONCURRENT_RENDERS, PAGE_URL_FORMATS, BuildConfig, StaticBuildOptions
from .errors import GenerationError
from .generate import GenerationReport, generate_pages
from .manifest import BuildManifest, load_manifest

logger = logging.getLogger("pagegen.cli")


def _ensure_command_prefix(argv: Sequence[str], commands: Iterable[str]) -> Sequence[str]:
    if not argv:
        return argv
    first = argv[0]
    if first in commands or first.startswith("-"):
        return argv
    return ("generate", *argv)


def _add_generate_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("manifest", type=Path, help="JSON manifest describing the bundler output")
    parser.add_argument(
        "--output",
        default="dist",
        type=Path,
        help="Directory where generated pages should be written",
    )
    parser.add_argument(
        "--chunks",
        type=Path,
        default=None,
        help="Directory holding the compiled page modules (defaults to --output)",
    )
    parser.add_argument(
        "--site",
        default=None,
        help="Final deployed URL; its path is used as the base for asset links",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=MAX_CONCURRENT_RENDERS,
        help="Maximum number of paths rendered at the same time",
    )
    parser.add_argument(
        "--format",
        dest="page_url_format",
        choices=PAGE_URL_FORMATS,
        default="directory",
        help="Write pages as about/index.html (directory) or about.html (file)",
    )
    parser.add_argument(
        "--ssr",
        action="store_true",
        help="Endpoints are also served at request time; skip live responses",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate static pages from a compiled site build.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate", help="Render every page path into the output directory"
    )
    _add_generate_arguments(generate_parser)

    argv = list(sys.argv[1:] if argv is None else argv)
    argv = list(_ensure_command_prefix(argv, subparsers.choices.keys()))
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace, manifest: BuildManifest) -> BuildConfig:
    output_root = Path(args.output).resolve()
    return BuildConfig(
        output_root=output_root,
        project_root=manifest.project_root,
        chunk_root=Path(args.chunks).resolve() if args.chunks else None,
        site=args.site,
        concurrency=args.concurrency,
        ssr=args.ssr,
        page_url_format=args.page_url_format,
        scripts=manifest.scripts,
    )


async def run_generation(manifest: BuildManifest, config: BuildConfig) -> GenerationReport:
    opts = StaticBuildOptions(config=config)
    return await generate_pages(
        manifest.artifacts, opts, manifest.facade_index, manifest.specifiers
    )


def _run_generate(args: argparse.Namespace) -> int:
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    overall_start = time.perf_counter()
    try:
        manifest = load_manifest(args.manifest)
        config = build_config(args, manifest)
        report = asyncio.run(run_generation(manifest, config))
    except (GenerationError, ValueError, OSError) as exc:
        logger.error("Generation failed: %s", exc)
        return 1
    total_elapsed = time.perf_counter() - overall_start

    logger.info(
        "Finished in %.2fs (%d written, %d skipped, %d failed, %d pages)",
        total_elapsed,
        report.rendered,
        report.skipped,
        report.failed,
        len(report.page_names),
    )
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    sys.exit(_run_generate(args))


if __name__ == "__main__":
    main()
