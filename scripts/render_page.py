#!/usr/bin/env python3
"""Render a page shell with the site content.

Loads every content section (from the cache when fresh), runs the
renderers against the page shell and prints the resulting HTML.

Usage
-----
::

    python scripts/render_page.py index.html --data ./assets/data/
    python scripts/render_page.py printable_cv.html --mode one-page -o out.html

Options::

    --data PATH          Directory or http(s) URL holding the JSON sections
    --cache FILE         Persist the content cache in FILE
    --url URL            Page URL (default: derived from the shell file name)
    --mode MODE          Switch to this CV mode after rendering
    --output FILE        Write output to FILE instead of stdout
    --clear-cache        Drop the cached snapshot before loading
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pysiteloader import Page, SiteConfig, SiteController, SiteLoader  # noqa: E402


async def main() -> int:
    parser = argparse.ArgumentParser(description="Render a page shell with the site content.")
    parser.add_argument("shell", help="HTML page shell to render")
    parser.add_argument("--data", help="Directory or URL holding the JSON sections")
    parser.add_argument("--cache", help="Persist the content cache in FILE")
    parser.add_argument("--url", help="Page URL (default: http://localhost/<shell name>)")
    parser.add_argument("--mode", help="Switch to this CV mode after rendering")
    parser.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    parser.add_argument("--clear-cache", action="store_true", help="Drop the cached snapshot before loading")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, Any] = {}
    if args.data:
        overrides["base_path"] = args.data
    if args.cache:
        overrides["cache_path"] = args.cache
    config = SiteConfig.from_env(**overrides)

    shell = Path(args.shell)
    page = Page(shell.read_text(encoding="utf-8"), url=args.url or f"http://localhost/{shell.name}")
    loader = SiteLoader(config)
    if args.clear_cache:
        loader.repository.clear()

    controller = SiteController(page, loader)
    if not await controller.start():
        print("Content could not be loaded; page left unrendered.", file=sys.stderr)
        return 1
    if args.mode:
        await controller.switch_mode(args.mode)

    html = page.render()
    if args.output:
        Path(args.output).write_text(html, encoding="utf-8")
        print(f"Page written to {args.output}", file=sys.stderr)
    else:
        print(html)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
