#!/usr/bin/env python3
"""Convert a WADL description into a Swagger 2.0 document.

Usage:
    python -m wadl2swagger.convert api.wadl                       # Print to stdout
    python -m wadl2swagger.convert api.wadl -o swagger.json       # Write to file
    python -m wadl2swagger.convert https://host/app/application.wadl --cors
    python -m wadl2swagger.convert api.wadl --api-key KEY --basic-auth-header X-Auth
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any
from xml.etree.ElementTree import ParseError

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .utils.converter import from_file, from_url_async
from .utils.document_assembler import serialize_document
from .utils.fetcher import WadlFetchError
from .utils.options import DEFAULT_CONFIG_PATH, ConversionOptions, load_config

console = Console(stderr=True)


def is_url(source: str) -> bool:
    """True for http(s) sources."""
    return source.startswith(("http://", "https://"))


def build_options(config: dict[str, Any], args: argparse.Namespace) -> ConversionOptions:
    """Merge command-line flags over the ``conversion`` section of the config."""
    values = dict(config.get("conversion", {}))

    overrides = {
        "title": args.title,
        "version": args.api_version,
        "description": args.description,
        "apiKey": args.api_key,
        "basicAuthHeader": args.basic_auth_header,
        "blacklist": args.blacklist,
    }
    for key, value in overrides.items():
        if value is not None:
            values[key] = value

    if args.cors:
        values["CORS"] = True
    if args.http_proxy:
        values["httpProxy"] = True
    if args.no_prettify:
        values["prettify"] = False

    # The CLI serializes the document itself
    values["stringify"] = False

    return ConversionOptions.from_mapping(values)


def convert_source(source: str, options: ConversionOptions, timeout: float) -> dict[str, Any]:
    """Convert a local file or remote URL to a Swagger document."""
    if is_url(source):
        return asyncio.run(from_url_async(source, options, timeout=timeout))
    return from_file(source, options)


def print_summary(document: dict[str, Any], source: str, output: Path | None) -> None:
    """Print conversion summary to the console."""
    paths = document.get("paths", {})
    operations = sum(len(verbs) for verbs in paths.values())
    preflights = sum(1 for verbs in paths.values() if "options" in verbs)

    table = Table(title="Conversion Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Source", source)
    table.add_row("Host", document.get("host") or "-")
    table.add_row("Base Path", document.get("basePath") or "/")
    table.add_row("Paths", str(len(paths)))
    table.add_row("Operations", str(operations))
    table.add_row("OPTIONS Operations", str(preflights))
    table.add_row("Output", str(output) if output else "stdout")

    console.print(table)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Convert a WADL description into a Swagger 2.0 document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "source",
        type=str,
        help="WADL file path or http(s) URL",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write the Swagger document to this file instead of stdout",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to conversion configuration",
    )
    parser.add_argument("--title", type=str, help="info.title of the document")
    parser.add_argument("--api-version", type=str, help="info.version of the document")
    parser.add_argument("--description", type=str, help="info.description of the document")
    parser.add_argument(
        "--api-key",
        type=str,
        help="Secure every operation with this API key id and add OPTIONS methods",
    )
    parser.add_argument(
        "--basic-auth-header",
        type=str,
        help="Header forwarded to the backend as Authorization",
    )
    parser.add_argument(
        "--cors",
        action="store_true",
        help="Add Access-Control-Allow-Origin to method responses",
    )
    parser.add_argument(
        "--http-proxy",
        action="store_true",
        help="Pass backend responses through unchanged",
    )
    parser.add_argument(
        "--blacklist",
        nargs="+",
        metavar="PREFIX",
        help="Leave out methods whose path starts with any of these prefixes",
    )
    parser.add_argument(
        "--no-prettify",
        action="store_true",
        help="Emit compact JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    config = load_config(args.config)
    options = build_options(config, args)
    timeout = config["fetch"].get("timeout_seconds", 30)
    indent = config["output"].get("json_indent", 2)

    try:
        document = convert_source(args.source, options, timeout)
    except WadlFetchError as e:
        console.print(f"[red]Error fetching WADL: {e}[/red]")
        return 1
    except ParseError as e:
        console.print(f"[red]Error parsing WADL: {e}[/red]")
        return 1
    except OSError as e:
        console.print(f"[red]Error reading WADL: {e}[/red]")
        return 1

    text = serialize_document(document, prettify=options.prettify, indent=indent)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text + "\n", encoding="utf-8")
        print_summary(document, args.source, args.output)
        console.print(f"[bold green]Wrote {args.output}[/bold green]")
    else:
        sys.stdout.write(text + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
