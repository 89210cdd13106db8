"""WADL to Swagger 2.0 conversion entry points.

A conversion accepts WADL in one of four forms and always reduces it to the
parsed tree before converting:

- ``from_tree``: an already parsed tree (nested mappings)
- ``from_string``: raw WADL text
- ``from_file``: a local WADL file
- ``from_url`` / ``from_url_async``: a remote WADL document

Options are resolved once per call and passed to every component.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import httpx

from .base_url import BaseUrl
from .document_assembler import DocumentAssembler
from .fetcher import DEFAULT_TIMEOUT, WadlFetchError, fetch_wadl
from .method_extractor import MethodExtractor
from .options import ConversionOptions
from .path_grouper import PathGrouper
from .wadl_parser import as_list, get_resources, parse_wadl_string

logger = logging.getLogger(__name__)

OptionsLike = ConversionOptions | Mapping[str, Any] | None
ConversionCallback = Callable[[Exception | None, dict[str, Any] | str | None], None]


def resolve_options(options: OptionsLike) -> ConversionOptions:
    """Accept either a ConversionOptions or a plain mapping of option keys."""
    if isinstance(options, ConversionOptions):
        return options
    return ConversionOptions.from_mapping(options)


def from_tree(wadl_tree: dict[str, Any], options: OptionsLike = None) -> dict[str, Any] | str:
    """Convert a parsed WADL tree to a Swagger document.

    Args:
        wadl_tree: Nested mapping as produced by ``parse_wadl_string``.
        options: Conversion options.

    Returns:
        The Swagger document, or its JSON text when ``stringify`` is set.
    """
    options = resolve_options(options)

    resources = get_resources(wadl_tree) or {}
    base_url = BaseUrl.parse(resources.get("base"))
    if not base_url.href:
        logger.warning("WADL resources declare no base URL")

    extractor = MethodExtractor(options, base_url)
    methods = [
        method
        for method in extractor.extract_all(as_list(resources.get("resource")))
        if not options.is_blacklisted(method.path)
    ]

    grouper = PathGrouper(options)
    paths = grouper.group(methods)

    assembler = DocumentAssembler(options, base_url)
    document = assembler.assemble(paths)

    logger.info(
        "Converted %d methods into %d paths (%s)",
        len(methods),
        len(paths),
        base_url.href or "no base URL",
    )
    logger.debug("Extraction stats: %s", extractor.get_stats())
    logger.debug("Grouping stats: %s", grouper.get_stats())

    return assembler.render(document)


def from_string(wadl_string: str, options: OptionsLike = None) -> dict[str, Any] | str:
    """Convert raw WADL text to a Swagger document."""
    return from_tree(parse_wadl_string(wadl_string), options)


def from_file(filename: str | Path, options: OptionsLike = None) -> dict[str, Any] | str:
    """Convert a WADL file to a Swagger document."""
    wadl_string = Path(filename).read_text(encoding="utf-8")
    return from_string(wadl_string, options)


async def from_url_async(
    wadl_url: str,
    options: OptionsLike = None,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any] | str:
    """Fetch a remote WADL document and convert it.

    Raises:
        WadlFetchError: If the document cannot be retrieved.
    """
    wadl_string = await fetch_wadl(wadl_url, timeout=timeout, transport=transport)
    return from_string(wadl_string, options)


async def from_url(
    wadl_url: str,
    callback: ConversionCallback,
    options: OptionsLike = None,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Fetch and convert a remote WADL document, reporting through a callback.

    ``callback`` is invoked exactly once, either as ``callback(error, None)``
    or as ``callback(None, result)``. Conversion is not attempted when the
    fetch fails.
    """
    try:
        wadl_string = await fetch_wadl(wadl_url, timeout=timeout, transport=transport)
    except WadlFetchError as e:
        logger.warning("Could not fetch %s: %s", wadl_url, e)
        callback(e, None)
        return

    try:
        result = from_string(wadl_string, options)
    except Exception as e:  # noqa: BLE001
        callback(e, None)
        return

    callback(None, result)
