"""Method extraction from WADL resource trees.

Walks a ``<resource>`` node and its nested resources depth-first, producing
one flat :class:`MethodRecord` per ``<method>``. API gateway options
(Basic-Auth forwarding, API key, CORS, HTTP proxy) are applied here so that
each record already carries its security, responses and integration block.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .base_url import BaseUrl
from .options import ConversionOptions
from .paths import create_url
from .wadl_parser import as_list, first

logger = logging.getLogger(__name__)

PASSTHROUGH = "__passthrough__"


@dataclass
class MethodRecord:
    """A single WADL method with everything needed to emit an operation."""

    verb: str
    name: str | None
    path: str
    params: list[dict[str, Any]] = field(default_factory=list)
    security: list[dict[str, Any]] = field(default_factory=list)
    integration: dict[str, Any] = field(default_factory=dict)
    responses: dict[str, Any] = field(default_factory=dict)


@dataclass
class ExtractionStats:
    """Statistics from method extraction."""

    resources_visited: int = 0
    methods_extracted: int = 0
    params_collected: int = 0
    integrations_built: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "resources_visited": self.resources_visited,
            "methods_extracted": self.methods_extracted,
            "params_collected": self.params_collected,
            "integrations_built": self.integrations_built,
        }


def cors_method_response() -> dict[str, Any]:
    """200 method response declaring the CORS origin header."""
    return {
        "200": {
            "description": "200 response",
            "headers": {
                "Access-Control-Allow-Origin": {
                    "type": "string",
                },
            },
        },
    }


class MethodExtractor:
    """Flattens a WADL resource tree into method records.

    One extractor serves one conversion: it holds that conversion's options
    and base URL and hands them to every recursive call.
    """

    def __init__(self, options: ConversionOptions, base_url: BaseUrl) -> None:
        """Initialize extractor.

        Args:
            options: Options of the current conversion.
            base_url: Parsed ``<resources base>`` URL.
        """
        self.options = options
        self.base_url = base_url
        self.stats = ExtractionStats()

    def extract_all(self, resources: list[dict[str, Any]]) -> list[MethodRecord]:
        """Extract methods from the top-level resources of a document."""
        self.stats = ExtractionStats()

        methods: list[MethodRecord] = []
        for resource in resources:
            methods.extend(self.extract(self.base_url.root, resource))
        return methods

    def extract(self, base_path: str, resource: dict[str, Any]) -> list[MethodRecord]:
        """Extract a resource's own methods, then those of its nested resources.

        Args:
            base_path: Resolved path of the parent resource.
            resource: WADL ``<resource>`` node.

        Returns:
            Method records in depth-first, pre-order sequence.
        """
        if not isinstance(resource, dict):
            return []

        self.stats.resources_visited += 1
        path = create_url(base_path, resource.get("path"))
        full_path = create_url(self.base_url.origin, path)

        resource_params = as_list(resource.get("param"))

        methods = [
            self._build_record(method, path, full_path, resource_params)
            for method in as_list(resource.get("method"))
            if isinstance(method, dict)
        ]
        logger.debug("Resource %s: %d methods", path or "/", len(methods))

        for child in as_list(resource.get("resource")):
            methods.extend(self.extract(path, child))

        return methods

    def _collect_params(
        self,
        method: dict[str, Any],
        resource_params: list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        """Resource params, then request params, then representation params."""
        request = first(method.get("request"))
        representation = first(request.get("representation")) if request else None

        params = list(resource_params)
        if request:
            params.extend(as_list(request.get("param")))
        if representation:
            params.extend(as_list(representation.get("param")))
        return params

    def _build_record(
        self,
        method: dict[str, Any],
        path: str,
        full_path: str,
        resource_params: list[dict[str, Any]],
    ) -> MethodRecord:
        """Build the record of one method, applying gateway options."""
        options = self.options
        params = self._collect_params(method, resource_params)
        verb = method.get("name") or ""

        security: list[dict[str, Any]] = []
        responses: dict[str, Any] = {}
        request_parameters: dict[str, str] = {}
        default_response: dict[str, Any] = {}

        if options.has_basic_auth:
            header_name = options.basic_auth_header
            params.append({"type": "xs:string", "style": "header", "name": header_name})
            request_parameters["integration.request.header.Authorization"] = (
                f"method.request.header.{header_name}"
            )

        if options.has_api_key:
            security = [{"api_key": options.api_key}]

        if options.cors:
            responses = cors_method_response()
            default_response["statusCode"] = "200"
            default_response["responseParameters"] = {
                "method.response.header.Access-Control-Allow-Origin": "'*'",
            }

        if options.http_proxy:
            default_response["responseTemplates"] = {"application/json": PASSTHROUGH}

        integration: dict[str, Any] = {}
        if options.has_basic_auth or options.cors or options.http_proxy:
            if request_parameters:
                integration["requestParameters"] = request_parameters
            if default_response:
                integration["responses"] = {"default": default_response}
            integration["uri"] = full_path
            integration["httpMethod"] = verb
            integration["type"] = self.base_url.scheme
            self.stats.integrations_built += 1

        self.stats.methods_extracted += 1
        self.stats.params_collected += len(params)

        return MethodRecord(
            verb=verb,
            name=method.get("id"),
            path=path,
            params=params,
            security=security,
            integration=integration,
            responses=responses,
        )

    def get_stats(self) -> dict[str, Any]:
        """Return statistics about the last extraction."""
        return self.stats.to_dict()
