"""Folding of flat method records into the Swagger ``paths`` object.

Records are grouped by path and then by verb, both in sorted order, so the
resulting mapping does not depend on the order resources appear in the WADL.
When an API key is configured, each path also receives a mock ``options``
operation answering CORS preflight requests.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any

from .method_extractor import PASSTHROUGH, MethodRecord
from .options import ConversionOptions
from .param_classifier import to_swagger_parameter

logger = logging.getLogger(__name__)

INTEGRATION_EXTENSION = "x-amazon-apigateway-integration"

# Verbs whose parameters are reused for the preflight operation, by preference
PREFLIGHT_PARAM_SOURCES = ("get", "post", "put", "delete")

PREFLIGHT_ALLOWED_HEADERS = ("Content-Type", "X-Amz-Date", "Authorization", "X-Api-Key")
PREFLIGHT_ALLOWED_METHODS = "'GET,OPTIONS,PUT'"


@dataclass
class GroupingStats:
    """Statistics from path grouping."""

    paths_grouped: int = 0
    operations_emitted: int = 0
    duplicate_params_dropped: int = 0
    options_synthesized: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "paths_grouped": self.paths_grouped,
            "operations_emitted": self.operations_emitted,
            "duplicate_params_dropped": self.duplicate_params_dropped,
            "options_synthesized": self.options_synthesized,
        }


class PathGrouper:
    """Builds the path -> verb -> operation mapping from method records."""

    def __init__(self, options: ConversionOptions) -> None:
        self.options = options
        self.stats = GroupingStats()

    def group(self, methods: list[MethodRecord]) -> dict[str, dict[str, Any]]:
        """Group method records by path and verb.

        Args:
            methods: Records produced by the method extractor.

        Returns:
            Mapping of path to mapping of lowercased verb to operation.
        """
        self.stats = GroupingStats()

        methods_by_path: dict[str, list[MethodRecord]] = defaultdict(list)
        for method in methods:
            methods_by_path[method.path].append(method)

        paths: dict[str, dict[str, Any]] = {}
        for path in sorted(methods_by_path):
            paths[path] = self._group_path(path, methods_by_path[path])
            self.stats.paths_grouped += 1

        logger.debug("Grouped %d methods into %d paths", len(methods), len(paths))
        return paths

    def _group_path(self, path: str, methods: list[MethodRecord]) -> dict[str, Any]:
        methods_by_verb: dict[str, list[MethodRecord]] = defaultdict(list)
        for method in methods:
            methods_by_verb[method.verb].append(method)

        operations: dict[str, Any] = {}
        for verb in sorted(methods_by_verb):
            operations[verb.lower()] = self._build_operation(methods_by_verb[verb])
            self.stats.operations_emitted += 1

        if self.options.has_api_key and "options" not in operations:
            operations["options"] = self._build_preflight(operations)
            self.stats.options_synthesized += 1
            logger.debug("Synthesized options operation for %s", path)

        return {verb: operations[verb] for verb in sorted(operations)}

    def _build_operation(self, methods: list[MethodRecord]) -> dict[str, Any]:
        """Merge the records of one path and verb into a single operation."""
        members = sorted(methods, key=lambda method: method.name or "")
        representative = members[0]

        operation: dict[str, Any] = {"responses": representative.responses or {}}

        parameters = self._merge_parameters(members)
        if parameters:
            operation["parameters"] = parameters

        if self.options.has_api_key:
            operation["security"] = representative.security

        if representative.integration:
            operation[INTEGRATION_EXTENSION] = representative.integration

        return operation

    def _merge_parameters(self, members: list[MethodRecord]) -> list[dict[str, Any]]:
        """Flatten member params, keeping the first param of each name."""
        parameters = []
        seen: set[Any] = set()

        for member in members:
            for param in member.params:
                if not isinstance(param, dict):
                    continue
                name = param.get("name")
                if name in seen:
                    self.stats.duplicate_params_dropped += 1
                    continue
                seen.add(name)
                parameters.append(to_swagger_parameter(param))

        return parameters

    def _preflight_parameters(self, operations: dict[str, Any]) -> list[dict[str, Any]]:
        """First non-empty parameter list among GET, POST, PUT and DELETE."""
        auth_header = self.options.basic_auth_header

        for verb in PREFLIGHT_PARAM_SOURCES:
            operation = operations.get(verb)
            if not operation:
                continue
            parameters = [
                dict(param)
                for param in operation.get("parameters", [])
                if param["name"] != auth_header
            ]
            if parameters:
                return parameters

        return []

    def _build_preflight(self, operations: dict[str, Any]) -> dict[str, Any]:
        """Mock ``options`` operation answering CORS preflight requests."""
        allowed_headers = list(PREFLIGHT_ALLOWED_HEADERS)
        if self.options.has_basic_auth:
            allowed_headers.append(self.options.basic_auth_header)

        return {
            "produces": ["application/json"],
            "parameters": self._preflight_parameters(operations),
            "responses": {
                "200": {
                    "description": "200 response",
                    "schema": {"$ref": "#/definitions/Empty"},
                    "headers": {
                        "Access-Control-Allow-Origin": {"type": "string"},
                        "Access-Control-Allow-Methods": {"type": "string"},
                        "Access-Control-Allow-Headers": {"type": "string"},
                    },
                },
            },
            "security": [{"api_key": self.options.api_key}],
            INTEGRATION_EXTENSION: {
                "responses": {
                    "default": {
                        "statusCode": "200",
                        "responseParameters": {
                            "method.response.header.Access-Control-Allow-Methods": (
                                PREFLIGHT_ALLOWED_METHODS
                            ),
                            "method.response.header.Access-Control-Allow-Headers": (
                                "'" + ",".join(allowed_headers) + "'"
                            ),
                            "method.response.header.Access-Control-Allow-Origin": "'*'",
                        },
                        "responseTemplates": {"application/json": PASSTHROUGH},
                    },
                },
                "requestTemplates": {"application/json": '{"statusCode": 200}'},
                "type": "mock",
            },
        }

    def get_stats(self) -> dict[str, Any]:
        """Return statistics about the last grouping."""
        return self.stats.to_dict()
