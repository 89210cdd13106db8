"""Swagger 2.0 envelope around the grouped paths."""

import json
from typing import Any

from .base_url import BaseUrl
from .options import ConversionOptions

SWAGGER_VERSION = "2.0"


class DocumentAssembler:
    """Wraps a paths object into a complete Swagger 2.0 document."""

    def __init__(self, options: ConversionOptions, base_url: BaseUrl) -> None:
        self.options = options
        self.base_url = base_url

    def assemble(self, paths: dict[str, Any]) -> dict[str, Any]:
        """Build the Swagger document for the given paths object."""
        document: dict[str, Any] = {
            "swagger": SWAGGER_VERSION,
            "schemes": [self.base_url.scheme] if self.base_url.scheme else [],
            "host": self.base_url.host,
            "basePath": self.base_url.base_path,
            "paths": paths,
            "info": {
                "title": self.options.title,
                "version": self.options.version,
                "description": self.options.description,
            },
        }

        if self.options.has_api_key:
            document["securityDefinitions"] = {
                "api_key": {
                    "type": "apiKey",
                    "name": "x-api-key",
                    "in": "header",
                },
            }
            document["definitions"] = {"Empty": {}}

        return document

    def render(self, document: dict[str, Any]) -> dict[str, Any] | str:
        """Return the document as data, or as text when ``stringify`` is set."""
        if not self.options.stringify:
            return document
        return serialize_document(document, prettify=self.options.prettify)


def serialize_document(document: dict[str, Any], prettify: bool = False, indent: int = 2) -> str:
    """Serialize a document to JSON text, indented when ``prettify`` is set."""
    if prettify:
        return json.dumps(document, indent=indent, ensure_ascii=False)
    return json.dumps(document, separators=(",", ":"), ensure_ascii=False)
