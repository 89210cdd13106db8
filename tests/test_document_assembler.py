"""Tests for DocumentAssembler and document serialization."""

import json

from wadl2swagger.utils.base_url import BaseUrl
from wadl2swagger.utils.document_assembler import DocumentAssembler, serialize_document
from wadl2swagger.utils.options import ConversionOptions

BASE = BaseUrl.parse("https://api.example.com/v1/")


def assembler(**options) -> DocumentAssembler:
    return DocumentAssembler(ConversionOptions.from_mapping(options), BASE)


class TestAssemble:
    """Test the Swagger envelope."""

    def test_envelope_fields(self) -> None:
        """Test scheme, host, basePath and info."""
        document = assembler(title="Pets", version="2.1").assemble({"/pets": {}})

        assert document["swagger"] == "2.0"
        assert document["schemes"] == ["https"]
        assert document["host"] == "api.example.com"
        assert document["basePath"] == "/v1"
        assert document["paths"] == {"/pets": {}}
        assert document["info"] == {"title": "Pets", "version": "2.1", "description": ""}

    def test_no_security_definitions_without_api_key(self) -> None:
        """Test securityDefinitions and definitions need an API key."""
        document = assembler().assemble({})

        assert "securityDefinitions" not in document
        assert "definitions" not in document

    def test_security_definitions_with_api_key(self) -> None:
        """Test the header API key scheme and Empty model."""
        document = assembler(apiKey="key-1").assemble({})

        assert document["securityDefinitions"] == {
            "api_key": {"type": "apiKey", "name": "x-api-key", "in": "header"},
        }
        assert document["definitions"] == {"Empty": {}}

    def test_missing_base_url(self) -> None:
        """Test an empty base URL gives empty envelope values."""
        document = DocumentAssembler(ConversionOptions(), BaseUrl()).assemble({})

        assert document["schemes"] == []
        assert document["host"] == ""
        assert document["basePath"] == ""


class TestRender:
    """Test stringify and prettify handling."""

    def test_render_returns_data_by_default(self) -> None:
        """Test the document is returned unchanged without stringify."""
        a = assembler(prettify=True)
        document = a.assemble({})
        assert a.render(document) is document

    def test_render_compact_text(self) -> None:
        """Test stringify without prettify gives compact JSON."""
        a = assembler(stringify=True)
        text = a.render(a.assemble({}))

        assert isinstance(text, str)
        assert "\n" not in text
        assert text.startswith('{"swagger":"2.0","schemes":["https"]')

    def test_render_pretty_text(self) -> None:
        """Test stringify with prettify indents with two spaces."""
        a = assembler(stringify=True, prettify=True)
        document = a.assemble({})
        text = a.render(document)

        assert text.splitlines()[1] == '  "swagger": "2.0",'
        assert json.loads(text) == document


def test_serialize_document_custom_indent() -> None:
    """Test the indent width can be configured."""
    text = serialize_document({"a": {"b": 1}}, prettify=True, indent=4)
    assert text.splitlines()[1] == '    "a": {'
