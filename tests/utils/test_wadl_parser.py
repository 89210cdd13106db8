"""Tests for WADL parsing and tree access helpers."""

import xml.etree.ElementTree as ET

import pytest

from wadl2swagger.utils.wadl_parser import as_list, first, get_resources, parse_wadl_string


class TestParseWadlString:
    """Test raw WADL parsing into the nested mapping form."""

    def test_root_is_wrapped_in_list(self, petstore_wadl) -> None:
        """Test the root element is keyed by its local name."""
        tree = parse_wadl_string(petstore_wadl)

        assert list(tree) == ["application"]
        assert isinstance(tree["application"], list)

    def test_attributes_and_children(self, petstore_wadl) -> None:
        """Test attributes are strings and children are lists."""
        resources = parse_wadl_string(petstore_wadl)["application"][0]["resources"][0]

        assert resources["base"] == "https://api.example.com/v1/"
        pets = resources["resource"][0]
        assert pets["path"] == "/pets"
        assert [m["id"] for m in pets["method"]] == ["listPets", "createPet"]
        assert pets["resource"][0]["param"][0] == {
            "name": "petId",
            "style": "template",
            "type": "xs:string",
        }

    def test_representation_params(self, petstore_wadl) -> None:
        """Test params nested under request/representation are kept."""
        pets = parse_wadl_string(petstore_wadl)["application"][0]["resources"][0]["resource"][0]
        representation = pets["method"][1]["request"][0]["representation"][0]

        assert representation["mediaType"] == "application/json"
        assert representation["param"][0]["name"] == "pet"

    def test_prefixed_tags_are_localized(self) -> None:
        """Test namespace prefixes are dropped from tag names."""
        wadl = (
            '<wadl:application xmlns:wadl="http://wadl.dev.java.net/2009/02">'
            '<wadl:resources base="http://h/"/></wadl:application>'
        )

        tree = parse_wadl_string(wadl)

        assert tree["application"][0]["resources"][0]["base"] == "http://h/"

    def test_text_content(self) -> None:
        """Test non-blank text is stored under $t."""
        tree = parse_wadl_string("<application><doc>Pets API</doc></application>")
        assert tree["application"][0]["doc"][0]["$t"] == "Pets API"

    def test_malformed_xml_raises(self) -> None:
        """Test parse errors propagate."""
        with pytest.raises(ET.ParseError):
            parse_wadl_string("<application><resources></application>")


class TestTreeHelpers:
    """Test tolerant tree accessors."""

    def test_as_list(self) -> None:
        """Test absent, single and list values normalize to lists."""
        assert as_list(None) == []
        assert as_list({"a": 1}) == [{"a": 1}]
        assert as_list([1, 2]) == [1, 2]
        assert as_list("text") == []

    def test_first(self) -> None:
        """Test first returns the first mapping or None."""
        assert first([{"a": 1}, {"b": 2}]) == {"a": 1}
        assert first([]) is None
        assert first(None) is None

    def test_get_resources(self, minimal_tree) -> None:
        """Test the resources node is found."""
        assert get_resources(minimal_tree)["base"] == "https://api.example.com/v1/"

    @pytest.mark.parametrize("tree", [None, {}, {"application": []}, {"application": [{}]}])
    def test_get_resources_missing(self, tree) -> None:
        """Test incomplete trees have no resources."""
        assert get_resources(tree) is None
