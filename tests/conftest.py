"""Shared fixtures for wadl2swagger tests."""

import pytest

PETSTORE_WADL = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<application xmlns="http://wadl.dev.java.net/2009/02"
             xmlns:xs="http://www.w3.org/2001/XMLSchema">
    <!-- Pet store sample -->
    <resources base="https://api.example.com/v1/">
        <resource path="/pets">
            <method name="GET" id="listPets">
                <request>
                    <param name="limit" style="query" type="xs:int"/>
                </request>
            </method>
            <method name="POST" id="createPet">
                <request>
                    <representation mediaType="application/json">
                        <param name="pet" style="plain" type="xs:string"/>
                    </representation>
                </request>
            </method>
            <resource path="{petId}">
                <param name="petId" style="template" type="xs:string"/>
                <method name="GET" id="getPet"/>
                <method name="DELETE" id="deletePet">
                    <request>
                        <param name="X-Trace" style="header" type="xs:string"/>
                    </request>
                </method>
            </resource>
        </resource>
    </resources>
</application>
"""


@pytest.fixture
def petstore_wadl() -> str:
    """Raw pet store WADL text."""
    return PETSTORE_WADL


@pytest.fixture
def minimal_tree() -> dict:
    """Parsed tree with one GET /pets method taking a template param."""
    return {
        "application": [
            {
                "resources": [
                    {
                        "base": "https://api.example.com/v1/",
                        "resource": [
                            {
                                "path": "/pets",
                                "method": [
                                    {
                                        "name": "GET",
                                        "id": "getPet",
                                        "request": [
                                            {
                                                "param": [
                                                    {
                                                        "name": "petId",
                                                        "style": "template",
                                                        "type": "xs:string",
                                                    },
                                                ],
                                            },
                                        ],
                                    },
                                ],
                            },
                        ],
                    },
                ],
            },
        ],
    }


@pytest.fixture
def make_tree():
    """Factory wrapping top-level resources in an application/resources tree."""

    def _make_tree(resources: list[dict], base: str = "http://localhost:8080/app/") -> dict:
        return {"application": [{"resources": [{"base": base, "resource": resources}]}]}

    return _make_tree
