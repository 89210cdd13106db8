"""Mapping of WADL ``<param>`` attributes to Swagger 2.0 parameter fields."""

from typing import Any

# WADL integer types that Swagger only knows as "integer"
INTEGER_TYPES = frozenset({"int", "long"})

# Parameter styles that must always be supplied by the caller
REQUIRED_STYLES = frozenset({"header", "template"})

STYLE_LOCATIONS = {
    "template": "path",
    "plain": "body",
}


def convert_param_type(prefixed_type: str | None) -> str:
    """Convert a (possibly namespace-prefixed) XSD type to a Swagger type.

    ``xs:int`` and ``long`` become ``integer``; every other type name is
    passed through with its prefix removed.
    """
    if not prefixed_type:
        return ""

    parts = prefixed_type.split(":")
    param_type = parts[1] if len(parts) > 1 and parts[1] else parts[0]

    return "integer" if param_type in INTEGER_TYPES else param_type


def is_param_required(style: str | None) -> bool:
    """Header and template params are required, everything else is optional."""
    return style in REQUIRED_STYLES


def param_location(style: str | None) -> str | None:
    """Swagger ``in`` value for a WADL param style."""
    return STYLE_LOCATIONS.get(style, style)


def to_swagger_parameter(param: dict[str, Any]) -> dict[str, Any]:
    """Build a Swagger parameter object from a raw WADL param mapping."""
    style = param.get("style")
    return {
        "name": param.get("name"),
        "required": is_param_required(style),
        "in": param_location(style),
        "type": convert_param_type(param.get("type")),
    }
