"""Convert WADL API descriptions into Swagger 2.0 documents.

Optionally annotates operations for API gateway import: mock CORS preflight
methods, API key security, HTTP proxy passthrough and Basic-Auth forwarding.
"""

from .utils import ConversionOptions, WadlFetchError
from .utils.converter import from_file, from_string, from_tree, from_url, from_url_async

__all__ = [
    "ConversionOptions",
    "WadlFetchError",
    "from_file",
    "from_string",
    "from_tree",
    "from_url",
    "from_url_async",
]
