"""Building blocks for WADL to Swagger 2.0 conversion."""

from .base_url import BaseUrl
from .converter import from_file, from_string, from_tree, from_url, from_url_async
from .document_assembler import DocumentAssembler, serialize_document
from .fetcher import WadlFetchError, fetch_wadl
from .method_extractor import ExtractionStats, MethodExtractor, MethodRecord
from .options import ConversionOptions, load_config
from .param_classifier import convert_param_type, is_param_required, param_location
from .path_grouper import GroupingStats, PathGrouper
from .paths import create_url
from .wadl_parser import parse_wadl_string

__all__ = [
    "BaseUrl",
    "ConversionOptions",
    "DocumentAssembler",
    "ExtractionStats",
    "GroupingStats",
    "MethodExtractor",
    "MethodRecord",
    "PathGrouper",
    "WadlFetchError",
    "convert_param_type",
    "create_url",
    "fetch_wadl",
    "from_file",
    "from_string",
    "from_tree",
    "from_url",
    "from_url_async",
    "is_param_required",
    "load_config",
    "param_location",
    "parse_wadl_string",
    "serialize_document",
]
