"""Conversion options and YAML configuration loading.

Options are resolved once per conversion into an immutable
:class:`ConversionOptions` and handed to every component explicitly, so two
conversions running side by side never see each other's settings.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "conversion.yaml"

# Default configuration
DEFAULT_CONFIG: dict[str, Any] = {
    "conversion": {
        "prettify": False,
        "sort": False,
        "stringify": False,
        "basicAuthHeader": None,
        "apiKey": None,
        "CORS": False,
        "httpProxy": False,
        "blacklist": [],
        "title": "",
        "version": "",
        "description": "",
    },
    "fetch": {
        "timeout_seconds": 30,
    },
    "output": {
        "json_indent": 2,
    },
}

# snake_case spellings accepted in YAML files and from Python callers
OPTION_ALIASES = {
    "basic_auth_header": "basicAuthHeader",
    "api_key": "apiKey",
    "cors": "CORS",
    "http_proxy": "httpProxy",
}

RECOGNIZED_OPTIONS = frozenset(DEFAULT_CONFIG["conversion"])


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file merged over the defaults."""
    config_path = config_path or DEFAULT_CONFIG_PATH
    try:
        with config_path.open() as f:
            config = yaml.safe_load(f) or {}
            logger.info("Loaded conversion configuration from %s", config_path)
    except FileNotFoundError:
        logger.warning("Config file not found: %s. Using defaults.", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)
    except yaml.YAMLError:
        logger.exception("Error parsing conversion configuration")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(config, dict):
        logger.warning("Ignoring non-mapping configuration in %s", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), config)


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def is_active(value: Any) -> bool:
    """An option is active when set, truthy and, for collections, non-empty."""
    if not value:
        return False
    if isinstance(value, (Mapping, list, tuple, set)) and len(value) == 0:
        return False
    return True


def _active_or_none(value: Any) -> Any:
    return value if is_active(value) else None


@dataclass(frozen=True)
class ConversionOptions:
    """Settings for a single WADL to Swagger conversion.

    ``sort`` is accepted for compatibility but output ordering is always
    lexicographic.
    """

    prettify: bool = False
    sort: bool = False
    stringify: bool = False
    basic_auth_header: str | None = None
    api_key: str | None = None
    cors: bool = False
    http_proxy: bool = False
    blacklist: tuple[str, ...] = field(default_factory=tuple)
    title: str = ""
    version: str = ""
    description: str = ""

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> ConversionOptions:
        """Build options from a mapping of option keys.

        Args:
            options: Mapping using the option names (``basicAuthHeader``,
                ``apiKey``, ``CORS``, ``httpProxy``, ...) or their
                snake_case aliases. ``None`` gives the defaults.

        Returns:
            Frozen options object.
        """
        values = dict(DEFAULT_CONFIG["conversion"])
        for key, value in (options or {}).items():
            key = OPTION_ALIASES.get(key, key)
            if key not in RECOGNIZED_OPTIONS:
                logger.debug("Ignoring unknown conversion option: %s", key)
                continue
            values[key] = value

        blacklist = values["blacklist"] or ()
        if isinstance(blacklist, str):
            blacklist = (blacklist,)

        return cls(
            prettify=bool(values["prettify"]),
            sort=bool(values["sort"]),
            stringify=bool(values["stringify"]),
            basic_auth_header=_active_or_none(values["basicAuthHeader"]),
            api_key=_active_or_none(values["apiKey"]),
            cors=is_active(values["CORS"]),
            http_proxy=is_active(values["httpProxy"]),
            blacklist=tuple(blacklist),
            title=values["title"] or "",
            version=values["version"] or "",
            description=values["description"] or "",
        )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> ConversionOptions:
        """Build options from the ``conversion`` section of a loaded config."""
        return cls.from_mapping(config.get("conversion", {}))

    @property
    def has_basic_auth(self) -> bool:
        return self.basic_auth_header is not None

    @property
    def has_api_key(self) -> bool:
        return self.api_key is not None

    def is_blacklisted(self, path: str) -> bool:
        """True when ``path`` starts with any blacklisted prefix."""
        return any(path.startswith(prefix) for prefix in self.blacklist)
