"""YAML configuration loader for List Pages.

Loads and caches the facet definitions from facets.yaml.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
from functools import lru_cache
import yaml

# Get config directory
CONFIG_DIR = Path(__file__).parent

DEFAULT_FACETS_FILE = CONFIG_DIR / "facets.yaml"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""

    pass


def _load_yaml_file(filepath: Path) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filepath: Path to the YAML file

    Returns:
        Parsed YAML content as dictionary

    Raises:
        ConfigurationError: If file cannot be loaded
    """
    if not filepath.exists():
        raise ConfigurationError(f"Configuration file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing {filepath.name}: {e}")
    except IOError as e:
        raise ConfigurationError(f"Error reading {filepath.name}: {e}")

    if not isinstance(content, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {filepath.name}")
    return content


@lru_cache(maxsize=4)
def load_facets(filepath: Optional[Path] = None) -> List[Dict[str, Any]]:
    """
    Load facet definitions.

    Each entry carries the facet id plus the keys declared under it in the
    YAML file (name, source, field, url_alias, widget).

    Raises:
        ConfigurationError: If the file is missing, invalid, or a facet
            lacks a required key.
    """
    data = _load_yaml_file(filepath or DEFAULT_FACETS_FILE)
    facets = data.get("facets") or {}
    if not isinstance(facets, dict):
        raise ConfigurationError("'facets' must be a mapping of facet id to definition")

    entries = []
    for facet_id, definition in facets.items():
        definition = definition or {}
        for key in ("source", "field"):
            if not definition.get(key):
                raise ConfigurationError(f"Facet '{facet_id}' is missing '{key}'")
        entries.append({"id": str(facet_id), **definition})
    return entries
