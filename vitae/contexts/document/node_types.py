"""
Node Type Registry

Loads and caches node type definitions. Each type lives in its own directory:

    types/{type_name}/node_type.yaml

    display_name: Entry
    defaults:
      title: [""]
      subtitle: [""]

Definitions only describe what a fresh node of the type looks like. Behavior
(toolbar options) is registered separately in the editing context.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vitae.contexts.document.logger import _log_debug
from vitae.contexts.document.node import ResumeNode

load_dotenv()
TYPES_PATH = Path(os.getenv("VITAE_NODE_TYPES_PATH", Path(__file__).parent / "types"))


class NodeTypeRegistry:
    """
    Registry for loading and caching node type definitions.

    Unknown types are not an error when creating nodes: they get empty
    defaults, so documents written by newer editors still load.
    """

    def __init__(self, types_base_path: Path = None):
        """
        Initialize the node type registry.

        Args:
            types_base_path: Base path for type directories. Defaults to
                             VITAE_NODE_TYPES_PATH from environment, falling back
                             to the packaged types/ directory
        """
        if types_base_path is None:
            types_base_path = TYPES_PATH

        self.types_base_path = Path(types_base_path)
        self._cache: Dict[str, Dict[str, Any]] = {}

    def get_config(self, type_name: str) -> Dict[str, Any]:
        """
        Get a type definition by name, loading and caching it if necessary.

        Args:
            type_name: Name of the type (e.g., 'entry')

        Returns:
            Dict containing the type definition

        Raises:
            FileNotFoundError: If the definition file doesn't exist
        """
        if type_name in self._cache:
            return self._cache[type_name]

        config_path = self.get_config_path(type_name)

        if not config_path.exists():
            raise FileNotFoundError(f"Node type definition not found for '{type_name}' at {config_path}")

        config = OmegaConf.load(config_path)
        config_dict = OmegaConf.to_container(config, resolve=True) or {}

        self._cache[type_name] = config_dict
        return config_dict

    def get_config_path(self, type_name: str) -> Path:
        """Path to a type's node_type.yaml file."""
        return self.types_base_path / type_name / "node_type.yaml"

    def list_types(self) -> List[str]:
        """Names of all defined types, sorted."""
        if not self.types_base_path.exists():
            return []
        return sorted(
            path.name
            for path in self.types_base_path.iterdir()
            if path.is_dir() and (path / "node_type.yaml").exists()
        )

    def is_defined(self, type_name: str) -> bool:
        return type_name in self._cache or self.get_config_path(type_name).exists()

    def get_defaults(self, type_name: str) -> Dict[str, Any]:
        """
        Default data for a fresh node of this type (a copy, safe to mutate).

        Returns an empty dict for undefined types.
        """
        if not self.is_defined(type_name):
            _log_debug(f"No definition for node type '{type_name}', using empty defaults")
            return {}
        return copy.deepcopy(self.get_config(type_name).get("defaults") or {})

    def display_name(self, type_name: str) -> str:
        """Human-readable type name ('list_item' -> 'List Item' unless the definition says otherwise)."""
        if self.is_defined(type_name):
            name = self.get_config(type_name).get("display_name")
            if name:
                return name
        return type_name.replace("_", " ").title()

    def create_node(self, type_name: str, **data: Any) -> ResumeNode:
        """
        Build a new node of a type, with defaults overridden by the given data.

        Example:
            registry.create_node("section", title="Experience")
        """
        fields = self.get_defaults(type_name)
        fields.update(copy.deepcopy(data))
        return ResumeNode(type=type_name, data=fields)

    def clear_cache(self):
        """Clear the definition cache."""
        self._cache.clear()

    def is_cached(self, type_name: str) -> bool:
        return type_name in self._cache
