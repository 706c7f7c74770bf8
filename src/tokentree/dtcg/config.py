"""
Serializer configuration for tokentree.

This module provides the options controlling how a token tree is written out
as a DTCG document.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any


@dataclass
class SerializerConfig:
    """Configuration for DTCG serialization.

    Can be created from dict, YAML, or Path with partial overrides.
    Only specified values override defaults.

    Examples:
        # All defaults
        config = SerializerConfig()

        # Partial override from dict
        config = SerializerConfig.from_dict({"include_extensions": False})

        # From YAML file
        config = SerializerConfig.from_yaml("serializer.yaml")
    """

    # Emit "$description" for nodes that have one
    include_descriptions: bool = True

    # Emit "$extensions" for tokens that have any
    include_extensions: bool = True

    # JSON text output only; None writes a single line
    indent: int | None = 2
    sort_keys: bool = False

    @classmethod
    def from_dict(cls, config: dict[str, Any] | None = None) -> SerializerConfig:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Only keys matching
                   dataclass fields will be used.

        Returns:
            SerializerConfig instance with specified overrides
        """
        if config is None:
            config = {}
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> SerializerConfig:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing configuration

        Returns:
            SerializerConfig instance with YAML overrides

        Example YAML:
            include_extensions: false
            indent: 4
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)
