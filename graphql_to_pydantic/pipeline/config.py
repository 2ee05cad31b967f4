"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Extra or overriding scalar name -> Python type mappings
    scalars: dict[str, str] = field(default_factory=dict)

    # Snake-cased field names that clash with BaseModel attributes
    reserved_field_names: list[str] = field(default_factory=lambda: ["copy"])

    # Suffix appended to reserved field names (the original name becomes the alias)
    alias_suffix: str = "_"

    # Raise instead of warning when a referenced type is never declared
    strict_references: bool = False

    # Add generation comment at top of file
    add_generation_comment: bool = False

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "scalars": self.scalars,
            "reserved_field_names": self.reserved_field_names,
            "alias_suffix": self.alias_suffix,
            "strict_references": self.strict_references,
            "add_generation_comment": self.add_generation_comment,
        }
