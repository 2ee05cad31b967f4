"""
Import tracking for generated pydantic modules.

Features are registered while declarations are rendered; the header is
assembled once at the end from whatever was actually used.
"""

from __future__ import annotations

from enum import Enum


class ImportFeature(Enum):
    """Abstract features that map to Python imports"""

    DYNAMIC = "dynamic"  # typing.Any
    OPTIONAL = "optional"
    LIST = "list"
    UNION = "union"
    ENUM = "enum"
    FIELD_ALIAS = "field_alias"  # pydantic.Field for aliased names
    MODEL_BASE = "model_base"  # pydantic.BaseModel


# Canonical order of the names on each import line
PYTHON_IMPORT_MAP = {
    ImportFeature.ENUM: ("enum", "Enum"),
    ImportFeature.DYNAMIC: ("typing", "Any"),
    ImportFeature.OPTIONAL: ("typing", "Optional"),
    ImportFeature.LIST: ("typing", "List"),
    ImportFeature.UNION: ("typing", "Union"),
    ImportFeature.MODEL_BASE: ("pydantic", "BaseModel"),
    ImportFeature.FIELD_ALIAS: ("pydantic", "Field"),
}

MODULE_ORDER = ["enum", "typing", "pydantic"]


class ImportTracker:
    """Monotonic set of used features for one translation session."""

    def __init__(self):
        self._features: set[ImportFeature] = set()
        # (module, name) pairs for configured scalar types such as datetime.datetime
        self._names: set[tuple[str, str]] = set()

    def register(self, *features: ImportFeature) -> None:
        self._features.update(features)

    def register_name(self, module: str, name: str) -> None:
        self._names.add((module, name))

    def is_registered(self, feature: ImportFeature) -> bool:
        return feature in self._features

    @property
    def features(self) -> frozenset[ImportFeature]:
        return frozenset(self._features)

    def assemble(self) -> list[str]:
        """
        Build the import lines, one per module, in fixed order.

        Modules of configured scalar types sit between the enum and typing
        lines, sorted by name. The pydantic line always leads with
        BaseModel: aliased fields only appear inside model classes.

        Returns:
            List of ``from x import y`` lines, empty groups omitted
        """
        features = set(self._features)
        if ImportFeature.FIELD_ALIAS in features:
            features.add(ImportFeature.MODEL_BASE)

        extra_modules = sorted({module for module, _ in self._names} - set(MODULE_ORDER))
        modules = [MODULE_ORDER[0], *extra_modules, *MODULE_ORDER[1:]]

        grouped: dict[str, list[str]] = {module: [] for module in modules}
        for feature, (module, name) in PYTHON_IMPORT_MAP.items():
            if feature in features:
                grouped[module].append(name)
        for module, name in sorted(self._names):
            if name not in grouped[module]:
                grouped[module].append(name)

        return [f"from {module} import {', '.join(names)}" for module, names in grouped.items() if names]

    def render(self) -> str:
        return "\n".join(self.assemble())
