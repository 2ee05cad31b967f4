"""
Analyzer module.

Contains scalar resolution, type translation, the declaration
dependency graph and IR definitions.
"""

from __future__ import annotations

from .dependency_graph import DependencyGraph
from .ir_nodes import (
    DYNAMIC,
    Declaration,
    DeclarationKind,
    DynamicExpr,
    ListExpr,
    OptionalExpr,
    ReferenceExpr,
    ScalarExpr,
    TypeExpr,
    TypeExpression,
)
from .scalars import PYTHON_SCALARS, build_scalar_map
from .type_translator import translate_type

__all__ = [
    "DYNAMIC",
    "PYTHON_SCALARS",
    "Declaration",
    "DeclarationKind",
    "DependencyGraph",
    "DynamicExpr",
    "ListExpr",
    "OptionalExpr",
    "ReferenceExpr",
    "ScalarExpr",
    "TypeExpr",
    "TypeExpression",
    "build_scalar_map",
    "translate_type",
]
