"""
Schema AST module.

Contains the closed set of GraphQL definition nodes and the parser
that builds them from a graphql-core document.
"""

from __future__ import annotations

from .nodes import (
    DefinitionNode,
    EnumDefinition,
    FieldNode,
    InputObjectDefinition,
    InterfaceDefinition,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    ObjectDefinition,
    SchemaAST,
    TypeRefNode,
    UnionDefinition,
)
from .parser import SchemaParser

__all__ = [
    "DefinitionNode",
    "EnumDefinition",
    "FieldNode",
    "InputObjectDefinition",
    "InterfaceDefinition",
    "ListTypeRef",
    "NamedTypeRef",
    "NonNullTypeRef",
    "ObjectDefinition",
    "SchemaAST",
    "SchemaParser",
    "TypeRefNode",
    "UnionDefinition",
]
