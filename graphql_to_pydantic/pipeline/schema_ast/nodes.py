"""
AST (Abstract Syntax Tree) node definitions for GraphQL schema documents.

These nodes are a closed set of variants built from the graphql-core
document AST, before any scalar mapping or Python-specific processing.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TypeRefNode:
    """Base class for type references used by fields and union members."""


@dataclass(frozen=True)
class NamedTypeRef(TypeRefNode):
    """A bare type name, e.g. ``String`` or ``User``."""

    name: str = ""


@dataclass(frozen=True)
class ListTypeRef(TypeRefNode):
    """A list wrapper, e.g. ``[User]``."""

    item: TypeRefNode | None = None


@dataclass(frozen=True)
class NonNullTypeRef(TypeRefNode):
    """A non-null wrapper, e.g. ``User!``."""

    inner: TypeRefNode | None = None


@dataclass
class FieldNode:
    """A field of an object/interface, or an input value of an input object."""

    name: str = ""
    type_ref: TypeRefNode | None = None


@dataclass
class DefinitionNode:
    """Base class for type definitions."""

    name: str = ""

    # Index of the definition in the source document
    position: int = 0


@dataclass
class EnumDefinition(DefinitionNode):
    values: list[str] = field(default_factory=list)


@dataclass
class UnionDefinition(DefinitionNode):
    members: list[NamedTypeRef] = field(default_factory=list)


@dataclass
class InterfaceDefinition(DefinitionNode):
    fields: list[FieldNode] = field(default_factory=list)


@dataclass
class ObjectDefinition(DefinitionNode):
    fields: list[FieldNode] = field(default_factory=list)
    interfaces: list[NamedTypeRef] = field(default_factory=list)


@dataclass
class InputObjectDefinition(DefinitionNode):
    fields: list[FieldNode] = field(default_factory=list)


@dataclass
class SchemaAST:
    """Root of the parsed schema AST."""

    # Translatable definitions in document order
    definitions: list[DefinitionNode] = field(default_factory=list)

    # Names declared with ``scalar X``
    custom_scalars: list[str] = field(default_factory=list)

    def positions(self) -> dict[str, int]:
        """Map each definition name to its position in the document."""
        return {d.name: d.position for d in self.definitions}
