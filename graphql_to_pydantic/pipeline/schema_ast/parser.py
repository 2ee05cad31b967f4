"""
GraphQL document parser that builds the schema AST.

Phase 1 of the pipeline: convert a graphql-core ``DocumentNode`` into
the closed set of schema AST nodes, without mapping scalars or doing
any Python-specific processing.
"""

from __future__ import annotations

import logging

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ListTypeNode,
    NamedTypeNode,
    NameNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    TypeExtensionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    parse,
)

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

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses a graphql-core document into a schema AST."""

    def parse(self, document: DocumentNode) -> SchemaAST:
        """
        Parse a GraphQL document into a schema AST.

        Args:
            document: An already validated graphql-core document

        Returns:
            SchemaAST with translatable definitions in document order
        """
        ast = SchemaAST()
        extensions: list[TypeExtensionNode] = []

        for position, node in enumerate(document.definitions):
            if isinstance(node, ScalarTypeDefinitionNode):
                ast.custom_scalars.append(self._name(node.name))
                continue

            # Applied once every definition is known; an extension may precede its type
            if isinstance(node, TypeExtensionNode):
                extensions.append(node)
                continue

            definition = self._parse_definition(node, position)
            if definition is None:
                logger.debug("Skipping unsupported definition kind %s", node.kind)
                continue
            ast.definitions.append(definition)

        by_name = {d.name: d for d in ast.definitions}
        for extension in extensions:
            self._merge_extension(by_name.get(self._name(extension.name)), extension)

        return ast

    def parse_sdl(self, source: str) -> SchemaAST:
        """Parse SDL text with graphql-core, then build the schema AST."""
        return self.parse(parse(source))

    def _name(self, node: NameNode) -> str:
        """Identifiers pass through unchanged."""
        return node.value

    def _parse_definition(self, node, position: int) -> DefinitionNode | None:
        name = self._name(node.name) if getattr(node, "name", None) else ""

        match node:
            case EnumTypeDefinitionNode():
                return EnumDefinition(
                    name=name,
                    position=position,
                    values=[self._name(v.name) for v in node.values or ()],
                )
            case UnionTypeDefinitionNode():
                return UnionDefinition(
                    name=name,
                    position=position,
                    members=[self._parse_named(t) for t in node.types or ()],
                )
            case InterfaceTypeDefinitionNode():
                return InterfaceDefinition(
                    name=name,
                    position=position,
                    fields=self._parse_fields(node.fields),
                )
            case ObjectTypeDefinitionNode():
                return ObjectDefinition(
                    name=name,
                    position=position,
                    fields=self._parse_fields(node.fields),
                    interfaces=[self._parse_named(i) for i in node.interfaces or ()],
                )
            case InputObjectTypeDefinitionNode():
                return InputObjectDefinition(
                    name=name,
                    position=position,
                    fields=self._parse_fields(node.fields),
                )
        return None

    def _merge_extension(self, definition: DefinitionNode | None, node: TypeExtensionNode) -> None:
        """
        Fold an ``extend ...`` block into the definition it extends.

        Args:
            definition: The extended definition, None if it is not declared here
            node: graphql-core type extension node
        """
        match (definition, node):
            case (EnumDefinition(), EnumTypeExtensionNode()):
                definition.values.extend(self._name(v.name) for v in node.values or ())
            case (UnionDefinition(), UnionTypeExtensionNode()):
                definition.members.extend(self._parse_named(t) for t in node.types or ())
            case (InterfaceDefinition(), InterfaceTypeExtensionNode()):
                definition.fields.extend(self._parse_fields(node.fields))
            case (ObjectDefinition(), ObjectTypeExtensionNode()):
                definition.fields.extend(self._parse_fields(node.fields))
                definition.interfaces.extend(self._parse_named(i) for i in node.interfaces or ())
            case (InputObjectDefinition(), InputObjectTypeExtensionNode()):
                definition.fields.extend(self._parse_fields(node.fields))
            case _:
                logger.debug("Skipping extension %s of %s", node.kind, self._name(node.name))

    def _parse_fields(self, fields: tuple[FieldDefinitionNode | InputValueDefinitionNode, ...] | None) -> list[FieldNode]:
        return [FieldNode(name=self._name(f.name), type_ref=self._parse_type(f.type)) for f in fields or ()]

    def _parse_named(self, node: NamedTypeNode) -> NamedTypeRef:
        return NamedTypeRef(name=self._name(node.name))

    def _parse_type(self, node: TypeNode) -> TypeRefNode:
        """
        Parse a (possibly wrapped) type reference recursively.

        Args:
            node: graphql-core type node

        Returns:
            Matching TypeRefNode variant
        """
        match node:
            case NamedTypeNode():
                return self._parse_named(node)
            case ListTypeNode():
                return ListTypeRef(item=self._parse_type(node.type))
            case NonNullTypeNode():
                return NonNullTypeRef(inner=self._parse_type(node.type))
        raise TypeError(f"Unsupported type node: {type(node).__name__}")
