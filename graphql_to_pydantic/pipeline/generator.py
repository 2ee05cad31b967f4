"""
Pipeline generator: GraphQL schema document to pydantic module.

1. Phase 1 (Parser): graphql-core document -> schema AST
2. Phase 2 (Translation): each definition, children first, into a Declaration
3. Phase 3 (Assembly): declarations in dependency order plus minimal imports
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from graphql import DocumentNode, parse

from .analyzer.ir_nodes import Declaration
from .analyzer.type_translator import translate_type
from .backends.pydantic_backend import PydanticBackend
from .config import CodeGeneratorConfig
from .errors import UnresolvedReferenceError
from .schema_ast.nodes import (
    DefinitionNode,
    EnumDefinition,
    FieldNode,
    InputObjectDefinition,
    InterfaceDefinition,
    ObjectDefinition,
    UnionDefinition,
)
from .schema_ast.parser import SchemaParser
from .session import TranslationSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationResult:
    """Generated module split into its import header and declarations."""

    header: str
    body: str
    source: str


class PipelineGenerator:
    """
    GraphQL to pydantic generator.

    The generator holds no per-document state: every call to ``generate``
    runs in a fresh TranslationSession, so one instance can be reused.
    """

    def __init__(self, config: CodeGeneratorConfig | None = None):
        self.config = config or CodeGeneratorConfig()
        self.parser = SchemaParser()
        self.backend = PydanticBackend()

        self._translators: dict[type[DefinitionNode], Callable[[DefinitionNode, TranslationSession], Declaration]] = {
            EnumDefinition: self._translate_enum,
            UnionDefinition: self._translate_union,
            InterfaceDefinition: self._translate_interface,
            ObjectDefinition: self._translate_object,
            InputObjectDefinition: self._translate_input_object,
        }

    def generate(self, document: DocumentNode, generation_comment: str = "") -> TranslationResult:
        """
        Generate a pydantic module from a GraphQL document.

        Args:
            document: Parsed and validated graphql-core document
            generation_comment: Comment placed on the first line when
                ``add_generation_comment`` is enabled

        Returns:
            TranslationResult with header, body and the combined source

        Raises:
            CycleError: If declarations cannot be ordered
            UnresolvedReferenceError: In strict mode, for undeclared type names
        """
        ast = self.parser.parse(document)
        session = TranslationSession.for_schema(ast, self.config)

        for definition in ast.definitions:
            logger.debug("Translating %s %s", type(definition).__name__, definition.name)
            session.add_declaration(self.translate_definition(definition, session))

        self._check_references(session)

        body = self.assemble(session)
        header = session.imports.render()
        comment = generation_comment if self.config.add_generation_comment else ""
        logger.info("Generated %d declarations", len(session.declarations))

        return TranslationResult(
            header=header,
            body=body,
            source=self.backend.render_module(header, body, comment),
        )

    def generate_from_sdl(self, source: str, generation_comment: str = "") -> TranslationResult:
        """Parse SDL text with graphql-core and generate from it."""
        return self.generate(parse(source), generation_comment)

    def translate_definition(self, definition: DefinitionNode, session: TranslationSession) -> Declaration:
        translator = self._translators.get(type(definition))
        if translator is None:
            raise TypeError(f"No translator for {type(definition).__name__}")
        return translator(definition, session)

    def assemble(self, session: TranslationSession) -> str:
        """
        Join declaration blocks in dependency order.

        Graph nodes without a declaration (names only ever referenced)
        are skipped.
        """
        blocks = []
        for name in session.graph.topological_order():
            declaration = session.declarations.get(name)
            if declaration is None:
                continue
            blocks.append(declaration.rendered_block)
        return "\n\n".join(blocks)

    def _translate_enum(self, definition: EnumDefinition, session: TranslationSession) -> Declaration:
        return self.backend.emit_enum(definition, session)

    def _translate_union(self, definition: UnionDefinition, session: TranslationSession) -> Declaration:
        members = [translate_type(member, session) for member in definition.members]
        return self.backend.emit_union(definition, members, session)

    def _translate_interface(self, definition: InterfaceDefinition, session: TranslationSession) -> Declaration:
        return self.backend.emit_interface(definition, self._translate_fields(definition, session), session)

    def _translate_object(self, definition: ObjectDefinition, session: TranslationSession) -> Declaration:
        session.referenced.update(i.name for i in definition.interfaces)
        return self.backend.emit_object(definition, self._translate_fields(definition, session), session)

    def _translate_input_object(self, definition: InputObjectDefinition, session: TranslationSession) -> Declaration:
        return self.backend.emit_input_object(definition, self._translate_fields(definition, session), session)

    def _translate_fields(
        self,
        definition: InterfaceDefinition | ObjectDefinition | InputObjectDefinition,
        session: TranslationSession,
    ) -> list[str]:
        fields: list[FieldNode] = definition.fields
        return [
            self.backend.emit_field(field, translate_type(field.type_ref, session), session, owner=definition.name)
            for field in fields
        ]

    def _check_references(self, session: TranslationSession) -> None:
        unresolved = session.unresolved_references()
        if not unresolved:
            return
        if self.config.strict_references:
            raise UnresolvedReferenceError(list(unresolved))
        for name in sorted(unresolved):
            logger.warning("Type %s is referenced but never declared; emitting a forward reference", name)
