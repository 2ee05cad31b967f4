"""
Pydantic code generation backend.

Renders fields and declarations for pydantic models and registers the
ordering constraints between declarations in the session graph.
"""

from __future__ import annotations

import keyword
from pathlib import Path
from typing import TYPE_CHECKING

import jinja2

from ...utils import to_snake_case
from ..analyzer.ir_nodes import Declaration, DeclarationKind, TypeExpression
from ..errors import InvalidIdentifierError
from ..schema_ast.nodes import (
    EnumDefinition,
    FieldNode,
    InputObjectDefinition,
    InterfaceDefinition,
    ObjectDefinition,
    UnionDefinition,
)
from .imports import ImportFeature

if TYPE_CHECKING:
    from ..session import TranslationSession

INDENT = "    "

MODEL_ROOT = "BaseModel"


class PydanticBackend:
    """Pydantic code generation backend."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")

    def emit_field(
        self, field: FieldNode, type_expr: TypeExpression, session: TranslationSession, owner: str = ""
    ) -> str:
        """
        Render one field line of a model body.

        Names that clash with BaseModel attributes get a suffix and keep
        their GraphQL name as the pydantic alias.

        Args:
            field: The field as declared in the schema
            type_expr: Its resolved type
            session: Current translation session
            owner: Name of the declaring type, used in error messages

        Returns:
            Indented field declaration

        Raises:
            InvalidIdentifierError: If the name is a Python keyword
        """
        name = to_snake_case(field.name)

        if name in session.config.reserved_field_names:
            session.imports.register(ImportFeature.FIELD_ALIAS)
            default = "None" if type_expr.is_nullable else "..."
            return f"{INDENT}{name}{session.config.alias_suffix}: {type_expr.rendered} = Field({default}, alias='{field.name}')"

        if keyword.iskeyword(name):
            raise InvalidIdentifierError(owner, field.name)

        return f"{INDENT}{name}: {type_expr.rendered}"

    def emit_enum(self, definition: EnumDefinition, session: TranslationSession) -> Declaration:
        for value in definition.values:
            if keyword.iskeyword(value):
                raise InvalidIdentifierError(definition.name, value)

        session.imports.register(ImportFeature.ENUM)
        session.graph.add_node(definition.name)

        block = self.enum_template.render(CLASS_NAME=definition.name, VALUES=definition.values)
        return Declaration(
            name=definition.name,
            kind=DeclarationKind.ENUM,
            rendered_block=block.rstrip("\n"),
        )

    def emit_union(self, definition: UnionDefinition, members: list[TypeExpression], session: TranslationSession) -> Declaration:
        """
        Render a union alias.

        Members are rendered without their Optional layer and unquoted;
        every user-defined member is emitted before the alias.
        """
        session.imports.register(ImportFeature.UNION)
        session.graph.add_node(definition.name)

        depends_on = []
        for member in members:
            if member.is_reference:
                session.graph.add_edge(definition.name, member.id)
                depends_on.append(member.id)

        rendered = ", ".join(m.strip_optional().render(quote_references=False) for m in members)
        return Declaration(
            name=definition.name,
            kind=DeclarationKind.UNION,
            rendered_block=f"{definition.name} = Union[{rendered}]",
            depends_on=frozenset(depends_on),
        )

    def emit_interface(self, definition: InterfaceDefinition, fields: list[str], session: TranslationSession) -> Declaration:
        return self._emit_model(definition.name, DeclarationKind.INTERFACE, [], fields, session)

    def emit_object(self, definition: ObjectDefinition, fields: list[str], session: TranslationSession) -> Declaration:
        interfaces = [i.name for i in definition.interfaces]
        return self._emit_model(definition.name, DeclarationKind.OBJECT, interfaces, fields, session)

    def emit_input_object(self, definition: InputObjectDefinition, fields: list[str], session: TranslationSession) -> Declaration:
        return self._emit_model(definition.name, DeclarationKind.INPUT_OBJECT, [], fields, session)

    def _emit_model(
        self,
        name: str,
        kind: DeclarationKind,
        bases: list[str],
        fields: list[str],
        session: TranslationSession,
    ) -> Declaration:
        """
        Render a model class.

        Base classes must exist when the class statement runs, so each base
        becomes a graph dependency. Field types are quoted and add none.
        """
        session.imports.register(ImportFeature.MODEL_BASE)
        session.graph.add_node(name)
        for base in bases:
            session.graph.add_edge(name, base)

        block = self.class_template.render(CLASS_NAME=name, BASES=bases or [MODEL_ROOT], FIELDS=fields)
        return Declaration(
            name=name,
            kind=kind,
            rendered_block=block.rstrip("\n"),
            depends_on=frozenset(bases),
        )

    def render_module(self, header: str, body: str, generation_comment: str = "") -> str:
        """Combine the generation comment, import header and declarations."""
        prefix = self.prefix_template.render(
            generation_comment=generation_comment,
            required_imports=header.splitlines(),
        )
        parts = [part for part in (prefix.rstrip("\n"), body) if part]
        return "\n\n\n".join(parts) + "\n"
