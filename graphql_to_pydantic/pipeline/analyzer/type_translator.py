"""
Translation of GraphQL type references into Python typing expressions.

GraphQL types are nullable unless wrapped in ``!``, so every named or
list type starts out as ``Optional[...]`` and a non-null wrapper removes
exactly that one layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..backends.imports import ImportFeature
from ..schema_ast.nodes import ListTypeRef, NamedTypeRef, NonNullTypeRef, TypeRefNode
from .ir_nodes import (
    DYNAMIC,
    DynamicExpr,
    ListExpr,
    OptionalExpr,
    ReferenceExpr,
    ScalarExpr,
    TypeExpression,
)

if TYPE_CHECKING:
    from ..session import TranslationSession


def translate_type(type_ref: TypeRefNode, session: TranslationSession) -> TypeExpression:
    """Translate a (possibly wrapped) type reference, innermost first."""
    match type_ref:
        case NamedTypeRef():
            return translate_named_type(type_ref, session)
        case ListTypeRef():
            return translate_list_type(translate_type(type_ref.item, session), session)
        case NonNullTypeRef():
            return translate_non_null_type(translate_type(type_ref.inner, session))
    raise TypeError(f"Unsupported type reference: {type(type_ref).__name__}")


def translate_named_type(type_ref: NamedTypeRef, session: TranslationSession) -> TypeExpression:
    name = type_ref.name

    # Scalars
    if name in session.scalars:
        primitive = session.scalars[name]

        # Any already admits None
        if primitive == DYNAMIC:
            session.imports.register(ImportFeature.DYNAMIC)
            return TypeExpression(id=DYNAMIC, node=DynamicExpr())

        # Configured types outside builtins, e.g. "datetime.datetime"
        if "." in primitive:
            module, primitive = primitive.rsplit(".", 1)
            session.imports.register_name(module, primitive)

        session.imports.register(ImportFeature.OPTIONAL)
        return TypeExpression(id=primitive, node=OptionalExpr(ScalarExpr(primitive)))

    # Defined (or forward) reference, quoted so declaration order does not matter
    session.referenced.add(name)
    session.imports.register(ImportFeature.OPTIONAL)
    return TypeExpression(id=name, node=OptionalExpr(ReferenceExpr(name)))


def translate_list_type(item: TypeExpression, session: TranslationSession) -> TypeExpression:
    session.imports.register(ImportFeature.LIST, ImportFeature.OPTIONAL)
    return TypeExpression(id=item.id, node=OptionalExpr(ListExpr(item.node)))


def translate_non_null_type(inner: TypeExpression) -> TypeExpression:
    return inner.strip_optional()
