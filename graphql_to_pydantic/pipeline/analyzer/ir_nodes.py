"""
IR (Intermediate Representation) node definitions.

Type expressions are kept as a small structural tree so wrappers can be
inspected and removed by pattern matching; the Python text is derived
from the tree on demand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Scalar mapping value that stands for an untyped (implicitly nullable) value
DYNAMIC = "Any"


@dataclass(frozen=True)
class TypeExpr:
    """Base class for type expression tree nodes."""


@dataclass(frozen=True)
class ScalarExpr(TypeExpr):
    primitive: str = ""  # "str", "int", ...


@dataclass(frozen=True)
class DynamicExpr(TypeExpr):
    pass


@dataclass(frozen=True)
class ReferenceExpr(TypeExpr):
    name: str = ""  # User-defined type name


@dataclass(frozen=True)
class ListExpr(TypeExpr):
    item: TypeExpr = field(default_factory=DynamicExpr)


@dataclass(frozen=True)
class OptionalExpr(TypeExpr):
    inner: TypeExpr = field(default_factory=DynamicExpr)


def render_expr(expr: TypeExpr, quote_references: bool = True) -> str:
    """Render a type expression tree as Python typing text."""
    match expr:
        case ScalarExpr(primitive=primitive):
            return primitive
        case DynamicExpr():
            return DYNAMIC
        case ReferenceExpr(name=name):
            return f"'{name}'" if quote_references else name
        case ListExpr(item=item):
            return f"List[{render_expr(item, quote_references)}]"
        case OptionalExpr(inner=inner):
            return f"Optional[{render_expr(inner, quote_references)}]"
    raise TypeError(f"Unsupported type expression: {type(expr).__name__}")


@dataclass(frozen=True)
class TypeExpression:
    """A resolved type: innermost type id plus the wrapped expression tree."""

    id: str
    node: TypeExpr

    @property
    def rendered(self) -> str:
        return render_expr(self.node)

    @property
    def is_nullable(self) -> bool:
        return isinstance(self.node, (OptionalExpr, DynamicExpr))

    @property
    def is_reference(self) -> bool:
        """True when the innermost type is a user-defined declaration."""
        node = self.node
        while isinstance(node, (OptionalExpr, ListExpr)):
            node = node.inner if isinstance(node, OptionalExpr) else node.item
        return isinstance(node, ReferenceExpr)

    def strip_optional(self) -> TypeExpression:
        """Remove exactly the outermost Optional layer, if there is one."""
        if isinstance(self.node, OptionalExpr):
            return TypeExpression(id=self.id, node=self.node.inner)
        return self

    def render(self, quote_references: bool = True) -> str:
        return render_expr(self.node, quote_references)


class DeclarationKind(Enum):
    """Kind of generated declaration."""

    ENUM = "enum"
    UNION = "union"
    INTERFACE = "interface"
    OBJECT = "object"
    INPUT_OBJECT = "input_object"


@dataclass(frozen=True)
class Declaration:
    """A fully rendered top-level declaration."""

    name: str
    kind: DeclarationKind
    rendered_block: str
    depends_on: frozenset[str] = frozenset()
