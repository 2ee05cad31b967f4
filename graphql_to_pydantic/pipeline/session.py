"""
Per-document translation state.

A session is created for each document and passed explicitly to every
translation step. It is never reused across documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .analyzer.dependency_graph import DependencyGraph
from .analyzer.ir_nodes import DYNAMIC, Declaration
from .analyzer.scalars import build_scalar_map
from .backends.imports import ImportTracker
from .config import CodeGeneratorConfig
from .schema_ast.nodes import SchemaAST


@dataclass
class TranslationSession:
    """Graph, imports and declarations accumulated for one document."""

    config: CodeGeneratorConfig
    scalars: dict[str, str]
    graph: DependencyGraph
    imports: ImportTracker = field(default_factory=ImportTracker)
    declarations: dict[str, Declaration] = field(default_factory=dict)

    # User type names seen in type positions
    referenced: set[str] = field(default_factory=set)

    @classmethod
    def for_schema(cls, ast: SchemaAST, config: CodeGeneratorConfig) -> TranslationSession:
        """Create a fresh session for one parsed document."""
        scalars = build_scalar_map(ast.custom_scalars, config.scalars)
        excluded = {python_type.rsplit(".", 1)[-1] for python_type in scalars.values()} | {DYNAMIC}
        return cls(
            config=config,
            scalars=scalars,
            graph=DependencyGraph(excluded=excluded, positions=ast.positions()),
        )

    def add_declaration(self, declaration: Declaration) -> None:
        self.declarations[declaration.name] = declaration

    def unresolved_references(self) -> set[str]:
        """Referenced names that are neither scalars nor declared here."""
        return {name for name in self.referenced if name not in self.declarations and name not in self.scalars}
