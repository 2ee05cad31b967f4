"""
Pipeline - GraphQL schema to pydantic model generator.

This module provides a multi-phase architecture for generating pydantic
models from an already parsed and validated GraphQL schema document:

1. Phase 1 (Parser): graphql-core document into the schema AST
2. Phase 2 (Translation): type references into typing expressions and
   definitions into declarations, recording ordering constraints
3. Phase 3 (Assembly): declarations in dependency order, minimal imports
"""

from __future__ import annotations

from .config import CodeGeneratorConfig
from .errors import CycleError, GeneratorError, InvalidIdentifierError, UnresolvedReferenceError
from .generator import PipelineGenerator, TranslationResult
from .session import TranslationSession

__all__ = [
    "PipelineGenerator",
    "TranslationResult",
    "TranslationSession",
    "CodeGeneratorConfig",
    "GeneratorError",
    "CycleError",
    "UnresolvedReferenceError",
    "InvalidIdentifierError",
]
