"""GraphQL to pydantic Generator

A Python package for generating pydantic models from GraphQL schema
definitions (enums, unions, interfaces, object and input types).
"""

__version__ = "1.0.0"

from .pipeline import (
    CodeGeneratorConfig,
    CycleError,
    GeneratorError,
    InvalidIdentifierError,
    PipelineGenerator,
    TranslationResult,
    TranslationSession,
    UnresolvedReferenceError,
)

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
