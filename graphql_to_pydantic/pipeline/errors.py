"""
Exceptions raised by the generator pipeline.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generator errors."""

    pass


class CycleError(GeneratorError):
    """Raised when declarations depend on each other in a loop.

    This can happen when:
    - An object implements an interface that (transitively) depends back on it
    - A union ends up as one of its own members

    No emission order exists, so no partial output should be used.
    """

    def __init__(self, cycle: list[str]):
        self.cycle = list(cycle)
        super().__init__(f"Dependency cycle between declarations: {' -> '.join(self.cycle)}")


class UnresolvedReferenceError(GeneratorError):
    """Raised in strict mode when types are referenced but never declared."""

    def __init__(self, names: list[str]):
        self.names = sorted(names)
        super().__init__(f"Unresolved type references: {', '.join(self.names)}")


class InvalidIdentifierError(GeneratorError):
    """Raised when a field or enum value name is a Python keyword."""

    def __init__(self, owner: str, name: str):
        self.owner = owner
        self.name = name
        super().__init__(f"{owner}.{name} is a Python keyword and cannot be a model attribute")
