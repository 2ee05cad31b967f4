"""
Scalar name to Python type mapping.
"""

from __future__ import annotations

from collections.abc import Iterable

from .ir_nodes import DYNAMIC

# Built-in GraphQL scalars
PYTHON_SCALARS = {
    "ID": "str",
    "String": "str",
    "Boolean": "bool",
    "Int": "int",
    "Float": "float",
}


def build_scalar_map(custom_scalars: Iterable[str] = (), overrides: dict[str, str] | None = None) -> dict[str, str]:
    """
    Build the resolved scalar table for one document.

    Custom scalars declared in the document have no known Python type and
    map to ``Any``; explicit overrides are applied last.

    Args:
        custom_scalars: Names declared with ``scalar X``
        overrides: Configured scalar -> Python type mappings

    Returns:
        Mapping from GraphQL scalar name to Python type name
    """
    scalars = dict(PYTHON_SCALARS)
    for name in custom_scalars:
        scalars.setdefault(name, DYNAMIC)
    scalars.update(overrides or {})
    return scalars
