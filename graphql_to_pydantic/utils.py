"""
Utility functions for the GraphQL to pydantic generator.
"""

import re

# Splits an identifier into words: acronym runs ("URL" in "URLValue"),
# capitalized or lowercase words with trailing digits, and bare upper/digit runs
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase and acronym boundaries."""
    return _WORD_PATTERN.findall(text)


def to_snake_case(text: str) -> str:
    """Convert camelCase, PascalCase or separated text to snake_case.

    Examples:
        "firstName" -> "first_name"
        "ID" -> "id"
        "URLValue" -> "url_value"
        "field2" -> "field2"
        "already_snake" -> "already_snake"

    Args:
        text: The identifier to convert

    Returns:
        snake_case string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return "_".join(word.lower() for word in words if word)
