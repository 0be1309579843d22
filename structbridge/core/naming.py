"""
Naming utilities for struct/interface conversion.

Handles case conversions between Go field names, JSON tag names
and TypeScript property names.
"""

import re

# Word boundaries: lower/digit -> upper, and the last capital of an acronym run
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_UNDERSCORE_LETTER = re.compile(r"_([a-z])")


def to_snake_case(name: str) -> str:
    """
    Convert a PascalCase or camelCase identifier to snake_case.

    Acronym runs stay together, so ``HTTPServer`` becomes ``http_server``
    and ``UserID`` becomes ``user_id``.

    Args:
        name: Identifier to convert

    Returns:
        snake_case identifier
    """
    name = name.replace("-", "_")
    name = _WORD_BOUNDARY.sub("_", name).lower()
    name = re.sub(r"_+", "_", name)
    return name.strip("_")


def to_pascal_case(name: str) -> str:
    """
    Convert a snake_case or camelCase name to PascalCase.

    Only underscores followed by a lowercase letter are folded, and the
    rest of the name is kept as written: ``user_name`` -> ``UserName``,
    ``pageSize`` -> ``PageSize``, ``id`` -> ``Id``.
    """
    converted = _UNDERSCORE_LETTER.sub(lambda m: m.group(1).upper(), name)
    if converted and converted[0].islower():
        converted = converted[0].upper() + converted[1:]
    return converted


def to_camel_case(name: str) -> str:
    """Convert a snake_case or PascalCase name to camelCase."""
    converted = _UNDERSCORE_LETTER.sub(lambda m: m.group(1).upper(), name)
    if converted and converted[0].isupper():
        converted = converted[0].lower() + converted[1:]
    return converted


def is_exported(name: str) -> bool:
    """Go exports an identifier iff it starts with an uppercase letter."""
    return bool(name) and name[0].isupper()
