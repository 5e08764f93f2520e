"""
Input validation for meal categories, names and ingredient lists.

All functions here are pure: no I/O, no side effects.
"""

import re
from typing import List

from .exceptions import ValidationError

CATEGORIES = ("breakfast", "lunch", "dinner")

TOKEN_PATTERN = re.compile(r"^[a-zA-Z ]+$")
INGREDIENT_SEPARATOR = re.compile(r",\s*")


def normalize(value: str) -> str:
    """Trim and lowercase user input."""
    return value.strip().lower()


def is_valid_category(value: str) -> bool:
    """Check that value is one of breakfast, lunch or dinner."""
    return value in CATEGORIES


def is_valid_token(value: str) -> bool:
    """Check that value holds letters and spaces only.

    A string made only of spaces matches the character class but carries
    no name, so it is rejected.
    """
    if not isinstance(value, str):
        return False
    return bool(TOKEN_PATTERN.match(value)) and bool(value.strip())


def split_ingredients(value: str) -> List[str]:
    """Split a comma separated ingredient line into raw tokens."""
    return INGREDIENT_SEPARATOR.split(value)


def is_valid_ingredient_list(value: str) -> bool:
    """Check that every comma separated token is a valid token."""
    if not isinstance(value, str):
        return False
    return all(is_valid_token(token) for token in split_ingredients(value))


def parse_ingredients(value: str) -> List[str]:
    """Parse an ingredient line into trimmed, de-duplicated names.

    Raises:
        ValidationError: if any token is malformed.
    """
    if not is_valid_ingredient_list(value):
        raise ValidationError(f"Invalid ingredient list: {value!r}")
    return dedupe_ingredients(split_ingredients(value))


def dedupe_ingredients(ingredients) -> List[str]:
    """Trim ingredient names and drop case-insensitive repeats.

    The first spelling of each ingredient wins and keeps its position.
    """
    seen = {}
    for ingredient in ingredients:
        ingredient = ingredient.strip()
        seen.setdefault(normalize(ingredient), ingredient)
    return list(seen.values())
