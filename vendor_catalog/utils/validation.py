"""
Validation utilities for catalog queries.
"""
import re
from typing import Any, Optional

_DIGIT_PATTERN = re.compile(r"[0-9]")


def validate_query_text(query_text: Any) -> str:
    """
    Normalize caller-supplied query text.

    Args:
        query_text (Any): The raw query text

    Returns:
        str: The trimmed query text, or an empty string for None
    """
    if query_text is None:
        return ""
    return str(query_text).strip()


def validate_max_products(max_products: Any) -> Optional[int]:
    """
    Validate a product bound.

    Args:
        max_products (Any): The bound to validate; None means unbounded

    Returns:
        Optional[int]: The validated bound

    Raises:
        ValueError: If the bound is not a positive integer
    """
    if max_products is None:
        return None
    if isinstance(max_products, bool):
        raise ValueError(f"max_products must be a positive integer, got {max_products!r}")
    try:
        value = int(max_products)
    except (ValueError, TypeError):
        raise ValueError(f"max_products must be a positive integer, got {max_products!r}")
    if value <= 0:
        raise ValueError(f"max_products must be a positive integer, got {max_products!r}")
    return value


def contains_digit(text: str) -> bool:
    """
    Check whether text contains at least one decimal digit (0-9).

    Args:
        text (str): The text to inspect

    Returns:
        bool: True if a digit is present
    """
    return bool(_DIGIT_PATTERN.search(text or ""))
