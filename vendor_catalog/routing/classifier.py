"""
Query classification for catalog searches.
"""
from vendor_catalog.data.models.search import QueryKind
from vendor_catalog.utils.validation import contains_digit, validate_query_text


def classify_query(query_text: str) -> QueryKind:
    """
    Decide whether query text is more likely a style code or a brand name.

    Style codes carry digits (PC54, 5000, G500); brand names usually do not
    (Gildan, OGIO).

    Args:
        query_text (str): The caller's search text

    Returns:
        QueryKind: STYLE_CODE if the trimmed text contains a digit, else BRAND_NAME
    """
    if contains_digit(validate_query_text(query_text)):
        return QueryKind.STYLE_CODE
    return QueryKind.BRAND_NAME
