"""
Utility package for the vendor catalog engine.
"""
from vendor_catalog.utils.validation import (
    validate_query_text,
    validate_max_products,
    contains_digit
)
from vendor_catalog.utils.logging_config import setup_logging, get_logger
