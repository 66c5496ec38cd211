"""
Application-wide configuration settings for the vendor catalog engine.
"""
import os
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Upper bound for a single outbound vendor call, in seconds
DEFAULT_TIMEOUT = float(os.environ.get("VENDOR_CATALOG_TIMEOUT", "60"))

# Distinct styles materialized for a brand lookup
DEFAULT_MAX_PRODUCTS = int(os.environ.get("VENDOR_CATALOG_MAX_PRODUCTS", "50"))

# Vendor used by the module-level entry points when none is named
DEFAULT_VENDOR = os.environ.get("VENDOR_CATALOG_DEFAULT_VENDOR", "sanmar")

# Brand queried by connection checks
CONNECTION_TEST_BRAND = os.environ.get("VENDOR_CATALOG_TEST_BRAND", "OGIO")
