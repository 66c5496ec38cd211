"""
Vendor Catalog Aggregation Package.

This package searches supplier product APIs and merges their per-variant
records into one product aggregate per style.
"""
from vendor_catalog.main import search, lookup_by_style, lookup_by_brand, get_product_details
from vendor_catalog.data.models.credentials import VendorCredentials
from vendor_catalog.data.models.product import ProductAggregate
from vendor_catalog.exceptions import (
    VendorCatalogError,
    TransportError,
    MalformedResponseError,
    UnknownVendorError
)

__version__ = "1.0.0"
