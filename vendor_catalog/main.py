"""
Entry points for vendor catalog searches.
"""
from typing import List, Optional

from vendor_catalog.config.app_config import DEFAULT_VENDOR
from vendor_catalog.data.models.credentials import VendorCredentials
from vendor_catalog.data.models.product import ProductAggregate
from vendor_catalog.vendor_factory import VendorFactory


def search(
    query_text: str,
    credentials: VendorCredentials,
    vendor: str = DEFAULT_VENDOR,
    max_products: Optional[int] = None
) -> List[ProductAggregate]:
    """
    Search a vendor catalog by style code or brand name.

    Args:
        query_text (str): Free-text query, e.g. "PC54" or "Port Authority"
        credentials (VendorCredentials): Vendor credentials
        vendor (str): Vendor name
        max_products (Optional[int]): Bound for brand lookups

    Returns:
        List[ProductAggregate]: Matching products; empty when nothing matched
    """
    return VendorFactory().get_search(vendor, credentials, max_products=max_products).search(query_text)


def lookup_by_style(
    style_code: str,
    credentials: VendorCredentials,
    vendor: str = DEFAULT_VENDOR
) -> List[ProductAggregate]:
    """
    Look up products by style code. Errors propagate; there is no fallback.

    Args:
        style_code (str): The vendor style code
        credentials (VendorCredentials): Vendor credentials
        vendor (str): Vendor name

    Returns:
        List[ProductAggregate]: Matching products
    """
    return VendorFactory().get_repository(vendor).lookup_by_style(style_code, credentials)


def lookup_by_brand(
    brand_name: str,
    credentials: VendorCredentials,
    max_products: Optional[int] = None,
    vendor: str = DEFAULT_VENDOR
) -> List[ProductAggregate]:
    """
    Look up products by brand name. Errors propagate; there is no fallback.

    Args:
        brand_name (str): The brand name
        credentials (VendorCredentials): Vendor credentials
        max_products (Optional[int]): Bound on distinct styles (default: DEFAULT_MAX_PRODUCTS)
        vendor (str): Vendor name

    Returns:
        List[ProductAggregate]: Matching products
    """
    return VendorFactory().get_search(vendor, credentials, max_products=max_products).lookup_by_brand(brand_name)


def get_product_details(
    style_id: str,
    credentials: VendorCredentials,
    vendor: str = DEFAULT_VENDOR
) -> Optional[ProductAggregate]:
    """
    Get one product by style identifier.

    Args:
        style_id (str): The vendor style identifier
        credentials (VendorCredentials): Vendor credentials
        vendor (str): Vendor name

    Returns:
        Optional[ProductAggregate]: The product, or None if the vendor has no such style
    """
    return VendorFactory().get_search(vendor, credentials).get_product_details(style_id)
