"""
Vendor data repositories.
"""
from vendor_catalog.data.repositories.base_repository import BaseRepository
from vendor_catalog.data.repositories.product_repository import (
    VendorProductRepository,
    products_to_dataframe
)
