"""
Data models for vendor catalog records and products.
"""
from vendor_catalog.data.models.product import ProductAggregate, VariantRecord
from vendor_catalog.data.models.credentials import VendorCredentials
from vendor_catalog.data.models.search import LookupOperation, QueryKind, VendorDiagnostic
