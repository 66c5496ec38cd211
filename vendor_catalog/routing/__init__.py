"""
Query classification and search routing.
"""
from vendor_catalog.routing.classifier import classify_query
from vendor_catalog.routing.catalog_search import CatalogSearch
