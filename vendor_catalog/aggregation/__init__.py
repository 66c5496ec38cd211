"""
Variant record aggregation package.
"""
from vendor_catalog.aggregation.aggregator import ProductAggregator, aggregate
