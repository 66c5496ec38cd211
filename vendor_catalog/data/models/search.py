"""
Search and diagnostic data models.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LookupOperation(str, Enum):
    """Vendor-neutral catalog operations."""
    STYLE = "style"
    BRAND = "brand"


class QueryKind(str, Enum):
    """What free-text query input most likely is."""
    STYLE_CODE = "style_code"
    BRAND_NAME = "brand_name"


@dataclass
class VendorDiagnostic:
    """
    A business error reported inside an otherwise well-formed vendor payload.
    """
    vendor: str
    operation: str
    message: Optional[str] = None
    code: Optional[str] = None  # SOAP faultcode, when the vendor sent a fault
