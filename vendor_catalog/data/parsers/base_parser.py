"""
Base response parser interface.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional
from vendor_catalog.data.models.product import VariantRecord
from vendor_catalog.data.models.search import VendorDiagnostic
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

DiagnosticSink = Callable[[VendorDiagnostic], None]


def to_list(value: Any) -> List[Any]:
    """
    Normalize a field that may hold nothing, one item or many items.

    Serializers commonly emit a bare element instead of a one-element array
    when there is exactly one result.

    Args:
        value (Any): None, a single item, or a list/tuple of items

    Returns:
        List[Any]: The items as a list
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def get_path(tree: Any, *keys: str) -> Any:
    """
    Walk nested mappings, returning None as soon as a level is missing.

    Args:
        tree (Any): The root mapping
        *keys (str): Keys to follow in order

    Returns:
        Any: The value at the path, or None
    """
    node = tree
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
        if node is None:
            return None
    return node


def log_diagnostic(diagnostic: VendorDiagnostic) -> None:
    """
    Default diagnostic sink: log the vendor-reported error.

    Args:
        diagnostic (VendorDiagnostic): The diagnostic event
    """
    logger.warning(
        f"{diagnostic.vendor} reported an error for {diagnostic.operation}: "
        f"{diagnostic.message or 'no message'}"
        + (f" (code {diagnostic.code})" if diagnostic.code else ""),
        extra={"vendor_diagnostic": diagnostic},
    )


class BaseParser(ABC):
    """
    Abstract base class for vendor response parsers.

    Parsers turn a raw payload into flat variant records keyed by canonical
    field names. Vendor fields without a canonical name are dropped and fields
    missing from an item are left out of its record.
    """

    vendor_name = "vendor"

    # Vendor field name -> canonical record key
    field_map: Dict[str, str] = {}

    def __init__(self, diagnostic_sink: Optional[DiagnosticSink] = None):
        """
        Initialize the parser.

        Args:
            diagnostic_sink (Optional[DiagnosticSink]): Receives vendor-reported
                errors. Defaults to logging them.
        """
        self.diagnostic_sink = diagnostic_sink or log_diagnostic

    @abstractmethod
    def parse(self, raw_payload: str, operation: str) -> List[VariantRecord]:
        """
        Parse a raw vendor payload into variant records.

        Args:
            raw_payload (str): The raw response body
            operation (str): The vendor operation that produced it

        Returns:
            List[VariantRecord]: The records; empty for no results or a
                vendor-reported error

        Raises:
            MalformedResponseError: If the payload is not structured data at all
        """
        pass

    def _report(self, operation: str, message: Optional[str] = None, code: Optional[str] = None) -> None:
        """
        Emit a vendor diagnostic to the configured sink.
        """
        self.diagnostic_sink(VendorDiagnostic(
            vendor=self.vendor_name,
            operation=operation,
            message=message,
            code=code,
        ))

    def _canonicalize(self, flat_item: Dict[str, Any]) -> VariantRecord:
        """
        Rename vendor fields to canonical keys.

        When two vendor fields map to the same key the first one present wins.

        Args:
            flat_item (Dict[str, Any]): Vendor field name to scalar value

        Returns:
            VariantRecord: Canonical key to value
        """
        record = {}
        for vendor_field, value in flat_item.items():
            key = self.field_map.get(vendor_field)
            if key is None or value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            record.setdefault(key, value)
        return record
