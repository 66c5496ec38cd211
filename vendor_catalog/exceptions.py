"""
Exception classes for the vendor catalog engine.

An empty product list is a successful outcome and never raises; these
exceptions cover a vendor that could not be reached or answered with
something that is not structured data at all.
"""


class VendorCatalogError(Exception):
    """Base exception class for all vendor catalog errors"""
    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class TransportError(VendorCatalogError):
    """Raised on network failure, timeout or a non-success status from a vendor"""
    pass


class MalformedResponseError(VendorCatalogError):
    """Raised when a vendor payload cannot be parsed as XML or JSON"""
    pass


class UnknownVendorError(VendorCatalogError):
    """Raised when no adapter is registered for a vendor name"""
    pass
