"""
Factory for creating vendor catalog searches.
"""
from typing import Dict, Optional, Tuple, Type
from vendor_catalog.data.connectors.base_connector import BaseConnector
from vendor_catalog.data.connectors.soap_connector import SoapConnector
from vendor_catalog.data.connectors.rest_connector import RestConnector
from vendor_catalog.data.parsers.base_parser import BaseParser, DiagnosticSink
from vendor_catalog.data.parsers.soap_parser import SoapResponseParser
from vendor_catalog.data.parsers.json_parser import JsonResponseParser
from vendor_catalog.data.repositories.product_repository import VendorProductRepository
from vendor_catalog.data.models.credentials import VendorCredentials
from vendor_catalog.routing.catalog_search import CatalogSearch
from vendor_catalog.exceptions import UnknownVendorError


class VendorFactory:
    """
    Factory for building repositories and searches per vendor.
    """

    def __init__(self, timeout: Optional[float] = None, diagnostic_sink: Optional[DiagnosticSink] = None):
        """
        Initialize the vendor factory.

        Args:
            timeout (Optional[float]): Timeout for every connector built
            diagnostic_sink (Optional[DiagnosticSink]): Receives vendor-reported errors
        """
        self.timeout = timeout
        self.diagnostic_sink = diagnostic_sink

        # Register vendors
        self._vendors: Dict[str, Tuple[Type[BaseConnector], Type[BaseParser]]] = {
            'sanmar': (SoapConnector, SoapResponseParser),
            'ssactivewear': (RestConnector, JsonResponseParser),
        }

    @property
    def vendors(self):
        return sorted(self._vendors)

    def register(self, name: str, connector_class: Type[BaseConnector], parser_class: Type[BaseParser]) -> None:
        """
        Register an additional vendor backend.

        Args:
            name (str): Vendor name used to look the backend up
            connector_class (Type[BaseConnector]): Transport for the vendor
            parser_class (Type[BaseParser]): Parser for the vendor's payloads
        """
        self._vendors[name.lower()] = (connector_class, parser_class)

    def get_repository(self, vendor: str) -> VendorProductRepository:
        """
        Build a product repository for a vendor.

        Args:
            vendor (str): The vendor name ('sanmar', 'ssactivewear')

        Returns:
            VendorProductRepository: A repository wired to the vendor's connector and parser

        Raises:
            UnknownVendorError: If the vendor is not registered
        """
        key = (vendor or "").strip().lower()
        if key not in self._vendors:
            raise UnknownVendorError(
                f"Unknown vendor: {vendor}",
                details={"vendor": vendor, "known_vendors": self.vendors},
            )

        connector_class, parser_class = self._vendors[key]
        return VendorProductRepository(
            connector=connector_class(timeout=self.timeout),
            parser=parser_class(diagnostic_sink=self.diagnostic_sink),
        )

    def get_search(
        self,
        vendor: str,
        credentials: VendorCredentials,
        max_products: Optional[int] = None
    ) -> CatalogSearch:
        """
        Build a catalog search for a vendor connection.

        Args:
            vendor (str): The vendor name
            credentials (VendorCredentials): Credentials for the connection
            max_products (Optional[int]): Bound for brand lookups

        Returns:
            CatalogSearch: The search router
        """
        return CatalogSearch(
            repository=self.get_repository(vendor),
            credentials=credentials,
            max_products=max_products,
        )
