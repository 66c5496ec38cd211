"""
Product repository for looking up vendor catalog products.
"""
from typing import List, Optional
import pandas as pd
from vendor_catalog.data.repositories.base_repository import BaseRepository
from vendor_catalog.data.models.product import ProductAggregate
from vendor_catalog.data.models.credentials import VendorCredentials
from vendor_catalog.data.models.search import LookupOperation
from vendor_catalog.data.connectors.base_connector import BaseConnector
from vendor_catalog.data.parsers.base_parser import BaseParser
from vendor_catalog.aggregation.aggregator import ProductAggregator
from vendor_catalog.utils.validation import validate_max_products, validate_query_text
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class VendorProductRepository(BaseRepository[ProductAggregate]):
    """
    Repository for vendor product lookups.

    Errors from the connector and parser propagate unchanged; an empty list
    means the vendor had no matching products.
    """

    def __init__(
        self,
        connector: BaseConnector,
        parser: BaseParser,
        aggregator: Optional[ProductAggregator] = None
    ):
        """
        Initialize the product repository.

        Args:
            connector (BaseConnector): The vendor connector to use
            parser (BaseParser): The parser matching the connector's payloads
            aggregator (Optional[ProductAggregator]): Aggregator for variant records
        """
        super().__init__(connector, parser)
        self.aggregator = aggregator or ProductAggregator()

    @property
    def vendor_name(self) -> str:
        return self.connector.vendor_name

    def get_all(
        self,
        lookup: LookupOperation,
        value: str,
        credentials: VendorCredentials,
        max_products: Optional[int] = None
    ) -> List[ProductAggregate]:
        """
        Get the products matching one vendor lookup.

        Args:
            lookup (LookupOperation): Style or brand lookup
            value (str): Style code or brand name
            credentials (VendorCredentials): Credentials for the call
            max_products (Optional[int]): Maximum number of distinct styles to return

        Returns:
            List[ProductAggregate]: The aggregated products
        """
        max_products = validate_max_products(max_products)
        value = validate_query_text(value)

        logger.info(f"Looking up {self.vendor_name} products by {lookup.value}: '{value}'")
        records = self._fetch_records(lookup, value, credentials)
        products = self.aggregator.aggregate(records, max_products=max_products)
        logger.info(
            f"{self.vendor_name} {lookup.value} lookup '{value}' returned "
            f"{len(records)} variant records in {len(products)} products"
        )
        return products

    def lookup_by_style(self, style_code: str, credentials: VendorCredentials) -> List[ProductAggregate]:
        """
        Look up products by style code. Style lookups are not bounded.

        Args:
            style_code (str): The vendor style code, e.g. "PC54"
            credentials (VendorCredentials): Credentials for the call

        Returns:
            List[ProductAggregate]: The matching products
        """
        return self.get_all(LookupOperation.STYLE, style_code, credentials)

    def lookup_by_brand(
        self,
        brand_name: str,
        credentials: VendorCredentials,
        max_products: Optional[int] = None
    ) -> List[ProductAggregate]:
        """
        Look up products by brand name.

        Args:
            brand_name (str): The brand, e.g. "OGIO"
            credentials (VendorCredentials): Credentials for the call
            max_products (Optional[int]): Maximum number of distinct styles to return

        Returns:
            List[ProductAggregate]: The matching products
        """
        return self.get_all(LookupOperation.BRAND, brand_name, credentials, max_products=max_products)

    def get_raw_data(
        self,
        lookup: LookupOperation,
        value: str,
        credentials: VendorCredentials
    ) -> pd.DataFrame:
        """
        Get the flat variant records of one lookup as a DataFrame.

        Args:
            lookup (LookupOperation): Style or brand lookup
            value (str): Style code or brand name
            credentials (VendorCredentials): Credentials for the call

        Returns:
            pd.DataFrame: One row per variant record
        """
        records = self._fetch_records(lookup, validate_query_text(value), credentials)
        logger.info(f"Retrieved {len(records)} {self.vendor_name} variant records.")
        return self._records_to_dataframe(records)


def products_to_dataframe(products: List[ProductAggregate]) -> pd.DataFrame:
    """
    Tabulate product aggregates, joining colors and sizes with ", ".

    Args:
        products (List[ProductAggregate]): The products

    Returns:
        pd.DataFrame: One row per product
    """
    if not products:
        return pd.DataFrame()

    rows = []
    for product in products:
        row = product.to_dict()
        row["colors"] = ", ".join(product.colors)
        row["sizes"] = ", ".join(product.sizes)
        rows.append(row)

    return pd.DataFrame(rows)
