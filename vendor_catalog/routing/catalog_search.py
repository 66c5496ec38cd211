"""
Catalog search routing: classify the query, then run style and brand lookups.
"""
from typing import List, Optional
from vendor_catalog.config.app_config import DEFAULT_MAX_PRODUCTS, CONNECTION_TEST_BRAND
from vendor_catalog.data.models.credentials import VendorCredentials
from vendor_catalog.data.models.product import ProductAggregate
from vendor_catalog.data.models.search import QueryKind
from vendor_catalog.data.repositories.product_repository import VendorProductRepository
from vendor_catalog.exceptions import VendorCatalogError, TransportError, MalformedResponseError
from vendor_catalog.routing.classifier import classify_query
from vendor_catalog.utils.validation import validate_max_products, validate_query_text
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class CatalogSearch:
    """
    Free-text product search against one vendor connection.

    Style-code-like queries try a style lookup first and fall back to a brand
    lookup with the same text when it finds nothing or fails. Brand-name
    queries go straight to the bounded brand lookup. Instances hold no
    per-query state.
    """

    def __init__(
        self,
        repository: VendorProductRepository,
        credentials: VendorCredentials,
        max_products: Optional[int] = None
    ):
        """
        Initialize the search router.

        Args:
            repository (VendorProductRepository): Repository for the vendor
            credentials (VendorCredentials): Credentials for every vendor call
            max_products (Optional[int]): Bound for brand lookups (default: DEFAULT_MAX_PRODUCTS)
        """
        self.repository = repository
        self.credentials = credentials
        self.max_products = validate_max_products(
            max_products if max_products is not None else DEFAULT_MAX_PRODUCTS
        )

    def search(self, query_text: str) -> List[ProductAggregate]:
        """
        Search the vendor catalog.

        Args:
            query_text (str): A style code or brand name

        Returns:
            List[ProductAggregate]: Matching products; empty when nothing matched

        Raises:
            TransportError: If the brand lookup cannot reach the vendor
            MalformedResponseError: If the brand lookup payload is unreadable
        """
        query_text = validate_query_text(query_text)
        if not query_text:
            logger.info("Empty catalog query; nothing to search")
            return []

        kind = classify_query(query_text)
        logger.debug(f"Classified '{query_text}' as {kind.value}")

        if kind == QueryKind.STYLE_CODE:
            try:
                products = self.repository.lookup_by_style(query_text, self.credentials)
            except (TransportError, MalformedResponseError) as e:
                logger.warning(f"Style lookup for '{query_text}' failed, falling back to brand lookup: {e.message}")
            else:
                if products:
                    return products
                logger.info(f"No style match for '{query_text}', falling back to brand lookup")

        return self.lookup_by_brand(query_text)

    def lookup_by_style(self, style_code: str) -> List[ProductAggregate]:
        """
        Look up products by style code, with no fallback.

        Args:
            style_code (str): The vendor style code

        Returns:
            List[ProductAggregate]: The matching products
        """
        return self.repository.lookup_by_style(style_code, self.credentials)

    def lookup_by_brand(self, brand_name: str, max_products: Optional[int] = None) -> List[ProductAggregate]:
        """
        Look up products by brand name, bounded to max_products styles.

        Args:
            brand_name (str): The brand name
            max_products (Optional[int]): Override for this call's bound

        Returns:
            List[ProductAggregate]: The matching products
        """
        bound = max_products if max_products is not None else self.max_products
        return self.repository.lookup_by_brand(brand_name, self.credentials, max_products=bound)

    def get_product_details(self, style_id: str) -> Optional[ProductAggregate]:
        """
        Get a single product by style identifier.

        Args:
            style_id (str): The vendor style identifier

        Returns:
            Optional[ProductAggregate]: The first matching product, or None when
                                        the vendor has no such style

        Raises:
            TransportError: If the vendor cannot be reached or answers non-2xx
            MalformedResponseError: If the vendor payload cannot be parsed
        """
        products = self.lookup_by_style(style_id)
        return products[0] if products else None

    def test_connection(self, brand_name: Optional[str] = None) -> bool:
        """
        Check that the vendor answers a brand lookup with these credentials.

        Args:
            brand_name (Optional[str]): Brand to query (default: CONNECTION_TEST_BRAND)

        Returns:
            bool: True if the lookup completed, even with no products
        """
        brand = brand_name or CONNECTION_TEST_BRAND
        try:
            self.lookup_by_brand(brand, max_products=1)
            return True
        except VendorCatalogError as e:
            logger.error(f"{self.repository.vendor_name} connection test failed: {e.message}")
            return False
