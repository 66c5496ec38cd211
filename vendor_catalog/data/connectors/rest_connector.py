"""
REST/JSON connector implementation (S&S Activewear API v2).
"""
from typing import Dict, Any, Optional
from vendor_catalog.data.connectors.base_connector import BaseConnector
from vendor_catalog.data.models.credentials import VendorCredentials
from vendor_catalog.data.models.search import LookupOperation
from vendor_catalog.config.vendor_config import get_ssactivewear_config
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class RestConnector(BaseConnector):
    """
    Connector for JSON product feeds queried with GET and HTTP basic auth.
    """

    vendor_name = "ssactivewear"

    def __init__(self, config: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None):
        """
        Initialize the REST connector.

        Args:
            config (Optional[Dict[str, Any]]): Endpoint configuration.
                                              If None, uses get_ssactivewear_config()
            timeout (Optional[float]): Seconds before an outbound call is abandoned
        """
        super().__init__(timeout=timeout)
        self.config = config if config is not None else get_ssactivewear_config()
        self.url = self.config["base_url"].rstrip("/") + self.config["products_path"]

    def operation_for(self, lookup: LookupOperation) -> str:
        """
        Map a vendor-neutral lookup to an operation name.

        The operation name doubles as the products query parameter.

        Args:
            lookup (LookupOperation): The lookup kind

        Returns:
            str: e.g. "style"
        """
        if lookup == LookupOperation.STYLE:
            return self.config["style_parameter"]
        return self.config["brand_parameter"]

    def parameters_for(self, lookup: LookupOperation, value: str) -> Dict[str, str]:
        return {self.operation_for(lookup): value}

    def send(self, operation: str, parameters: Dict[str, str], credentials: VendorCredentials) -> str:
        """
        GET the products endpoint and return the raw JSON text.

        Args:
            operation (str): Operation name, used for logging and error details
            parameters (Dict[str, str]): Query string parameters
            credentials (VendorCredentials): account_id and secret form the basic-auth pair

        Returns:
            str: The raw response body
        """
        params = {name: (value or "").strip() for name, value in parameters.items()}
        headers = {"Accept": "application/json"}

        logger.debug(f"Requesting {self.url} with {params} ({credentials.masked()})")
        response = self._request(
            "GET",
            self.url,
            operation,
            params=params,
            headers=headers,
            auth=(credentials.account_id, credentials.secret),
        )

        self._raise_for_status(response, operation)
        return response.text
