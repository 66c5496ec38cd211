"""
Base vendor connector interface.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional
import requests
from vendor_catalog.config.app_config import DEFAULT_TIMEOUT
from vendor_catalog.data.models.credentials import VendorCredentials
from vendor_catalog.data.models.search import LookupOperation
from vendor_catalog.exceptions import TransportError
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class BaseConnector(ABC):
    """
    Abstract base class for vendor API transports.

    A connector sends one request per call and returns the raw response text.
    Without connect() every call is a one-shot request; after connect() calls
    reuse a keep-alive session owned by the calling thread.
    """

    vendor_name = "vendor"

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize the connector.

        Args:
            timeout (Optional[float]): Seconds before an outbound call is abandoned
        """
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.session = None

    def connect(self) -> requests.Session:
        """
        Open a keep-alive HTTP session.

        Returns:
            requests.Session: The session object
        """
        if self.session is None:
            self.session = requests.Session()
            logger.debug(f"{self.vendor_name} session opened.")
        return self.session

    def disconnect(self) -> None:
        """
        Close the HTTP session, if one is open.
        """
        if self.session is not None:
            self.session.close()
            self.session = None
            logger.debug(f"{self.vendor_name} session closed.")

    @abstractmethod
    def operation_for(self, lookup: LookupOperation) -> str:
        """
        Map a vendor-neutral lookup to this vendor's operation name.

        Args:
            lookup (LookupOperation): The lookup kind

        Returns:
            str: The vendor operation name
        """
        pass

    @abstractmethod
    def parameters_for(self, lookup: LookupOperation, value: str) -> Dict[str, str]:
        """
        Build the operation parameters for a lookup value.

        Args:
            lookup (LookupOperation): The lookup kind
            value (str): Style code or brand name

        Returns:
            Dict[str, str]: Parameter name to value
        """
        pass

    @abstractmethod
    def send(self, operation: str, parameters: Dict[str, str], credentials: VendorCredentials) -> str:
        """
        Send one request to the vendor and return the raw response body.

        Args:
            operation (str): The vendor operation name
            parameters (Dict[str, str]): Operation parameters
            credentials (VendorCredentials): Credentials for the call

        Returns:
            str: The raw response body

        Raises:
            TransportError: On network failure, timeout or non-success status
        """
        pass

    def _request(self, method: str, url: str, operation: str, **kwargs) -> requests.Response:
        """
        Issue an HTTP request with the connector timeout, mapping failures to TransportError.

        Args:
            method (str): HTTP method
            url (str): Target URL
            operation (str): Operation name, for error details
            **kwargs: Passed through to requests

        Returns:
            requests.Response: The response (status not yet checked)
        """
        kwargs.setdefault("timeout", self.timeout)
        try:
            if self.session is not None:
                return self.session.request(method, url, **kwargs)
            return requests.request(method, url, **kwargs)
        except requests.exceptions.Timeout as e:
            logger.error(f"{self.vendor_name} {operation} timed out after {self.timeout}s")
            raise TransportError(
                f"{self.vendor_name} {operation} timed out after {self.timeout}s",
                details={"operation": operation},
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"{self.vendor_name} {operation} request failed: {str(e)}")
            raise TransportError(
                f"{self.vendor_name} {operation} request failed: {str(e)}",
                details={"operation": operation},
            ) from e

    def _raise_for_status(
        self,
        response: requests.Response,
        operation: str,
        extra_details: Optional[Dict[str, str]] = None
    ) -> None:
        """
        Raise TransportError for a non-success HTTP status.

        Args:
            response (requests.Response): The vendor response
            operation (str): Operation name, for error details
            extra_details (Optional[Dict[str, str]]): Vendor error fields to add to the details
        """
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            logger.error(f"{self.vendor_name} {operation} returned HTTP {response.status_code}")
            raise TransportError(
                f"{self.vendor_name} {operation} returned HTTP {response.status_code}",
                details={"operation": operation, "status_code": response.status_code, **(extra_details or {})},
            ) from e

    def __enter__(self):
        """
        Context manager entry point.

        Returns:
            BaseConnector: The connector instance
        """
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Context manager exit point.

        Args:
            exc_type: Exception type if an exception was raised in the context
            exc_val: Exception value if an exception was raised
            exc_tb: Exception traceback if an exception was raised
        """
        self.disconnect()
