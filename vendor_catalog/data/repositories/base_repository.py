"""
Base repository interface for vendor data access.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Dict, Generic, TypeVar
import pandas as pd
from vendor_catalog.data.connectors.base_connector import BaseConnector
from vendor_catalog.data.parsers.base_parser import BaseParser
from vendor_catalog.data.models.credentials import VendorCredentials
from vendor_catalog.data.models.product import VariantRecord
from vendor_catalog.data.models.search import LookupOperation
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Generic type for repository entities
T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base class for repositories backed by a vendor API.
    """

    def __init__(self, connector: BaseConnector, parser: BaseParser):
        """
        Initialize the repository with a transport and a parser.

        Args:
            connector (BaseConnector): The vendor connector to use
            parser (BaseParser): The parser matching the connector's payloads
        """
        self.connector = connector
        self.parser = parser

    @abstractmethod
    def get_all(self, *args, **kwargs) -> List[T]:
        """
        Get all entities that match the specified criteria.

        Returns:
            List[T]: A list of entity objects
        """
        pass

    @abstractmethod
    def get_raw_data(self, *args, **kwargs) -> pd.DataFrame:
        """
        Get raw data as a pandas DataFrame.

        Returns:
            pd.DataFrame: The raw data as a pandas DataFrame
        """
        pass

    def _fetch_records(
        self,
        lookup: LookupOperation,
        value: str,
        credentials: VendorCredentials
    ) -> List[VariantRecord]:
        """
        Run one vendor operation and parse its payload.

        Args:
            lookup (LookupOperation): The lookup kind
            value (str): Style code or brand name
            credentials (VendorCredentials): Credentials for the call

        Returns:
            List[VariantRecord]: The parsed variant records
        """
        operation = self.connector.operation_for(lookup)
        parameters = self.connector.parameters_for(lookup, value)
        raw_payload = self.connector.send(operation, parameters, credentials)
        return self.parser.parse(raw_payload, operation)

    @staticmethod
    def _records_to_dataframe(records: List[Dict[str, Any]]) -> pd.DataFrame:
        """
        Tabulate flat records; fields missing from a record become NaN.

        Args:
            records (List[Dict[str, Any]]): Flat records

        Returns:
            pd.DataFrame: One row per record
        """
        if not records:
            return pd.DataFrame()
        return pd.DataFrame.from_records(records)
