"""
Vendor transport connectors.
"""
from vendor_catalog.data.connectors.base_connector import BaseConnector
from vendor_catalog.data.connectors.soap_connector import SoapConnector
from vendor_catalog.data.connectors.rest_connector import RestConnector
