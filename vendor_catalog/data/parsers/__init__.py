"""
Vendor response parsers.
"""
from vendor_catalog.data.parsers.base_parser import BaseParser, to_list, get_path
from vendor_catalog.data.parsers.soap_parser import SoapResponseParser
from vendor_catalog.data.parsers.json_parser import JsonResponseParser
