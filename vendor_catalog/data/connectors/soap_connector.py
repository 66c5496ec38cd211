"""
SOAP connector implementation (SanMar Web Services).
"""
from typing import Dict, Any, Optional
from lxml import etree
from vendor_catalog.data.connectors.base_connector import BaseConnector
from vendor_catalog.data.models.credentials import VendorCredentials
from vendor_catalog.data.models.search import LookupOperation
from vendor_catalog.config.vendor_config import get_sanmar_config, SOAP_ENVELOPE_NAMESPACE
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class SoapConnector(BaseConnector):
    """
    Connector for SOAP 1.1 product-info services such as SanMar's.
    """

    vendor_name = "sanmar"

    # Element names for the credential block sent as arg1
    credential_elements = {
        "account_id": "sanMarCustomerNumber",
        "username": "sanMarUserName",
        "secret": "sanMarUserPassword",
    }

    # Element name carrying the lookup value inside arg0
    parameter_elements = {
        LookupOperation.STYLE: "styleId",
        LookupOperation.BRAND: "brandName",
    }

    # SOAP 1.1 fault children copied into TransportError details
    fault_elements = {
        "faultcode": "fault_code",
        "faultstring": "fault_string",
    }

    def __init__(self, config: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None):
        """
        Initialize the SOAP connector.

        Args:
            config (Optional[Dict[str, Any]]): Endpoint configuration.
                                              If None, uses get_sanmar_config()
            timeout (Optional[float]): Seconds before an outbound call is abandoned
        """
        super().__init__(timeout=timeout)
        self.config = config if config is not None else get_sanmar_config()
        self.endpoint = self.config["product_info_endpoint"]
        self.namespace = self.config["namespace"]

    def operation_for(self, lookup: LookupOperation) -> str:
        """
        Map a vendor-neutral lookup to the SOAP operation name.

        Args:
            lookup (LookupOperation): The lookup kind

        Returns:
            str: e.g. "getProductInfoByStyle"
        """
        if lookup == LookupOperation.STYLE:
            return self.config["style_operation"]
        return self.config["brand_operation"]

    def parameters_for(self, lookup: LookupOperation, value: str) -> Dict[str, str]:
        """
        Build the operation parameters for a lookup value.

        Args:
            lookup (LookupOperation): The lookup kind
            value (str): Style code or brand name

        Returns:
            Dict[str, str]: Element name to value
        """
        return {self.parameter_elements[lookup]: value}

    def build_envelope(self, operation: str, parameters: Dict[str, str], credentials: VendorCredentials) -> bytes:
        """
        Build the SOAP request envelope.

        Args:
            operation (str): The SOAP operation name
            parameters (Dict[str, str]): Parameters placed under arg0
            credentials (VendorCredentials): Credentials placed under arg1

        Returns:
            bytes: The serialized envelope, UTF-8 encoded with an XML declaration
        """
        nsmap = {"soapenv": SOAP_ENVELOPE_NAMESPACE, "impl": self.namespace}
        envelope = etree.Element(etree.QName(SOAP_ENVELOPE_NAMESPACE, "Envelope"), nsmap=nsmap)
        etree.SubElement(envelope, etree.QName(SOAP_ENVELOPE_NAMESPACE, "Header"))
        body = etree.SubElement(envelope, etree.QName(SOAP_ENVELOPE_NAMESPACE, "Body"))
        request = etree.SubElement(body, etree.QName(self.namespace, operation))

        arg0 = etree.SubElement(request, "arg0")
        for name, value in parameters.items():
            etree.SubElement(arg0, name).text = (value or "").strip()

        arg1 = etree.SubElement(request, "arg1")
        for attribute, element_name in self.credential_elements.items():
            etree.SubElement(arg1, element_name).text = getattr(credentials, attribute) or ""

        return etree.tostring(envelope, xml_declaration=True, encoding="UTF-8")

    def send(self, operation: str, parameters: Dict[str, str], credentials: VendorCredentials) -> str:
        """
        Post a SOAP request and return the raw response XML.

        Args:
            operation (str): The SOAP operation name (also sent as SOAPAction)
            parameters (Dict[str, str]): Operation parameters
            credentials (VendorCredentials): Credentials embedded in the envelope

        Returns:
            str: The raw response body

        Raises:
            TransportError: On any non-2xx status, SOAP faults over HTTP 500 included
        """
        envelope = self.build_envelope(operation, parameters, credentials)
        headers = {
            "Content-Type": "text/xml; charset=utf-8",
            "SOAPAction": operation,
        }

        logger.debug(f"Sending {operation} to {self.endpoint} ({credentials.masked()})")
        response = self._request("POST", self.endpoint, operation, data=envelope, headers=headers)

        if not response.ok:
            self._raise_for_status(response, operation, extra_details=self._fault_details(response.content))
        return response.text

    def _fault_details(self, body: bytes) -> Dict[str, str]:
        """
        Extract faultcode/faultstring from an error response body.

        Args:
            body (bytes): The raw response body

        Returns:
            Dict[str, str]: The fault fields present; empty when the body is not a SOAP fault
        """
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            root = etree.fromstring(body, parser=parser)
        except (etree.XMLSyntaxError, ValueError):
            return {}
        if root is None:
            return {}

        details = {}
        for element in root.iter():
            if not isinstance(element.tag, str) or etree.QName(element).localname != "Fault":
                continue
            for child in element:
                if not isinstance(child.tag, str):
                    continue
                key = self.fault_elements.get(etree.QName(child).localname)
                if key and child.text and child.text.strip():
                    details[key] = child.text.strip()
            break
        return details
