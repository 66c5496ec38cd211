"""Pytest fixtures for vendor catalog tests."""

import pytest
import requests

from vendor_catalog.data.connectors.soap_connector import SoapConnector
from vendor_catalog.data.models.credentials import VendorCredentials
from vendor_catalog.data.parsers.soap_parser import SoapResponseParser
from vendor_catalog.data.repositories.product_repository import VendorProductRepository

SANMAR_NS = "http://impl.webservice.integration.sanmar.com/"
STYLE_OP = "getProductInfoByStyle"
BRAND_OP = "getProductInfoByBrand"


def list_item(style, color=None, size=None, brand="Port &amp; Company", title="Core Cotton Tee", **extra):
    """One SanMar listResponse element; extra kwargs land in productPriceInfo."""
    basic = f"<style>{style}</style>" if style is not None else ""
    if color is not None:
        basic += f"<color>{color}</color>"
    if size is not None:
        basic += f"<size>{size}</size>"
    basic += f"<brandName>{brand}</brandName><productTitle>{title}</productTitle>"
    price = "".join(f"<{name}>{value}</{name}>" for name, value in extra.items())
    return (
        "<listResponse>"
        f"<productBasicInfo>{basic}</productBasicInfo>"
        f"<productImageInfo><productImage>https://cdn.example.com/{style}.jpg</productImage></productImageInfo>"
        f"<productPriceInfo>{price}</productPriceInfo>"
        "</listResponse>"
    )


def soap_response(operation, items="", error=False, message=""):
    """A SanMar-shaped SOAP response envelope."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<S:Envelope xmlns:S="http://schemas.xmlsoap.org/soap/envelope/">'
        "<S:Body>"
        f'<ns2:{operation}Response xmlns:ns2="{SANMAR_NS}">'
        "<return>"
        f"<errorOccured>{'true' if error else 'false'}</errorOccured>"
        f"<message>{message}</message>"
        f"{items}"
        "</return>"
        f"</ns2:{operation}Response>"
        "</S:Body>"
        "</S:Envelope>"
    )


def make_response(status_code, text, content_type="text/xml; charset=utf-8"):
    """A requests.Response built in memory."""
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.headers["Content-Type"] = content_type
    response.encoding = "utf-8"
    response.url = "https://vendor.example.com/"
    return response


class FakeSoapConnector(SoapConnector):
    """SOAP connector that answers from canned payloads instead of the network."""

    def __init__(self, responses=None):
        super().__init__(config={
            "product_info_endpoint": "https://vendor.example.com/ProductInfo",
            "namespace": SANMAR_NS,
            "style_operation": STYLE_OP,
            "brand_operation": BRAND_OP,
        })
        # operation -> payload text or exception instance
        self.responses = responses or {}
        self.calls = []

    def send(self, operation, parameters, credentials):
        self.calls.append((operation, dict(parameters)))
        result = self.responses.get(operation, soap_response(operation))
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def credentials():
    return VendorCredentials(account_id="123456", username="acme", secret="s3cret")


@pytest.fixture
def make_repository():
    """Build a repository over a FakeSoapConnector with the given canned responses."""
    def _make(responses=None, diagnostic_sink=None):
        connector = FakeSoapConnector(responses)
        parser = SoapResponseParser(diagnostic_sink=diagnostic_sink)
        return VendorProductRepository(connector=connector, parser=parser)
    return _make
