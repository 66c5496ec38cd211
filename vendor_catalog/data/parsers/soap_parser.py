"""
SOAP response parser (SanMar product-info responses).
"""
from typing import Any, Dict, List
from lxml import etree
from vendor_catalog.data.parsers.base_parser import BaseParser, to_list, get_path
from vendor_catalog.data.models.product import VariantRecord
from vendor_catalog.exceptions import MalformedResponseError
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Entities are never expanded and no external resources are fetched
_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


def element_to_tree(element) -> Any:
    """
    Convert an element into plain Python values, ignoring namespaces.

    Leaf elements become their stripped text (None when empty). Elements with
    children become dictionaries keyed by child local name; a name that
    repeats maps to a list, a name that occurs once maps to the bare value.

    Args:
        element: An lxml element

    Returns:
        Any: str, None, or dict
    """
    children = [child for child in element if isinstance(child.tag, str)]
    if not children:
        text = (element.text or "").strip()
        return text or None

    tree: Dict[str, Any] = {}
    for child in children:
        name = etree.QName(child).localname
        value = element_to_tree(child)
        if name in tree:
            if not isinstance(tree[name], list):
                tree[name] = [tree[name]]
            tree[name].append(value)
        else:
            tree[name] = value
    return tree


def flatten_item(item: Any) -> Dict[str, Any]:
    """
    Flatten one list item into a single-level map of leaf fields.

    Nested sections (e.g. productBasicInfo, productPriceInfo) are merged; the
    first occurrence of a field name wins.

    Args:
        item (Any): A tree produced by element_to_tree

    Returns:
        Dict[str, Any]: Leaf field name to text
    """
    flat: Dict[str, Any] = {}
    if not isinstance(item, dict):
        return flat

    for name, value in item.items():
        for entry in to_list(value):
            if isinstance(entry, dict):
                for nested_name, nested_value in flatten_item(entry).items():
                    flat.setdefault(nested_name, nested_value)
            elif entry is not None:
                flat.setdefault(name, entry)
    return flat


class SoapResponseParser(BaseParser):
    """
    Parser for SanMar-style SOAP responses.

    The operation response is `<operation>Response/return`, which carries an
    `errorOccured` flag, a `message` and one `listResponse` per variant.
    """

    vendor_name = "sanmar"

    list_element = "listResponse"

    field_map = {
        # productBasicInfo
        "style": "style_id",
        "styleId": "style_id",
        "color": "color",
        "size": "size",
        "brandName": "brand_name",
        "productTitle": "title",
        "productDescription": "description",
        "category": "category",
        "availableSizes": "available_sizes",
        "caseSize": "case_size",
        "pieceWeight": "piece_weight",
        "keywords": "keywords",
        "productStatus": "product_status",
        "inventoryKey": "inventory_key",
        # productPriceInfo
        "casePrice": "case_price",
        "caseSalePrice": "case_sale_price",
        "dozenPrice": "dozen_price",
        "dozenSalePrice": "dozen_sale_price",
        "piecePrice": "piece_price",
        "pieceSalePrice": "piece_sale_price",
        "priceCode": "price_code",
        "priceText": "price_text",
        "saleStartDate": "sale_start_date",
        "saleEndDate": "sale_end_date",
        # productImageInfo
        "productImage": "product_image",
        "colorProductImage": "color_product_image",
        "frontModel": "front_model",
        "backModel": "back_model",
        "sideModel": "side_model",
        "frontFlat": "front_flat",
        "backFlat": "back_flat",
        "thumbnailImage": "thumbnail_image",
        "brandLogoImage": "brand_logo_image",
        "specSheet": "spec_sheet",
    }

    def parse(self, raw_payload: str, operation: str) -> List[VariantRecord]:
        """
        Parse a SOAP response into variant records.

        Args:
            raw_payload (str): The raw response XML
            operation (str): The SOAP operation name, e.g. "getProductInfoByStyle"

        Returns:
            List[VariantRecord]: One record per listResponse item
        """
        root = self._parse_xml(raw_payload, operation)

        fault = self._find(root, "Fault")
        if fault is not None:
            tree = element_to_tree(fault)
            self._report(operation, message=get_path(tree, "faultstring"), code=get_path(tree, "faultcode"))
            return []

        response = self._find(root, f"{operation}Response")
        if response is None:
            logger.info(f"No {operation}Response section in {self.vendor_name} payload")
            return []

        tree = element_to_tree(response)
        return_data = get_path(tree, "return")
        if not isinstance(return_data, dict):
            logger.info(f"No products found for {operation}")
            return []

        if str(return_data.get("errorOccured", "")).lower() == "true":
            self._report(operation, message=return_data.get("message"))
            return []

        items = to_list(return_data.get(self.list_element))
        if not items:
            logger.info(f"No products found for {operation}")
            if return_data.get("message"):
                logger.info(f"{self.vendor_name} message: {return_data.get('message')}")
            return []

        records = [self._canonicalize(flatten_item(item)) for item in items]
        logger.debug(f"Parsed {len(records)} variant records from {operation}")
        return records

    def _parse_xml(self, raw_payload: str, operation: str):
        """
        Parse payload text into an lxml root element.

        Raises:
            MalformedResponseError: If the payload is not well-formed XML
        """
        if isinstance(raw_payload, str):
            raw_payload = raw_payload.encode("utf-8")
        try:
            root = etree.fromstring(raw_payload, parser=_XML_PARSER)
        except (etree.XMLSyntaxError, ValueError) as e:
            logger.error(f"Failed to parse {operation} response: {str(e)}")
            raise MalformedResponseError(
                f"{self.vendor_name} {operation} response is not well-formed XML: {str(e)}",
                details={"operation": operation},
            ) from e
        if root is None:
            raise MalformedResponseError(
                f"{self.vendor_name} {operation} response is empty",
                details={"operation": operation},
            )
        return root

    @staticmethod
    def _find(root, local_name: str):
        """
        Find the first element with the given local name, in any namespace.

        Args:
            root: The lxml root element
            local_name (str): Element name without prefix

        Returns:
            The element, or None
        """
        for element in root.iter():
            if isinstance(element.tag, str) and etree.QName(element).localname == local_name:
                return element
        return None
