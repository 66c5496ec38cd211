"""
JSON response parser (S&S Activewear products feed).
"""
import json
from typing import Any, Dict, List
from vendor_catalog.data.parsers.base_parser import BaseParser, to_list
from vendor_catalog.data.models.product import VariantRecord
from vendor_catalog.exceptions import MalformedResponseError
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

_SCALAR_TYPES = (str, int, float, bool)


class JsonResponseParser(BaseParser):
    """
    Parser for JSON feeds returning one object per SKU.
    """

    vendor_name = "ssactivewear"

    field_map = {
        "styleID": "style_id",
        "styleName": "style_name",
        "brandName": "brand_name",
        "title": "title",
        "description": "description",
        "baseCategory": "category",
        "colorName": "color",
        "sizeName": "size",
        "caseQty": "case_size",
        "unitWeight": "piece_weight",
        "piecePrice": "piece_price",
        "dozenPrice": "dozen_price",
        "casePrice": "case_price",
        "salePrice": "piece_sale_price",
        "customerPrice": "customer_price",
        "saleExpiration": "sale_end_date",
        "colorFrontImage": "front_model",
        "colorBackImage": "back_model",
        "colorSideImage": "side_model",
        "colorSwatchImage": "thumbnail_image",
        "brandImage": "brand_logo_image",
    }

    def parse(self, raw_payload: str, operation: str) -> List[VariantRecord]:
        """
        Parse a JSON array (or a single object) into variant records.

        An object carrying "errors" or a lone "message" is a vendor-reported
        error and yields no records.

        Args:
            raw_payload (str): The raw response body
            operation (str): The operation name

        Returns:
            List[VariantRecord]: One record per SKU object
        """
        try:
            payload = json.loads(raw_payload)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to parse {operation} response: {str(e)}")
            raise MalformedResponseError(
                f"{self.vendor_name} {operation} response is not valid JSON: {str(e)}",
                details={"operation": operation},
            ) from e

        if isinstance(payload, dict) and self._is_error(payload):
            self._report(operation, message=self._error_message(payload), code=payload.get("code"))
            return []

        records = []
        for item in to_list(payload):
            if not isinstance(item, dict):
                logger.debug(f"Skipping non-object item in {operation} response: {item!r}")
                continue
            records.append(self._canonicalize(self._scalars(item)))

        if not records:
            logger.info(f"No products found for {operation}")
        else:
            logger.debug(f"Parsed {len(records)} variant records from {operation}")
        return records

    def _is_error(self, payload: Dict[str, Any]) -> bool:
        if "errors" in payload:
            return True
        return "message" in payload and not any(name in payload for name in self.field_map)

    @staticmethod
    def _error_message(payload: Dict[str, Any]) -> str:
        errors = to_list(payload.get("errors"))
        messages = [
            str(error.get("message", error)) if isinstance(error, dict) else str(error)
            for error in errors
        ]
        if payload.get("message"):
            messages.insert(0, str(payload["message"]))
        return "; ".join(messages)

    @staticmethod
    def _scalars(item: Dict[str, Any]) -> Dict[str, Any]:
        # Records are flat; nested objects/arrays have no canonical field
        return {name: value for name, value in item.items() if isinstance(value, _SCALAR_TYPES)}
