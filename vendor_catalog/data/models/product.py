"""
Product data models.
"""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

# One (style, color, size) row from a vendor feed, keyed by canonical field names
VariantRecord = Dict[str, Any]

# Canonical record keys
STYLE_ID = "style_id"
COLOR = "color"
SIZE = "size"


@dataclass
class ProductAggregate:
    """
    Represents one vendor product family merged from its variant records.

    Scalar attributes come from the first record seen for the style; colors and
    sizes collect every distinct value across the style's records in the order
    they were first seen.
    """
    style_id: str
    style_name: Optional[str] = None
    brand_name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    available_sizes: Optional[str] = None  # Vendor display text, e.g. "Adult Sizes: XS-4XL"
    case_size: Optional[int] = None
    piece_weight: Optional[float] = None

    # Pricing (None when the vendor does not supply the field)
    case_price: Optional[float] = None
    case_sale_price: Optional[float] = None
    dozen_price: Optional[float] = None
    dozen_sale_price: Optional[float] = None
    piece_price: Optional[float] = None
    piece_sale_price: Optional[float] = None
    customer_price: Optional[float] = None
    price_code: Optional[str] = None
    price_text: Optional[str] = None
    sale_start_date: Optional[str] = None
    sale_end_date: Optional[str] = None

    # Aggregated from all variant records
    colors: List[str] = field(default_factory=list)
    sizes: List[str] = field(default_factory=list)

    # Images
    product_image: Optional[str] = None
    color_product_image: Optional[str] = None
    front_model: Optional[str] = None
    back_model: Optional[str] = None
    side_model: Optional[str] = None
    front_flat: Optional[str] = None
    back_flat: Optional[str] = None
    thumbnail_image: Optional[str] = None
    brand_logo_image: Optional[str] = None
    spec_sheet: Optional[str] = None

    # Other
    keywords: Optional[str] = None
    product_status: Optional[str] = None
    inventory_key: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the aggregate to a plain dictionary.

        Returns:
            Dict[str, Any]: Field name to value, including unset fields as None
        """
        return asdict(self)


# Aggregate fields parsed as numbers from vendor text
INTEGER_FIELDS = ("case_size",)
DECIMAL_FIELDS = (
    "piece_weight",
    "case_price",
    "case_sale_price",
    "dozen_price",
    "dozen_sale_price",
    "piece_price",
    "piece_sale_price",
    "customer_price",
)
