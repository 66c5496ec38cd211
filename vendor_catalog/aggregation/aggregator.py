"""
Aggregation of variant records into product aggregates.
"""
from dataclasses import fields
from typing import Any, Dict, Iterable, List, Optional
from vendor_catalog.data.models.product import (
    ProductAggregate,
    VariantRecord,
    STYLE_ID,
    COLOR,
    SIZE,
    INTEGER_FIELDS,
    DECIMAL_FIELDS,
)
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Scalar aggregate fields copied from the first record of each style
_SCALAR_FIELDS = tuple(
    f.name for f in fields(ProductAggregate)
    if f.name not in (STYLE_ID, "colors", "sizes")
)


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(str(value).replace(",", "").replace("$", "").strip())
    except ValueError:
        return None


def _to_int(value: Any) -> Optional[int]:
    number = _to_float(value)
    if number is None:
        return None
    try:
        return int(number)
    except (ValueError, OverflowError):
        return None


def _coerce(name: str, value: Any) -> Any:
    """
    Convert a raw record value to the aggregate field's type.

    Unparseable numbers become None rather than zero.
    """
    if name in INTEGER_FIELDS:
        return _to_int(value)
    if name in DECIMAL_FIELDS:
        return _to_float(value)
    if value is None:
        return None
    return str(value)


class _StyleGroup:
    """
    Accumulates the records of one style while aggregating.
    """

    def __init__(self, style_id: str, first_record: VariantRecord):
        self.style_id = style_id
        self.first_record = first_record
        self.colors: Dict[str, None] = {}
        self.sizes: Dict[str, None] = {}

    def add(self, record: VariantRecord) -> None:
        color = record.get(COLOR)
        if color is not None and str(color) != "":
            self.colors.setdefault(str(color), None)
        size = record.get(SIZE)
        if size is not None and str(size) != "":
            self.sizes.setdefault(str(size), None)

    def to_product(self) -> ProductAggregate:
        values = {
            name: _coerce(name, self.first_record.get(name))
            for name in _SCALAR_FIELDS
        }
        if values.get("style_name") is None:
            values["style_name"] = self.style_id
        return ProductAggregate(
            style_id=self.style_id,
            colors=list(self.colors),
            sizes=list(self.sizes),
            **values
        )


class ProductAggregator:
    """
    Groups flat variant records by style identifier and merges each group
    into a ProductAggregate.
    """

    def aggregate(
        self,
        records: Iterable[VariantRecord],
        max_products: Optional[int] = None
    ) -> List[ProductAggregate]:
        """
        Aggregate variant records into products.

        When max_products is set, a style first seen after that many styles
        are already open is skipped entirely. Records of styles already open
        keep merging, so admitted products still get every color and size.

        Args:
            records (Iterable[VariantRecord]): Variant records in response order
            max_products (Optional[int]): Maximum number of distinct styles to admit

        Returns:
            List[ProductAggregate]: One aggregate per admitted style, in the
                order styles were first encountered
        """
        groups: Dict[str, _StyleGroup] = {}
        dropped_records = 0
        skipped_styles = set()

        for record in records:
            raw_style_id = record.get(STYLE_ID) if record else None
            style_id = str(raw_style_id).strip() if raw_style_id is not None else ""
            if not style_id:
                dropped_records += 1
                continue

            group = groups.get(style_id)
            if group is None:
                if max_products is not None and len(groups) >= max_products:
                    skipped_styles.add(style_id)
                    continue
                group = _StyleGroup(style_id, record)
                groups[style_id] = group
            group.add(record)

        if dropped_records:
            logger.debug(f"Dropped {dropped_records} variant records without a style identifier")
        if skipped_styles:
            logger.info(
                f"Product limit of {max_products} reached; skipped {len(skipped_styles)} additional styles"
            )

        return [group.to_product() for group in groups.values()]


def aggregate(
    records: Iterable[VariantRecord],
    max_products: Optional[int] = None
) -> List[ProductAggregate]:
    """
    Aggregate variant records into products.

    Args:
        records (Iterable[VariantRecord]): Variant records in response order
        max_products (Optional[int]): Maximum number of distinct styles to admit

    Returns:
        List[ProductAggregate]: The aggregated products
    """
    return ProductAggregator().aggregate(records, max_products=max_products)
