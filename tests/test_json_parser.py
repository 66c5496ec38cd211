import json

import pytest

from vendor_catalog.aggregation.aggregator import aggregate
from vendor_catalog.data.parsers.json_parser import JsonResponseParser
from vendor_catalog.exceptions import MalformedResponseError


def sku(style_id, color, size, **extra):
    item = {
        "sku": f"B{style_id}{color[:2]}{size}",
        "styleID": style_id,
        "brandName": "Gildan",
        "styleName": "5000",
        "colorName": color,
        "sizeName": size,
        "piecePrice": 2.85,
        "caseQty": 72,
        "warehouses": [{"warehouseAbbr": "IL", "qty": 100}],
    }
    item.update(extra)
    return item


@pytest.fixture
def diagnostics():
    return []


@pytest.fixture
def parser(diagnostics):
    return JsonResponseParser(diagnostic_sink=diagnostics.append)


def test_parses_sku_objects_into_canonical_records(parser):
    payload = json.dumps([sku(39, "Black", "L"), sku(39, "Black", "XL")])

    records = parser.parse(payload, "style")

    assert len(records) == 2
    assert records[0]["style_id"] == 39
    assert records[0]["brand_name"] == "Gildan"
    assert records[0]["style_name"] == "5000"
    assert records[0]["color"] == "Black"
    assert records[0]["size"] == "L"
    assert records[0]["piece_price"] == 2.85
    assert "warehouses" not in records[0]
    assert "sku" not in records[0]


def test_single_object_is_normalized_to_one_record(parser):
    records = parser.parse(json.dumps(sku(39, "White", "S")), "style")

    assert len(records) == 1
    assert records[0]["color"] == "White"


def test_empty_array_yields_empty_result(parser, diagnostics):
    assert parser.parse("[]", "brand") == []
    assert diagnostics == []


def test_error_object_yields_empty_result_and_diagnostic(parser, diagnostics):
    payload = json.dumps({"errors": [{"message": "Invalid API key"}]})

    assert parser.parse(payload, "style") == []
    assert diagnostics[0].vendor == "ssactivewear"
    assert diagnostics[0].message == "Invalid API key"


def test_message_only_object_is_an_error(parser, diagnostics):
    assert parser.parse(json.dumps({"message": "Not found"}), "style") == []
    assert diagnostics[0].message == "Not found"


def test_invalid_json_raises(parser):
    with pytest.raises(MalformedResponseError):
        parser.parse("<html>Service unavailable</html>", "style")


def test_records_aggregate_like_any_other_vendor(parser):
    payload = json.dumps([
        sku(39, "Black", "L"),
        sku(39, "Black", "XL"),
        sku(41, "Navy", "M", styleName="2000"),
    ])

    products = aggregate(parser.parse(payload, "brand"))

    assert [p.style_id for p in products] == ["39", "41"]
    assert products[0].style_name == "5000"
    assert set(products[0].sizes) == {"L", "XL"}
    assert products[0].case_size == 72
    assert products[1].style_name == "2000"
