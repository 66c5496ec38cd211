import pandas as pd

from conftest import STYLE_OP, list_item, soap_response
from vendor_catalog.data.models.search import LookupOperation
from vendor_catalog.data.repositories.product_repository import products_to_dataframe


def test_lookup_by_style_aggregates_variants(make_repository, credentials):
    payload = soap_response(STYLE_OP, "".join([
        list_item("PC54", "Red", "S", piecePrice="3.50", casePrice="41.00"),
        list_item("PC54", "Red", "M", piecePrice="3.50", casePrice="41.00"),
        list_item("PC54", "Blue", "M", piecePrice="3.50", casePrice="41.00"),
    ]))
    repository = make_repository({STYLE_OP: payload})

    products = repository.lookup_by_style(" PC54 ", credentials)

    assert len(products) == 1
    product = products[0]
    assert product.style_id == "PC54"
    assert product.brand_name == "Port & Company"
    assert product.piece_price == 3.5
    assert product.case_price == 41.0
    assert product.case_sale_price is None
    assert product.product_image == "https://cdn.example.com/PC54.jpg"
    assert set(product.colors) == {"Red", "Blue"}
    assert set(product.sizes) == {"S", "M"}
    assert repository.connector.calls == [(STYLE_OP, {"styleId": "PC54"})]


def test_get_raw_data_returns_one_row_per_variant(make_repository, credentials):
    payload = soap_response(STYLE_OP, list_item("PC54", "Red", "S") + list_item("PC54", "Blue", "M"))
    repository = make_repository({STYLE_OP: payload})

    df = repository.get_raw_data(LookupOperation.STYLE, "PC54", credentials)

    assert isinstance(df, pd.DataFrame)
    assert len(df) == 2
    assert list(df["color"]) == ["Red", "Blue"]
    assert set(df["style_id"]) == {"PC54"}


def test_get_raw_data_is_empty_for_no_results(make_repository, credentials):
    df = make_repository().get_raw_data(LookupOperation.STYLE, "PC54", credentials)

    assert df.empty


def test_products_to_dataframe_joins_multi_valued_fields(make_repository, credentials):
    payload = soap_response(STYLE_OP, list_item("PC54", "Red", "S") + list_item("PC54", "Blue", "M"))
    products = make_repository({STYLE_OP: payload}).lookup_by_style("PC54", credentials)

    df = products_to_dataframe(products)

    assert len(df) == 1
    assert df.loc[0, "style_id"] == "PC54"
    assert df.loc[0, "colors"] == "Red, Blue"
    assert df.loc[0, "sizes"] == "S, M"


def test_products_to_dataframe_handles_no_products():
    assert products_to_dataframe([]).empty
