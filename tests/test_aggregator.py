from vendor_catalog.aggregation.aggregator import ProductAggregator, aggregate


def record(style, color=None, size=None, **fields):
    out = {"style_id": style}
    if color is not None:
        out["color"] = color
    if size is not None:
        out["size"] = size
    out.update(fields)
    return out


def test_groups_six_records_into_two_products():
    records = [
        record("PC54", "Red", "S"),
        record("PC54", "Red", "M"),
        record("PC54", "Blue", "M"),
        record("5000", "Black", "L"),
        record("5000", "Black", "L"),
        record("5000", "Black", "XL"),
    ]

    products = aggregate(records)

    assert [p.style_id for p in products] == ["PC54", "5000"]
    assert set(products[0].colors) == {"Red", "Blue"}
    assert set(products[0].sizes) == {"S", "M"}
    assert set(products[1].colors) == {"Black"}
    assert set(products[1].sizes) == {"L", "XL"}


def test_colors_and_sizes_are_the_union_per_style():
    records = [
        record("A", "Red", "S"),
        record("B", "Navy", "XL"),
        record("A", "Green", "M"),
        record("B", "Navy", "2XL"),
        record("A", "Red", "S"),
    ]

    by_style = {p.style_id: p for p in aggregate(records)}

    for style_id, product in by_style.items():
        expected_colors = {r["color"] for r in records if r["style_id"] == style_id}
        expected_sizes = {r["size"] for r in records if r["style_id"] == style_id}
        assert set(product.colors) == expected_colors
        assert set(product.sizes) == expected_sizes
        assert len(product.colors) == len(expected_colors)
        assert len(product.sizes) == len(expected_sizes)


def test_bound_skips_new_styles_but_keeps_merging_admitted_ones():
    records = [
        record("A", "Red", "S"),
        record("B", "Blue", "M"),
        record("C", "Green", "L"),   # bound reached; C never opens
        record("A", "White", "XL"),  # admitted style keeps merging
        record("C", "Black", "S"),
        record("B", "Blue", "2XL"),
    ]

    products = aggregate(records, max_products=2)

    assert [p.style_id for p in products] == ["A", "B"]
    assert set(products[0].colors) == {"Red", "White"}
    assert set(products[0].sizes) == {"S", "XL"}
    assert set(products[1].sizes) == {"M", "2XL"}


def test_bound_larger_than_styles_returns_everything():
    records = [record("A", "Red", "S"), record("B", "Blue", "M")]
    assert len(aggregate(records, max_products=50)) == 2


def test_records_without_style_are_dropped():
    records = [
        {"color": "Red", "size": "S"},
        record("", "Blue", "M"),
        record("A", "Green", "L"),
    ]

    products = aggregate(records)

    assert [p.style_id for p in products] == ["A"]
    assert products[0].colors == ["Green"]


def test_dropped_records_do_not_count_toward_the_bound():
    records = [{"color": "Red"}, record("A", "Red", "S"), record("B", "Blue", "M")]
    assert [p.style_id for p in aggregate(records, max_products=2)] == ["A", "B"]


def test_empty_input_yields_empty_output():
    assert aggregate([]) == []
    assert aggregate([], max_products=5) == []


def test_aggregation_is_idempotent():
    records = [
        record("PC54", "Red", "S", brand_name="Port & Company"),
        record("5000", "Black", "L", brand_name="Gildan"),
        record("PC54", "Blue", "M", brand_name="Port & Company"),
    ]

    first = aggregate(records)
    second = aggregate(records)

    assert first == second
    assert [p.style_id for p in first] == [p.style_id for p in second]


def test_scalars_come_from_first_record_of_style():
    records = [
        record("PC54", "Red", "S", brand_name="Port & Company", title="Core Cotton Tee", piece_price="3.50"),
        record("PC54", "Blue", "M", brand_name="Other", title="Other title", piece_price="9.99"),
    ]

    product = aggregate(records)[0]

    assert product.brand_name == "Port & Company"
    assert product.title == "Core Cotton Tee"
    assert product.piece_price == 3.5


def test_missing_pricing_is_unset_not_zero():
    product = aggregate([record("PC54", "Red", "S", case_price="41.00", case_size="72")])[0]

    assert product.case_price == 41.0
    assert product.case_size == 72
    assert product.case_sale_price is None
    assert product.piece_price is None
    assert product.dozen_sale_price is None


def test_unparseable_numbers_become_none():
    product = aggregate([record("PC54", case_price="call for price", case_size="n/a")])[0]

    assert product.case_price is None
    assert product.case_size is None


def test_style_ids_are_normalized_to_strings():
    products = aggregate([{"style_id": 39, "color": "White", "size": "S"}, {"style_id": "39", "size": "M"}])

    assert len(products) == 1
    assert products[0].style_id == "39"
    assert products[0].style_name == "39"
    assert products[0].sizes == ["S", "M"]


def test_aggregator_instances_hold_no_state_between_calls():
    aggregator = ProductAggregator()
    aggregator.aggregate([record("A", "Red", "S")])

    products = aggregator.aggregate([record("B", "Blue", "M")])

    assert [p.style_id for p in products] == ["B"]
