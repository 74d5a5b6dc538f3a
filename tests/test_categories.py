import pytest

from listings.categories import (
    CATEGORY_PAGE_CHOICES,
    CATEGORY_PAGES,
    PROPERTY_SUBCATEGORIES,
    PROPERTY_TYPE_CHOICES,
    PROPERTY_TYPE_TO_CATEGORY,
    PROPERTY_TYPES,
    Subcategory,
    get_category_page_for_property_type,
    get_property_type_display_name,
    get_property_types_for_category_page,
    get_sub_categories_for_property_type,
    get_subcategory_label,
    is_valid_subcategory,
    should_display_property_on_page,
)


@pytest.mark.parametrize(
    "property_type, page, display_name",
    [
        ("residential", "buy", "Residential"),
        ("commercial", "commercial", "Commercial"),
        ("plot", "buy", "Plot/Land"),
        ("agricultural", "agricultural", "Agricultural"),
        ("pg", "pg", "PG/Hostel"),
    ],
)
def test_known_types_resolve_to_recorded_values(property_type, page, display_name):
    assert get_category_page_for_property_type(property_type) == page
    assert get_property_type_display_name(property_type) == display_name


def test_tables_are_total_and_in_declaration_order():
    assert list(PROPERTY_TYPE_TO_CATEGORY) == list(PROPERTY_TYPES)
    assert list(PROPERTY_SUBCATEGORIES) == list(PROPERTY_TYPES)
    for key, mapping in PROPERTY_TYPE_TO_CATEGORY.items():
        assert mapping.property_type == key
        assert mapping.category_page in CATEGORY_PAGES
    assert [value for value, _ in PROPERTY_TYPE_CHOICES] == list(PROPERTY_TYPES)
    assert [value for value, _ in CATEGORY_PAGE_CHOICES] == list(CATEGORY_PAGES)


def test_unknown_type_fallbacks_differ_per_lookup():
    assert get_category_page_for_property_type("bogus") == "buy"
    assert get_property_type_display_name("bogus") == "bogus"
    assert get_property_type_display_name("") == ""
    assert list(get_sub_categories_for_property_type("bogus")) == []


def test_pg_subcategories():
    subs = get_sub_categories_for_property_type("pg")
    assert len(subs) == 4
    assert subs[0] == Subcategory(value="boys-hostel", label="Boys Hostel")
    assert subs[0]._asdict() == {"value": "boys-hostel", "label": "Boys Hostel"}


def test_subcategory_counts_and_display_order():
    counts = {key: len(subs) for key, subs in PROPERTY_SUBCATEGORIES.items()}
    assert counts == {
        "residential": 8,
        "commercial": 6,
        "plot": 5,
        "agricultural": 12,
        "pg": 4,
    }
    assert [sub.value for sub in PROPERTY_SUBCATEGORIES["residential"]][:3] == [
        "1bhk",
        "2bhk",
        "3bhk",
    ]
    assert PROPERTY_SUBCATEGORIES["agricultural"][-1].value == "agri-cold-storage"


def test_subcategory_values_unique_within_type_only():
    for subs in PROPERTY_SUBCATEGORIES.values():
        values = [sub.value for sub in subs]
        assert len(values) == len(set(values))
    assert is_valid_subcategory("plot", "agricultural-land")
    assert is_valid_subcategory("agricultural", "agricultural-land")
    assert get_subcategory_label("plot", "agricultural-land") == "Agricultural Land"
    assert (
        get_subcategory_label("agricultural", "agricultural-land")
        == "Agricultural Land / Farmland"
    )


def test_subcategory_helpers_on_unknown_input():
    assert not is_valid_subcategory("pg", "villa")
    assert not is_valid_subcategory("bogus", "villa")
    assert get_subcategory_label("bogus", "villa") == "villa"


@pytest.mark.parametrize(
    "property_type, page, expected",
    [
        ("residential", "buy", True),
        ("plot", "buy", True),
        ("commercial", "buy", False),
        ("agricultural", "buy", False),
        ("pg", "buy", False),
        ("bogus", "buy", False),
        ("agricultural", "agricultural", True),
        ("commercial", "commercial", True),
        ("pg", "pg", True),
        ("residential", "rent", False),
        ("residential", "commercial", False),
        ("bogus", "commercial", False),
    ],
)
def test_should_display_property_on_page(property_type, page, expected):
    assert should_display_property_on_page(property_type, page) is expected


def test_property_types_for_category_page():
    assert get_property_types_for_category_page("buy") == ["residential", "plot"]
    assert get_property_types_for_category_page("pg") == ["pg"]
    assert get_property_types_for_category_page("commercial") == ["commercial"]
    assert get_property_types_for_category_page("agricultural") == ["agricultural"]
    assert get_property_types_for_category_page("rent") == []
    assert get_property_types_for_category_page("bogus") == []


def test_buy_override_returns_a_fresh_list():
    first = get_property_types_for_category_page("buy")
    first.append("pg")
    assert get_property_types_for_category_page("buy") == ["residential", "plot"]


def test_lookups_are_idempotent():
    for property_type in list(PROPERTY_TYPES) + ["bogus"]:
        assert get_category_page_for_property_type(
            property_type
        ) == get_category_page_for_property_type(property_type)
        assert list(get_sub_categories_for_property_type(property_type)) == list(
            get_sub_categories_for_property_type(property_type)
        )
    for page in CATEGORY_PAGES:
        assert get_property_types_for_category_page(
            page
        ) == get_property_types_for_category_page(page)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        PROPERTY_TYPE_TO_CATEGORY["villa"] = PROPERTY_TYPE_TO_CATEGORY["residential"]
    with pytest.raises(TypeError):
        PROPERTY_SUBCATEGORIES["pg"] = ()
