"""Property type -> category page mapping shared across models, forms and views.

The tables below are read-only and every lookup accepts arbitrary strings:
unknown values fall back to a documented default instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Literal, Mapping, NamedTuple, Tuple

PropertyType = Literal["residential", "commercial", "plot", "agricultural", "pg"]
CategoryPage = Literal["buy", "rent", "commercial", "agricultural", "pg"]

PROPERTY_TYPES: Tuple[str, ...] = ("residential", "commercial", "plot", "agricultural", "pg")
CATEGORY_PAGES: Tuple[str, ...] = ("buy", "rent", "commercial", "agricultural", "pg")

DEFAULT_CATEGORY_PAGE = "buy"
# Only these exact types are listed on /buy/, whatever the table says.
BUY_PAGE_PROPERTY_TYPES: Tuple[str, ...] = ("residential", "plot")


@dataclass(frozen=True)
class CategoryMapping:
    property_type: str
    category_page: str
    display_name: str
    description: str


class Subcategory(NamedTuple):
    value: str
    label: str


PROPERTY_TYPE_TO_CATEGORY: Mapping[str, CategoryMapping] = MappingProxyType(
    {
        "residential": CategoryMapping(
            property_type="residential",
            category_page="buy",
            display_name="Residential",
            description="Apartments, houses, villas, and other residential properties",
        ),
        "commercial": CategoryMapping(
            property_type="commercial",
            category_page="commercial",
            display_name="Commercial",
            description="Shops, offices, warehouses, and commercial spaces",
        ),
        "plot": CategoryMapping(
            property_type="plot",
            category_page="buy",
            display_name="Plot/Land",
            description="Residential plots, commercial plots, and land",
        ),
        "agricultural": CategoryMapping(
            property_type="agricultural",
            category_page="agricultural",
            display_name="Agricultural",
            description="Agricultural land, farms, and farmhouses",
        ),
        "pg": CategoryMapping(
            property_type="pg",
            category_page="pg",
            display_name="PG/Hostel",
            description="Paying guest accommodations and hostels",
        ),
    }
)

PROPERTY_SUBCATEGORIES: Mapping[str, Tuple[Subcategory, ...]] = MappingProxyType(
    {
        "residential": (
            Subcategory("1bhk", "1 BHK Apartment"),
            Subcategory("2bhk", "2 BHK Apartment"),
            Subcategory("3bhk", "3 BHK Apartment"),
            Subcategory("4bhk-plus", "4+ BHK Apartment"),
            Subcategory("independent-house", "Independent House"),
            Subcategory("villa", "Villa"),
            Subcategory("duplex", "Duplex"),
            Subcategory("penthouse", "Penthouse"),
        ),
        "commercial": (
            Subcategory("shop", "Shop"),
            Subcategory("office", "Office Space"),
            Subcategory("showroom", "Showroom"),
            Subcategory("warehouse", "Warehouse"),
            Subcategory("factory", "Factory"),
            Subcategory("restaurant-space", "Restaurant Space"),
        ),
        "plot": (
            Subcategory("residential-plot", "Residential Plot"),
            Subcategory("commercial-plot", "Commercial Plot"),
            Subcategory("agricultural-land", "Agricultural Land"),
            Subcategory("industrial-plot", "Industrial Plot"),
            Subcategory("farm-house", "Farm House Plot"),
        ),
        "agricultural": (
            Subcategory("agricultural-land", "Agricultural Land / Farmland"),
            Subcategory("farmhouse-with-land", "Farmhouse with Land"),
            Subcategory("orchard-plantation", "Orchard / Plantation"),
            Subcategory("dairy-farm", "Dairy Farm"),
            Subcategory("poultry-farm", "Poultry Farm"),
            Subcategory("fish-farm-pond", "Fish/Prawn Farm / Pond"),
            Subcategory("polyhouse-greenhouse", "Polyhouse / Greenhouse"),
            Subcategory("pasture-grazing", "Pasture / Grazing Land"),
            Subcategory("horticulture-land", "Horticulture Land"),
            Subcategory("vineyard", "Vineyard"),
            Subcategory("farm-plot-weekend", "Farm Plot / Weekend Farm"),
            Subcategory("agri-cold-storage", "Agri Storage Shed / Cold Storage"),
        ),
        "pg": (
            Subcategory("boys-hostel", "Boys Hostel"),
            Subcategory("girls-hostel", "Girls Hostel"),
            Subcategory("co-living", "Co-Living Space"),
            Subcategory("shared-apartment", "Shared Apartment"),
        ),
    }
)

PROPERTY_TYPE_CHOICES = [
    (key, mapping.display_name) for key, mapping in PROPERTY_TYPE_TO_CATEGORY.items()
]

CATEGORY_PAGE_TITLES: Mapping[str, str] = MappingProxyType(
    {
        "buy": "Buy",
        "rent": "Rent",
        "commercial": "Commercial",
        "agricultural": "Agricultural",
        "pg": "PG/Hostel",
    }
)

CATEGORY_PAGE_CHOICES = [(page, CATEGORY_PAGE_TITLES[page]) for page in CATEGORY_PAGES]


def is_property_type(value) -> bool:
    return value in PROPERTY_TYPE_TO_CATEGORY


def is_category_page(value) -> bool:
    return value in CATEGORY_PAGES


def get_category_page_for_property_type(property_type: str) -> CategoryPage:
    """Return the category page for ``property_type``, ``"buy"`` if unknown."""

    mapping = PROPERTY_TYPE_TO_CATEGORY.get(property_type)
    if mapping is None:
        return DEFAULT_CATEGORY_PAGE
    return mapping.category_page


def get_property_type_display_name(property_type: str) -> str:
    """Return the human label for ``property_type``; unknown values are echoed back."""

    mapping = PROPERTY_TYPE_TO_CATEGORY.get(property_type)
    if mapping is None:
        return property_type
    return mapping.display_name


def get_sub_categories_for_property_type(property_type: str) -> Tuple[Subcategory, ...]:
    return PROPERTY_SUBCATEGORIES.get(property_type, ())


def is_valid_subcategory(property_type: str, value: str) -> bool:
    return any(sub.value == value for sub in get_sub_categories_for_property_type(property_type))


def get_subcategory_label(property_type: str, value: str) -> str:
    for sub in get_sub_categories_for_property_type(property_type):
        if sub.value == value:
            return sub.label
    return value


def should_display_property_on_page(property_type: str, current_page: CategoryPage) -> bool:
    """Decide whether a listing of ``property_type`` belongs on ``current_page``.

    The buy page is an allow-list of exact type names, so an unknown type is
    not shown there even though it resolves to ``"buy"`` by default. Every
    other page compares against the resolved category page.
    """

    category_page = get_category_page_for_property_type(property_type)

    if current_page == "buy":
        return property_type in BUY_PAGE_PROPERTY_TYPES

    return category_page == current_page


def get_property_types_for_category_page(category_page: CategoryPage) -> List[PropertyType]:
    """Return the property types listed on ``category_page`` in declaration order."""

    types = [
        key
        for key, mapping in PROPERTY_TYPE_TO_CATEGORY.items()
        if mapping.category_page == category_page
    ]

    # buy always lists residential and plot, regardless of the table.
    if category_page == "buy":
        return list(BUY_PAGE_PROPERTY_TYPES)

    return types
