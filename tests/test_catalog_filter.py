from decimal import Decimal

from storefront.models.catalog_models import Brand, Category, Product
from storefront.schemas.product_schemas import CatalogProduct
from storefront.services.catalog_service import ALL, filter_products, get_filter_options, list_catalog

PRODUCTS = [
    CatalogProduct(id=1, name="Brake Disc", brand="BMW", category="Brakes", price=Decimal("80")),
    CatalogProduct(id=2, name="Air Filter", brand="Audi", category="Engine", price=Decimal("25")),
    CatalogProduct(id=3, name="Brake Pads", brand="Audi", category="Brakes", price=Decimal("40")),
    CatalogProduct(id=4, name="Spark Plug", brand="", category="", price=Decimal("5")),
]


def ids(products):
    return [p.id for p in products]


def test_no_filters_returns_everything():
    assert ids(filter_products(PRODUCTS)) == [1, 2, 3, 4]
    assert ids(filter_products(PRODUCTS, "", ALL, ALL)) == [1, 2, 3, 4]


def test_search_matches_name_case_insensitively():
    assert ids(filter_products(PRODUCTS, search="bRaKe")) == [1, 3]


def test_search_matches_brand():
    assert ids(filter_products(PRODUCTS, search="audi")) == [2, 3]


def test_category_filter_is_exact():
    assert ids(filter_products(PRODUCTS, category="Brakes")) == [1, 3]
    assert ids(filter_products(PRODUCTS, category="brakes")) == []


def test_brand_filter_is_exact():
    assert ids(filter_products(PRODUCTS, brand="BMW")) == [1]


def test_filters_combine():
    assert ids(filter_products(PRODUCTS, search="brake", category="Brakes", brand="Audi")) == [3]
    assert ids(filter_products(PRODUCTS, search="filter", category="Brakes")) == []


def test_result_keeps_input_order():
    reversed_products = list(reversed(PRODUCTS))
    assert ids(filter_products(reversed_products, search="brake")) == [3, 1]


async def test_filter_options_lead_with_all(db):
    db.add_all([Brand(name="VW"), Brand(name="Audi"), Category(name="Brakes")])
    await db.commit()

    options = await get_filter_options(db)
    assert options.brands == [ALL, "Audi", "VW"]
    assert options.categories == [ALL, "Brakes"]


async def test_list_catalog_filters_stored_products(db):
    bmw = Brand(name="BMW")
    brakes = Category(name="Brakes")
    db.add_all([
        Product(name="Brake Disc", price=Decimal("80.00"), brand=bmw, category=brakes),
        Product(name="Wiper Blade", price=Decimal("12.00")),
    ])
    await db.commit()

    result = await list_catalog(db, search="disc")
    assert result.total == 1
    assert result.data[0].brand == "BMW"
    assert result.data[0].category == "Brakes"

    everything = await list_catalog(db)
    assert [p.name for p in everything.data] == ["Brake Disc", "Wiper Blade"]
    assert everything.data[1].brand == ""
