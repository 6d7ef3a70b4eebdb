from vibecart.crud.productService import ProductService, SAMPLE_PRODUCTS


def test_list_products_returns_seeded_catalog(client):
    response = client.get("/api/products")

    assert response.status_code == 200
    body = response.json()
    assert sorted(p["name"] for p in body) == sorted(p["name"] for p in SAMPLE_PRODUCTS)
    for product in body:
        assert product["_id"]
        assert product["price"] >= 0
        assert set(product) >= {"name", "price", "description", "image", "category"}


def test_list_products_filters_by_category(client):
    response = client.get("/api/products", params={"category": "Electronics"})

    assert response.status_code == 200
    assert {p["name"] for p in response.json()} == {
        "Wireless Bluetooth Headphones",
        "Smart Fitness Watch",
    }


def test_seed_is_skipped_when_catalog_is_not_empty(client):
    inserted = client.portal.call(ProductService.seed_products)

    assert inserted == 0
    assert len(client.get("/api/products").json()) == len(SAMPLE_PRODUCTS)
