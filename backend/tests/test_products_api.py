from conftest import put_product
from storefront.seed import SAMPLE_PRODUCTS, seed


def test_root_index(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert data["endpoints"] == {"products": "/api/products", "cart": "/api/cart"}
    assert "version" in data


def test_list_products(client, db):
    put_product(db, id="a", category="Books")
    put_product(db, id="b", category="Sports")
    r = client.get("/api/products")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["count"] == 2
    assert {p["id"] for p in body["data"]} == {"a", "b"}


def test_list_products_by_category(client, db):
    put_product(db, id="a", category="Books")
    put_product(db, id="b", category="Sports")
    r = client.get("/api/products", params={"category": "Books"})
    assert [p["id"] for p in r.json()["data"]] == ["a"]


def test_list_products_unknown_category(client):
    r = client.get("/api/products", params={"category": "Toys"})
    assert r.status_code == 400
    assert r.json()["success"] is False
    assert "Books" in r.json()["error"]


def test_get_product(client, product):
    r = client.get("/api/products/p1")
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["id"] == "p1"
    assert data["price"] == 100
    assert data["stock"] == 5


def test_get_product_404(client):
    r = client.get("/api/products/nope")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Product not found"}


def test_seed_replaces_catalog(client, db):
    put_product(db, id="stale")
    assert seed(db) == len(SAMPLE_PRODUCTS)

    ids = {p["id"] for p in client.get("/api/products").json()["data"]}
    assert ids == {p.id for p in SAMPLE_PRODUCTS}


def test_get_product_reserved_id_is_400(client):
    r = client.get("/api/products/__meta__")
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid product id"
