# tests/test_products.py
AUTH = {"Authorization": "Bearer test-token"}


def create(client, **fields):
    r = client.post("/products", json=fields, headers=AUTH)
    assert r.status_code == 201, r.text
    return r.json()["product"]


def count(client):
    return client.get("/products").json()["count"]


def test_create_returns_201_with_fresh_id(client):
    seen = set()
    for i in range(5):
        r = client.post("/products", json={"name": f"Item {i}", "price": 10 + i}, headers=AUTH)
        assert r.status_code == 201
        body = r.json()
        assert body["message"] == "Product created successfully"
        pid = body["product"]["id"]
        assert pid
        assert pid not in seen
        seen.add(pid)


def test_get_after_create_returns_supplied_fields(client):
    p = create(client, name="Mug", price=12.5, description="Ceramic", category="Kitchen")

    r = client.get(f"/products/{p['id']}")
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == p["id"]
    assert body["name"] == "Mug"
    assert body["price"] == 12.5
    assert body["description"] == "Ceramic"
    assert body["category"] == "Kitchen"
    assert body["inStock"] is True


def test_create_keeps_explicit_out_of_stock(client):
    p = create(client, name="Kettle", price=30, inStock=False)
    assert p["inStock"] is False


def test_create_ignores_client_supplied_id(client):
    p = create(client, id="mine", name="Spoon", price=2)
    assert p["id"] != "mine"
    assert client.get("/products/mine").status_code == 404


def test_list_preserves_insertion_order(client):
    names = ["b", "a", "c"]
    for n in names:
        create(client, name=n, price=1)
    body = client.get("/products").json()
    assert body["count"] == 3
    assert [p["name"] for p in body["products"]] == names


def test_update_price_changes_only_price(client):
    p = create(client, name="Laptop", price=1500, description="Fast", category="Electronics")

    r = client.put(f"/products/{p['id']}", json={"price": 999, "id": "hijacked"}, headers=AUTH)
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Product updated successfully"
    updated = body["product"]
    assert updated == {**p, "price": 999}

    assert client.get(f"/products/{p['id']}").json() == updated
    assert client.get("/products/hijacked").status_code == 404


def test_update_in_stock_false_overwrites(client):
    p = create(client, name="Phone", price=800)
    r = client.put(f"/products/{p['id']}", json={"inStock": False}, headers=AUTH)
    assert r.status_code == 200
    assert r.json()["product"]["inStock"] is False


def test_update_unknown_product_is_404(client):
    r = client.put("/products/nope", json={"price": 5}, headers=AUTH)
    assert r.status_code == 404
    assert r.json()["message"] == "Product with ID nope does not exist"


def test_update_with_bad_field_is_400_and_unchanged(client):
    p = create(client, name="Chair", price=40)
    r = client.put(f"/products/{p['id']}", json={"price": "cheap"}, headers=AUTH)
    assert r.status_code == 400
    assert r.json()["field"] == "price"
    assert client.get(f"/products/{p['id']}").json()["price"] == 40


def test_update_with_overflowing_price_is_400_and_unchanged(client):
    p = create(client, name="Chair", price=40)
    r = client.put(
        f"/products/{p['id']}",
        content=b'{"price": 1e999}',
        headers={**AUTH, "Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json()["field"] == "price"
    assert client.get(f"/products/{p['id']}").json()["price"] == 40


def test_delete_then_get_is_404(client):
    p = create(client, name="Lamp", price=20)

    r = client.delete(f"/products/{p['id']}", headers=AUTH)
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Product deleted successfully"
    assert body["product"] == p

    r = client.get(f"/products/{p['id']}")
    assert r.status_code == 404
    assert r.json()["error"] == "Product not found"
    assert client.delete(f"/products/{p['id']}", headers=AUTH).status_code == 404


def test_create_without_price_is_400_and_collection_unchanged(client):
    create(client, name="Existing", price=1)
    before = count(client)

    r = client.post("/products", json={"name": "X"}, headers=AUTH)
    assert r.status_code == 400
    body = r.json()
    assert body["field"] == "price"
    assert body["message"] == "price is required"
    assert count(client) == before


def test_filter_by_category_is_case_insensitive(client):
    create(client, name="TV", price=400, category="Electronics")
    create(client, name="Radio", price=40, category="electronics")
    create(client, name="Pan", price=25, category="Kitchen")
    create(client, name="Mystery", price=5)

    body = client.get("/products", params={"category": "ELECTRONICS"}).json()
    assert body["count"] == 2
    assert {p["name"] for p in body["products"]} == {"TV", "Radio"}

    body = client.get("/products", params={"category": "Nonexistent"}).json()
    assert body == {"count": 0, "products": []}


def test_filter_by_in_stock(client):
    create(client, name="A", price=1, inStock=True)
    create(client, name="B", price=1, inStock=False)

    in_stock = client.get("/products?inStock=true").json()["products"]
    out_of_stock = client.get("/products?inStock=false").json()["products"]
    assert [p["name"] for p in in_stock] == ["A"]
    assert [p["name"] for p in out_of_stock] == ["B"]


def test_filters_combine(client):
    create(client, name="A", price=1, category="x", inStock=True)
    create(client, name="B", price=1, category="x", inStock=False)
    create(client, name="C", price=1, category="y", inStock=True)

    body = client.get("/products?category=X&inStock=true").json()
    assert [p["name"] for p in body["products"]] == ["A"]


def test_empty_category_filter_is_ignored(client):
    create(client, name="A", price=1, category="x")
    create(client, name="B", price=1)
    assert client.get("/products?category=").json()["count"] == 2


def test_sample_data_is_seeded(make_client):
    client = make_client(seed_sample_data=True)
    body = client.get("/products").json()
    assert body["count"] == 3
    assert [p["name"] for p in body["products"]] == ["Laptop", "Smartphone", "Coffee Maker"]
    kitchen = client.get("/products?category=kitchen").json()["products"]
    assert kitchen[0]["inStock"] is False


def test_index_lists_endpoints(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "POST /products" in r.json()["endpoints"]


def test_create_with_overflowing_price_is_400_and_collection_unchanged(client):
    before = count(client)
    r = client.post(
        "/products",
        content=b'{"name": "X", "price": 1e999}',
        headers={**AUTH, "Content-Type": "application/json"},
    )
    assert r.status_code == 400
    body = r.json()
    assert body["field"] == "price"
    assert body["message"] == "price must be a positive number"
    assert count(client) == before
