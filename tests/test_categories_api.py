def test_create_list_delete_category(client):
    r = client.post("/api/categories", json={"name": "Shoes"})
    assert r.status_code == 201
    cat = r.json()
    assert set(cat) == {"id", "name"}
    assert client.get("/api/categories").json() == [cat]

    assert client.delete(f"/api/categories/{cat['id']}").status_code == 204
    assert client.get("/api/categories").json() == []


def test_category_name_required(client):
    r = client.post("/api/categories", json={})
    assert r.status_code == 400
    assert r.json() == {"error": "name required"}
    assert client.post("/api/categories", json={"name": ""}).status_code == 400


def test_category_names_unique_ignoring_case(client):
    assert client.post("/api/categories", json={"name": "Shoes"}).status_code == 201
    r = client.post("/api/categories", json={"name": "SHOES"})
    assert r.status_code == 409
    assert r.json() == {"error": "category exists"}


def test_delete_unknown_category(client):
    r = client.delete("/api/categories/missing")
    assert r.status_code == 404
    assert r.json() == {"error": "not found"}


def test_delete_category_in_use_leaves_product(client):
    cat = client.post("/api/categories", json={"name": "Shoes"}).json()
    product = client.post("/api/products", json={"title": "Boot", "category": cat["id"]}).json()
    assert client.delete(f"/api/categories/{cat['id']}").status_code == 204
    assert client.get("/api/products").json() == [product]
