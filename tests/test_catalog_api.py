def test_list_active_products_paginated(anon_client, make_product):
    for name in ("A", "B", "C"):
        make_product(name)
    make_product("Hidden", is_active=False)

    response = anon_client.get("/api/products", params={"active": "true", "page": 1, "pageSize": 1})
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["pageSize"] == 1
    assert [p["name"] for p in body["products"]] == ["A"]


def test_list_products_defaults(anon_client, make_product):
    make_product("A")
    make_product("Hidden", is_active=False)

    body = anon_client.get("/api/products").json()
    assert body["total"] == 2
    assert body["pageSize"] == 10


def test_page_size_is_capped(anon_client, make_product):
    make_product("A")
    body = anon_client.get("/api/products", params={"pageSize": 1000}).json()
    assert body["pageSize"] == 100


def test_out_of_range_page(anon_client, make_product):
    make_product("A")
    body = anon_client.get("/api/products", params={"page": 9}).json()
    assert body["products"] == []
    assert body["total"] == 1


def test_invalid_page(anon_client):
    response = anon_client.get("/api/products", params={"page": 0})
    assert response.status_code == 400


def test_catalogue_hides_download_details(anon_client, make_product):
    product = make_product()

    listed = anon_client.get("/api/products").json()["products"][0]
    detail = anon_client.get(f"/api/products/{product.id}").json()["product"]

    for item in (listed, detail):
        assert "zipPassword" not in item
        assert "downloadLink" not in item
        assert item["shortDescription"] == product.short_description


def test_product_with_plans(anon_client, make_product, make_plan):
    product = make_product()
    monthly = make_plan(product)
    make_plan(make_product("Other"))

    response = anon_client.get(f"/api/products/{product.id}")
    assert response.status_code == 200
    body = response.json()
    assert body["product"]["id"] == product.id
    assert [plan["id"] for plan in body["plans"]] == [monthly.id]
    assert body["plans"][0]["interval"] == "month"
    assert body["plans"][0]["productId"] == product.id

    plans = anon_client.get(f"/api/products/{product.id}/plans").json()
    assert [plan["id"] for plan in plans] == [monthly.id]


def test_product_without_plans(anon_client, make_product):
    product = make_product()
    body = anon_client.get(f"/api/products/{product.id}").json()
    assert body["plans"] == []


def test_missing_product(anon_client):
    response = anon_client.get("/api/products/999")
    assert response.status_code == 404
    assert response.json() == {"message": "Product not found"}


def test_get_plan(anon_client, make_product, make_plan):
    plan = make_plan(make_product())
    assert anon_client.get(f"/api/subscription-plans/{plan.id}").json()["name"] == "Monthly"
    assert anon_client.get("/api/subscription-plans/999").status_code == 404


def test_product_admin_crud(admin_client):
    response = admin_client.post("/api/products", json={
        "name": "Vault",
        "description": "Secrets manager",
        "shortDescription": "Secrets",
        "platforms": ["Linux"],
        "zipPassword": "pw",
    })
    assert response.status_code == 201
    product = response.json()
    assert product["zipPassword"] == "pw"
    assert product["isActive"] is True

    response = admin_client.patch(f"/api/products/{product['id']}", json={"isActive": False, "name": None})
    assert response.status_code == 200
    assert response.json()["isActive"] is False
    assert response.json()["name"] == "Vault"

    response = admin_client.delete(f"/api/products/{product['id']}")
    assert response.json() == {"message": "Product deleted successfully"}
    assert admin_client.delete(f"/api/products/{product['id']}").status_code == 404


def test_plan_admin_crud(admin_client, make_product):
    product = make_product()

    response = admin_client.post("/api/subscription-plans", json={
        "productId": product.id,
        "name": "Monthly",
        "price": 999,
        "priceCrypto": 5,
        "interval": "month",
    })
    assert response.status_code == 201
    plan = response.json()
    assert plan["cryptoCurrency"] == "ETH"

    response = admin_client.patch(f"/api/subscription-plans/{plan['id']}", json={"price": 1299})
    assert response.json()["price"] == 1299

    assert admin_client.delete(f"/api/subscription-plans/{plan['id']}").status_code == 200


def test_plan_rejects_unknown_interval_and_product(admin_client, make_product):
    product = make_product()
    base = {"productId": product.id, "name": "Weekly", "price": 100, "priceCrypto": 1}

    assert admin_client.post("/api/subscription-plans", json=dict(base, interval="week")).status_code == 400
    response = admin_client.post("/api/subscription-plans", json=dict(base, interval="month", productId=999))
    assert response.status_code == 404


def test_catalogue_writes_require_admin(anon_client, client, make_product):
    product = make_product()
    payload = {"name": "X", "description": "x", "shortDescription": "x"}

    assert anon_client.post("/api/products", json=payload).status_code == 401
    assert client.post("/api/products", json=payload).status_code == 403
    assert client.patch(f"/api/products/{product.id}", json={"name": "Y"}).status_code == 403
    assert client.delete(f"/api/products/{product.id}").status_code == 403


def test_patch_null_clears_download_details(admin_client, storage, make_product):
    product = make_product()

    response = admin_client.patch(f"/api/products/{product.id}", json={"downloadLink": None, "name": None})
    assert response.status_code == 200
    body = response.json()
    assert body["downloadLink"] is None
    assert body["zipPassword"] == "zip-secret"
    assert body["name"] == product.name
    assert storage.get_product(product.id).download_link is None
