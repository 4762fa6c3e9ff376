"""
Tests for the /v1/categories/{categoryId}/attributes endpoints.
"""

import pytest


@pytest.fixture
def attribute(create_attribute):
    return create_attribute()


@pytest.fixture
def assign(client):
    def _assign(category_id: str, attribute_id: str, **fields):
        return client.post(
            f"/v1/categories/{category_id}/attributes",
            json={"attributeId": attribute_id, **fields},
        )

    return _assign


def test_assign(assign, attribute):
    response = assign("shoes", attribute["id"], required=True, filterable=False)

    assert response.status_code == 200
    data = response.json()
    assert data["version"] == 1
    assert data["categoryId"] == "shoes"
    assert data["attributeId"] == attribute["id"]
    assert data["required"] is True
    assert data["filterable"] is False
    assert data["searchable"] is None
    assert data["enabled"] is True


def test_assign_unknown_attribute_is_404(assign, client):
    response = assign("shoes", "no-such-attribute")

    assert response.status_code == 404
    assert client.get("/v1/categories/shoes/attributes").json()["total"] == 0


def test_assign_twice_is_409(assign, attribute):
    assert assign("shoes", attribute["id"]).status_code == 200

    response = assign("shoes", attribute["id"])

    assert response.status_code == 409
    assert response.json()["code"] == "ALREADY_ASSIGNED"


def test_assign_negative_sort_order_is_400(assign, attribute):
    response = assign("shoes", attribute["id"], sortOrder=-1)

    assert response.status_code == 400
    assert response.json()["detail"] == "sortOrder cannot be negative"


def test_update_assignment(assign, attribute, client):
    assigned = assign("shoes", attribute["id"]).json()

    response = client.put(
        "/v1/categories/shoes/attributes",
        json={"id": assigned["id"], "version": 1, "required": True, "searchable": True},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["version"] == 2
    assert data["required"] is True
    assert data["searchable"] is True
    assert data["filterable"] is None


def test_update_stale_version_is_412(assign, attribute, client):
    assigned = assign("shoes", attribute["id"]).json()
    body = {"id": assigned["id"], "version": 1, "sortOrder": 3}
    assert client.put("/v1/categories/shoes/attributes", json=body).status_code == 200

    response = client.put("/v1/categories/shoes/attributes", json=body)

    assert response.status_code == 412


def test_update_through_other_category_is_404(assign, attribute, client):
    assigned = assign("shoes", attribute["id"]).json()

    response = client.put(
        "/v1/categories/shirts/attributes", json={"id": assigned["id"], "version": 1}
    )

    assert response.status_code == 404


def test_unassign(assign, attribute, client):
    assigned = assign("shoes", attribute["id"]).json()

    response = client.delete(f"/v1/categories/shoes/attributes/{assigned['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/v1/categories/shoes/attributes").json()["total"] == 0
    # The attribute can be assigned again once unassigned
    assert assign("shoes", attribute["id"]).status_code == 200


def test_unassign_missing_is_404(client):
    response = client.delete("/v1/categories/shoes/attributes/nothing-here")

    assert response.status_code == 404


def test_unassign_through_other_category_is_404(assign, attribute, client):
    assigned = assign("shoes", attribute["id"]).json()

    response = client.delete(f"/v1/categories/shirts/attributes/{assigned['id']}")

    assert response.status_code == 404
    assert client.get("/v1/categories/shoes/attributes").json()["total"] == 1


def test_list_scoped_to_category_and_filtered(assign, create_attribute, client):
    color = create_attribute()
    size = create_attribute(name="Size", slug="size", options=[])
    weight = create_attribute(name="Weight", slug="weight", type="range", options=[])
    assign("shoes", color["id"], filterable=True, sortOrder=2)
    assign("shoes", size["id"], filterable=False, sortOrder=1)
    assign("shoes", weight["id"], enabled=False)
    assign("shirts", color["id"])

    everything = client.get("/v1/categories/shoes/attributes").json()
    filterable = client.get(
        "/v1/categories/shoes/attributes", params={"filterable": "true"}
    ).json()
    disabled = client.get("/v1/categories/shoes/attributes", params={"enabled": "false"}).json()
    descending = client.get(
        "/v1/categories/shoes/attributes", params={"sort": "sortOrder", "order": "desc"}
    ).json()

    assert [i["attributeId"] for i in everything["items"]] == [weight["id"], size["id"], color["id"]]
    assert everything["total"] == 3
    assert [i["attributeId"] for i in filterable["items"]] == [color["id"]]
    assert [i["attributeId"] for i in disabled["items"]] == [weight["id"]]
    assert [i["attributeId"] for i in descending["items"]] == [color["id"], size["id"], weight["id"]]


def test_list_rejects_name_sort(client):
    response = client.get("/v1/categories/shoes/attributes", params={"sort": "name"})

    assert response.status_code == 422


def test_page_above_limit_is_422(client):
    response = client.get("/v1/categories/shoes/attributes", params={"page": 10**17})

    assert response.status_code == 422
