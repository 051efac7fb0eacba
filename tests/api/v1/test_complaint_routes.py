def _payload(category_id, **overrides):
    payload = {
        "category_id": category_id,
        "subcategory": "Missed Collection",
        "address": "Plot 14, Trimurti Nagar",
        "description": "No pickup since Monday",
    }
    payload.update(overrides)
    return payload


def test_submit_complaint_without_login_is_rejected(client, make_category):
    category_id = make_category()

    response = client.post("/api/v1/complaints", json=_payload(category_id))

    assert response.status_code == 401
    assert response.json()["code"] == "login_required"


def test_submit_complaint_without_selection(client, login, make_category):
    login()
    make_category()

    response = client.post("/api/v1/complaints", json=_payload(None))

    assert response.status_code == 422
    assert response.json() == {
        "error": "Please select a category and subcategory.",
        "code": "selection_required",
    }


def test_submit_and_list_my_complaints(client, login, make_category):
    category_id = make_category()
    login("user-1")
    created = client.post("/api/v1/complaints", json=_payload(category_id))
    assert created.status_code == 201
    assert created.json()["status"] == "pending"

    login("user-2")
    client.post("/api/v1/complaints", json=_payload(category_id, subcategory="Garbage Overflow"))

    login("user-1")
    response = client.get("/api/v1/complaints/mine")

    assert response.status_code == 200
    body = response.json()
    assert [c["id"] for c in body] == [created.json()["id"]]
    assert body[0]["subcategory"] == "Missed Collection"


def test_complaint_categories_are_public(client, make_category):
    make_category(name="Public Hygiene", subcategories=["Public Toilet Issue", "Street Sweeping"])

    response = client.get("/api/v1/complaint-categories")

    assert response.status_code == 200
    assert response.json()[0]["subcategories"] == ["Public Toilet Issue", "Street Sweeping"]


def test_missing_required_field_uses_error_body(client, login, make_category):
    login()
    category_id = make_category()
    payload = _payload(category_id)
    del payload["address"]

    response = client.post("/api/v1/complaints", json=payload)

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "validation_error"
    assert body["error"].startswith("address:")
    assert "detail" not in body
