def test_list_attributes(client):
    response = client.get("/api/v1/attributes")
    assert response.status_code == 200

    data = response.get_json()
    assert data["total"] == 8
    by_code = {a["attribute_code"]: a for a in data["attributes"]}
    assert by_code["price"]["field_type"] == "double"
    assert by_code["news_from_date"]["field_type"] == "date"
    assert by_code["color"]["field_options"] == {
        "isSearchable": True,
        "isFilterable": True,
        "isFilterableInSearch": True,
        "searchWeight": 2.0,
    }
    assert "options" not in by_code["name"]


def test_get_attribute_for_store(client):
    response = client.get("/api/v1/attributes/3?store_id=1")
    assert response.status_code == 200

    data = response.get_json()
    assert data["attribute_code"] == "color"
    assert data["frontend_label"] == "Couleur"
    assert data["field_type"] == "integer"
    assert data["option_text_field"] == "option_text_color"
    assert [o["label"] for o in data["options"]] == ["Rouge", "Bleu", "Green"]


def test_get_unknown_attribute(client):
    response = client.get("/api/v1/attributes/999")
    assert response.status_code == 404
    assert "error" in response.get_json()


def test_preview_index_value(client):
    response = client.post("/api/v1/attributes/3/index-value",
                           json={"store_id": 1, "value": "3,7"})
    assert response.status_code == 200
    assert response.get_json() == {
        "attribute_code": "color",
        "store_id": 1,
        "fields": {"color": [3, 7], "option_text_color": ["Rouge", "Bleu"]},
    }


def test_preview_empty_decimal(client):
    response = client.post("/api/v1/attributes/2/index-value", json={"value": ""})
    assert response.status_code == 200
    assert response.get_json()["fields"] == {}


def test_preview_requires_value(client):
    response = client.post("/api/v1/attributes/3/index-value", json={"store_id": 1})
    assert response.status_code == 400


def test_preview_rejects_bad_store(client):
    response = client.post("/api/v1/attributes/3/index-value",
                           json={"store_id": "main", "value": "3"})
    assert response.status_code == 400


def test_preview_unknown_attribute(client):
    response = client.post("/api/v1/attributes/999/index-value", json={"value": "1"})
    assert response.status_code == 404


def test_list_attributes_for_store(client):
    response = client.get("/api/v1/attributes?store_id=1")
    assert response.status_code == 200

    data = response.get_json()
    by_code = {a["attribute_code"]: a for a in data["attributes"]}
    assert data["store_id"] == 1
    assert all(a["store_id"] == 1 for a in data["attributes"])
    assert by_code["color"]["frontend_label"] == "Couleur"
    assert [o["label"] for o in by_code["material"]["options"]] == ["Coton", "Laine"]


def test_preview_rejects_string_body(client):
    response = client.post("/api/v1/attributes/3/index-value", json="value")
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_preview_rejects_list_body(client):
    response = client.post("/api/v1/attributes/3/index-value", json=["value"])
    assert response.status_code == 400
    assert "error" in response.get_json()
