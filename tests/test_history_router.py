# /tests/test_history_router.py

SESSION_A = {"X-Session-Id": "browser-a"}
SESSION_B = {"X-Session-Id": "browser-b"}


def _post_generation(client, headers, input_code="component code"):
    response = client.post(
        "/api/history",
        json={
            "feature_type": "test-generator",
            "input_code": input_code,
            "output_result": "it('renders')",
            "test_framework": "jest",
            "component_framework": "react",
            "generation_time_ms": 850,
        },
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


def test_session_header_is_required(client):
    assert client.get("/api/history").status_code == 400
    assert client.get("/api/history", headers={"X-Session-Id": "   "}).status_code == 400


def test_save_then_list(client):
    saved = _post_generation(client, SESSION_A)

    response = client.get("/api/history", headers=SESSION_A)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["results"][0]["id"] == saved["id"]
    assert body["results"][0]["input_length"] == len("component code")


def test_delete_is_scoped_to_the_owning_session(client):
    mine = _post_generation(client, SESSION_A, "mine")
    theirs = _post_generation(client, SESSION_B, "theirs")

    # Another session cannot delete the row.
    assert client.delete(f"/api/history/{mine['id']}", headers=SESSION_B).status_code == 404

    assert client.delete(f"/api/history/{mine['id']}", headers=SESSION_A).status_code == 204
    assert client.get("/api/history", headers=SESSION_A).json()["total"] == 0
    remaining_b = client.get("/api/history", headers=SESSION_B).json()["results"]
    assert [r["id"] for r in remaining_b] == [theirs["id"]]


def test_clear_history(client):
    _post_generation(client, SESSION_A)
    _post_generation(client, SESSION_A)

    response = client.delete("/api/history", headers=SESSION_A)

    assert response.status_code == 200
    assert response.json() == {"deleted": 2}


def test_invalid_limit_is_a_validation_error(client):
    assert client.get("/api/history", params={"limit": 0}, headers=SESSION_A).status_code == 422
