"""Integration tests for consultation requests."""


def _headers(user):
    return {"X-User-Id": str(user.id)}


REQUEST = {"name": "Ravi", "email": "ravi@example.com", "message": "My fiddle leaf fig is dropping leaves"}


def test_anyone_can_request_consultation(client, admin):
    response = client.post("/consultations/", json=REQUEST)

    assert response.status_code == 201
    listed = client.get("/consultations/", headers=_headers(admin)).json()
    assert [c["email"] for c in listed] == ["ravi@example.com"]
    assert listed[0]["status"] == "pending"


def test_consultation_needs_valid_fields(client):
    assert client.post("/consultations/", json={**REQUEST, "email": "not-an-email"}).status_code == 422
    assert client.post("/consultations/", json={**REQUEST, "message": ""}).status_code == 422


def test_only_admin_manages_consultations(client, customer):
    consultation_id = client.post("/consultations/", json=REQUEST).json()["id"]

    assert client.get("/consultations/", headers=_headers(customer)).status_code == 403
    assert client.get("/consultations/").status_code == 401
    assert client.put(
        f"/consultations/{consultation_id}", json={"status": "done"}, headers=_headers(customer)
    ).status_code == 403
    assert client.delete(f"/consultations/{consultation_id}", headers=_headers(customer)).status_code == 403


def test_mark_done_and_filter(client, admin):
    first = client.post("/consultations/", json=REQUEST).json()["id"]
    client.post("/consultations/", json={**REQUEST, "name": "Nila", "email": "nila@example.com"})

    response = client.put(f"/consultations/{first}", json={"status": "done"}, headers=_headers(admin))

    assert response.status_code == 200
    assert response.json()["status"] == "done"
    pending = client.get("/consultations/?status=pending", headers=_headers(admin)).json()
    assert [c["email"] for c in pending] == ["nila@example.com"]
    assert client.put(f"/consultations/{first}", json={"status": "archived"}, headers=_headers(admin)).status_code == 422


def test_delete_consultation(client, admin):
    consultation_id = client.post("/consultations/", json=REQUEST).json()["id"]

    assert client.delete(f"/consultations/{consultation_id}", headers=_headers(admin)).status_code == 200
    assert client.get("/consultations/", headers=_headers(admin)).json() == []
    assert client.delete(f"/consultations/{consultation_id}", headers=_headers(admin)).status_code == 404
    assert client.put("/consultations/999", json={"status": "done"}, headers=_headers(admin)).status_code == 404


def test_dashboard_counts_pending_consultations(client, admin):
    first = client.post("/consultations/", json=REQUEST).json()["id"]
    client.post("/consultations/", json=REQUEST)
    client.put(f"/consultations/{first}", json={"status": "done"}, headers=_headers(admin))

    stats = client.get("/admin/dashboard", headers=_headers(admin)).json()["stats"]

    assert stats["pending_consultations"] == 1
