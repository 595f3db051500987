from fastapi.testclient import TestClient


def _payload(**fields):
    payload = {
        "title": "Sprint planning",
        "start_date": "2026-11-02T09:00:00Z",
        "end_date": "2026-11-02T10:00:00Z",
        "type": "meeting",
    }
    payload.update(fields)
    return payload


class TestCalendarEventEndpoints:
    def test_lifecycle(self, client: TestClient, manager_headers, developers, developer_headers):
        created = client.post("/calendar-events", headers=manager_headers, json=_payload(
            shared_user_ids=[developers[0].id], color="#3B82F6",
        ))
        assert created.status_code == 201
        event_id = created.json()["id"]
        assert created.json()["shared_user_ids"] == [developers[0].id]

        assert [e["id"] for e in client.get("/calendar-events", headers=developer_headers).json()] == [event_id]
        assert client.get(f"/calendar-events/{event_id}", headers=developer_headers).status_code == 200

        updated = client.put(f"/calendar-events/{event_id}", headers=manager_headers, json={"title": "Planning"})
        assert updated.json()["title"] == "Planning"

        assert client.delete(f"/calendar-events/{event_id}", headers=manager_headers).status_code == 200
        assert client.get(f"/calendar-events/{event_id}", headers=manager_headers).status_code == 404

    def test_shared_user_cannot_edit(self, client: TestClient, manager_headers, developers, developer_headers):
        event_id = client.post("/calendar-events", headers=manager_headers, json=_payload(
            shared_user_ids=[developers[0].id],
        )).json()["id"]

        assert client.put(
            f"/calendar-events/{event_id}", headers=developer_headers, json={"title": "Hijack"}
        ).status_code == 403
        assert client.delete(f"/calendar-events/{event_id}", headers=developer_headers).status_code == 403

    def test_outsider_gets_not_found(self, client: TestClient, manager_headers, outsider_headers):
        event_id = client.post("/calendar-events", headers=manager_headers, json=_payload()).json()["id"]
        assert client.get(f"/calendar-events/{event_id}", headers=outsider_headers).status_code == 404

    def test_end_before_start_returns_field(self, client: TestClient, manager_headers):
        response = client.post("/calendar-events", headers=manager_headers, json=_payload(
            end_date="2026-11-02T08:00:00Z",
        ))

        assert response.status_code == 422
        assert response.json()["field"] == "end_date"

    def test_unknown_type_is_rejected(self, client: TestClient, manager_headers):
        response = client.post("/calendar-events", headers=manager_headers, json=_payload(type="party"))
        assert response.status_code == 422
