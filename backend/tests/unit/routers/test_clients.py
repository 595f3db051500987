from fastapi.testclient import TestClient


class TestClientEndpoints:
    def test_lifecycle(self, client: TestClient, manager_headers):
        created = client.post("/clients", headers=manager_headers, json={
            "name": "Alex Acme", "email": "alex@acme.example", "company": "Acme",
        })
        assert created.status_code == 201
        record = created.json()["client"]
        assert record["user"]["role"] == "client"
        assert created.json()["password"]

        listed = client.get("/clients", headers=manager_headers).json()
        assert [c["id"] for c in listed] == [record["id"]]

        updated = client.put(f"/clients/{record['id']}", headers=manager_headers, json={"company": "Acme Corp"})
        assert updated.json()["company"] == "Acme Corp"
        assert updated.json()["user"]["name"] == "Alex Acme"

        assert client.delete(f"/clients/{record['id']}", headers=manager_headers).status_code == 200
        assert client.get(f"/clients/{record['id']}", headers=manager_headers).status_code == 404

    def test_invalid_website_is_rejected(self, client: TestClient, manager_headers):
        response = client.post("/clients", headers=manager_headers, json={
            "name": "Bad", "email": "bad@example.com", "website": "not a url",
        })
        assert response.status_code == 422

    def test_client_cannot_list_clients(self, client: TestClient, client_headers):
        assert client.get("/clients", headers=client_headers).status_code == 403
