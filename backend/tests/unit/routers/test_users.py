from fastapi.testclient import TestClient


class TestUserListings:
    def test_get_user(self, client: TestClient, developers, manager_headers):
        response = client.get(f"/users/{developers[0].id}", headers=manager_headers)

        assert response.status_code == 200
        assert response.json()["email"] == developers[0].email

    def test_unknown_user_is_not_found(self, client: TestClient, manager_headers):
        response = client.get("/users/999999/tasks", headers=manager_headers)

        assert response.status_code == 404
        assert response.json() == {"detail": "User not found"}

    def test_user_projects(self, client: TestClient, project, make_project, manager, developers, manager_headers):
        make_project(manager, title="Without devs")

        response = client.get(f"/users/{developers[0].id}/projects", headers=manager_headers)

        assert [p["id"] for p in response.json()] == [project.id]

    def test_user_projects_hidden_from_outsiders(self, client: TestClient, project, developers, outsider_headers):
        response = client.get(f"/users/{developers[0].id}/projects", headers=outsider_headers)
        assert response.json() == []

    def test_user_tasks_newest_first(self, client: TestClient, project, developers, manager_headers):
        first = client.post(f"/projects/{project.id}/tasks", headers=manager_headers, json={
            "title": "First", "assigned_users": [developers[1].id],
        }).json()
        second = client.post(f"/projects/{project.id}/tasks", headers=manager_headers, json={
            "title": "Second", "assigned_users": [developers[1].id],
        }).json()
        client.post(f"/projects/{project.id}/tasks", headers=manager_headers, json={
            "title": "Someone else's", "assigned_users": [developers[2].id],
        })

        response = client.get(f"/users/{developers[1].id}/tasks", headers=manager_headers)

        assert [t["id"] for t in response.json()] == [second["id"], first["id"]]

    def test_user_tasks_hidden_from_outsiders(self, client: TestClient, project, developers, manager_headers, outsider_headers):
        client.post(f"/projects/{project.id}/tasks", headers=manager_headers, json={
            "title": "Private", "assigned_users": [developers[1].id],
        })

        assert client.get(f"/users/{developers[1].id}/tasks", headers=outsider_headers).json() == []
