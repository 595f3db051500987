from fastapi.testclient import TestClient

from taskboard import models


class TestWorkflowStatusEndpoints:
    def test_create_status(self, client: TestClient, project, statuses, manager_headers):
        response = client.post(f"/projects/{project.id}/workflow-statuses", headers=manager_headers, json={
            "name": "Code Review", "color": "#A855F7",
        })

        assert response.status_code == 201
        assert response.json()["slug"] == "code_review"
        assert response.json()["order"] == 6

    def test_malformed_color_is_rejected(self, client: TestClient, project, manager_headers):
        response = client.post(f"/projects/{project.id}/workflow-statuses", headers=manager_headers, json={
            "name": "Bad", "color": "purple",
        })
        assert response.status_code == 422

    def test_developer_cannot_manage_statuses(self, client: TestClient, project, developer_headers):
        response = client.post(f"/projects/{project.id}/workflow-statuses", headers=developer_headers, json={
            "name": "Mine", "color": "#000000",
        })
        assert response.status_code == 403

    def test_delete_status_with_tasks_conflicts(self, client: TestClient, db_session, project, statuses, manager_headers):
        db_session.add(models.Task(project_id=project.id, title="Busy", workflow_status_id=statuses[2].id))
        db_session.commit()

        response = client.delete(f"/projects/{project.id}/workflow-statuses/{statuses[2].id}", headers=manager_headers)

        assert response.status_code == 409
        assert response.json()["detail"] == "Cannot delete status with 1 task(s); move or delete tasks first."
        listed = client.get(f"/projects/{project.id}/workflow-statuses", headers=manager_headers).json()
        assert len(listed) == 6

    def test_delete_unused_status(self, client: TestClient, project, statuses, manager_headers):
        response = client.delete(f"/projects/{project.id}/workflow-statuses/{statuses[4].id}", headers=manager_headers)
        assert response.status_code == 200

    def test_status_of_other_project_is_not_found(self, client: TestClient, make_project, manager, project, manager_headers):
        other = make_project(manager, title="Other")
        foreign_id = other.workflow_statuses[0].id

        response = client.put(
            f"/projects/{project.id}/workflow-statuses/{foreign_id}", headers=manager_headers, json={"name": "Hijack"}
        )
        assert response.status_code == 404

    def test_reorder_and_set_default(self, client: TestClient, project, statuses, manager_headers):
        payload = {"statuses": [{"id": s.id, "order": 5 - i} for i, s in enumerate(statuses)]}
        response = client.post(f"/projects/{project.id}/workflow-statuses/reorder", headers=manager_headers, json=payload)

        assert response.status_code == 200
        assert [s["id"] for s in response.json()] == [s.id for s in reversed(statuses)]

        response = client.patch(
            f"/projects/{project.id}/workflow-statuses/{statuses[1].id}/set-default", headers=manager_headers
        )
        assert response.status_code == 200
        assert response.json()["is_default"] is True

    def test_seed_defaults_is_idempotent(self, client: TestClient, project, statuses, manager_headers):
        response = client.post(f"/projects/{project.id}/workflow-statuses/defaults", headers=manager_headers)

        assert response.status_code == 200
        assert [s["id"] for s in response.json()] == [s.id for s in statuses]
