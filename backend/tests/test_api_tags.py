"""Tests for tags API endpoints."""


class TestTagsAPI:
    """Test tag create and list endpoints."""

    def test_create_and_list_tags(self, client, auth_headers):
        response = client.post("/api/tags", json={"name": "weekly"}, headers=auth_headers)
        assert response.status_code == 200
        tag = response.json()
        assert tag["name"] == "weekly"

        listed = client.get("/api/tags", headers=auth_headers).json()
        assert listed == [tag]

    def test_blank_name_is_rejected(self, client, auth_headers):
        response = client.post("/api/tags", json={"name": ""}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Tag name cannot be empty"}

    def test_duplicate_tag_conflicts(self, client, auth_headers):
        client.post("/api/tags", json={"name": "weekly"}, headers=auth_headers)
        response = client.post("/api/tags", json={"name": "weekly"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Tag already exists"}

    def test_list_is_scoped_to_caller(self, client, auth_headers, other_auth_headers):
        client.post("/api/tags", json={"name": "weekly"}, headers=auth_headers)
        assert client.get("/api/tags", headers=other_auth_headers).json() == []

    def test_list_is_stable(self, client, auth_headers):
        for name in ["a", "b", "c"]:
            client.post("/api/tags", json={"name": name}, headers=auth_headers)
        first = client.get("/api/tags", headers=auth_headers).json()
        second = client.get("/api/tags", headers=auth_headers).json()
        assert first == second
