"""
Integration tests — admin user management.

Endpoints under test:  GET    /api/users
                       GET    /api/users/{id}
                       DELETE /api/users/{id}
"""

from __future__ import annotations

import pytest
from django.contrib.auth import get_user_model

User = get_user_model()

pytestmark = pytest.mark.django_db


@pytest.fixture()
def admin_client(admin_user, auth_client):
    return auth_client(admin_user)


class TestUserList:

    def test_list_requires_session(self, api_client):
        response = api_client.get("/api/users")
        assert response.status_code == 401

    def test_list_forbidden_for_plain_user(self, admin_user, create_user, auth_client):
        client = auth_client(create_user())
        response = client.get("/api/users")
        assert response.status_code == 403
        assert response.json() == {"message": "Admin access required."}

    def test_list_returns_users_without_passwords(self, admin_client, create_user):
        create_user(username="alice")
        create_user(username="bob")

        response = admin_client.get("/api/users")

        assert response.status_code == 200
        users = response.json()["users"]
        assert [u["username"] for u in users] == ["admin", "alice", "bob"]
        assert all("password" not in u for u in users)
        assert all(isinstance(u["id"], str) for u in users)

    def test_list_filters(self, admin_client, create_user):
        create_user(username="alice", department="Traffic")
        create_user(username="bob", is_active=False)

        by_role = admin_client.get("/api/users", {"role": "admin"}).json()["users"]
        assert [u["username"] for u in by_role] == ["admin"]

        inactive = admin_client.get("/api/users", {"isActive": "false"}).json()["users"]
        assert [u["username"] for u in inactive] == ["bob"]

        search = admin_client.get("/api/users", {"search": "ALI"}).json()["users"]
        assert [u["username"] for u in search] == ["alice"]

    def test_unknown_role_filter_returns_400(self, admin_client):
        response = admin_client.get("/api/users", {"role": "superhero"})
        assert response.status_code == 400

    def test_role_is_read_from_the_session_snapshot(self, admin_user, create_user, auth_client):
        officer = create_user(username="promoted")
        client = auth_client(officer)

        User.objects.filter(pk=officer.pk).update(role="admin")
        assert client.get("/api/users").status_code == 403

        client = auth_client(officer)
        assert client.get("/api/users").status_code == 200


class TestUserDetail:

    def test_retrieve(self, admin_client, create_user):
        alice = create_user(username="alice")
        response = admin_client.get(f"/api/users/{alice.pk}")
        assert response.status_code == 200
        assert response.json()["user"]["username"] == "alice"

    def test_retrieve_unknown_returns_404(self, admin_client):
        response = admin_client.get("/api/users/9999")
        assert response.status_code == 404
        assert "message" in response.json()

    def test_users_cannot_be_created_through_the_collection(self, admin_client):
        response = admin_client.post(
            "/api/users", {"username": "x", "email": "x@x.io"}, format="json"
        )
        assert response.status_code == 405


class TestUserDelete:

    def test_delete_user(self, admin_client, create_user):
        alice = create_user(username="alice")

        response = admin_client.delete(f"/api/users/{alice.pk}")

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted successfully"}
        assert not User.objects.filter(pk=alice.pk).exists()
        assert admin_client.get(f"/api/users/{alice.pk}").status_code == 404

    def test_protected_admin_cannot_be_deleted(self, admin_client, admin_user):
        response = admin_client.delete("/api/users/1")

        assert response.status_code == 400
        assert response.json() == {"message": "Cannot delete admin account."}
        assert User.objects.filter(pk=1).exists()

    def test_delete_unknown_returns_404(self, admin_client):
        assert admin_client.delete("/api/users/424242").status_code == 404

    def test_delete_forbidden_for_plain_user(self, admin_user, create_user, auth_client):
        victim = create_user(username="victim")
        client = auth_client(create_user())
        assert client.delete(f"/api/users/{victim.pk}").status_code == 403
        assert User.objects.filter(pk=victim.pk).exists()
