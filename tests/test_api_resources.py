"""HTTP tests for the paginated resources: audit stamping, toggles, partial updates, lookups."""

import unittest
from unittest.mock import patch

from boardsctrl.api.roles import ROLE_NAME_TAKEN
from boardsctrl.models import Board, Slide, User
from boardsctrl.repositories.accounts import SqlAccountRepository
from tests.api_base import PREFIX, ApiTestCase


class AdminApiTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin = self.token_for(10, "alice", "Admin")
        self.reader = self.token_for(11, "bob", "User")

    def post(self, path: str, body: dict, token: str | None = None):
        return self.client.post(f"{PREFIX}{path}", json=body, headers=self.auth(token or self.admin))

    def patch(self, path: str, body: dict | None = None, token: str | None = None):
        return self.client.patch(
            f"{PREFIX}{path}", json=body or {}, headers=self.auth(token or self.admin)
        )

    def get(self, path: str, token: str | None = None, **params):
        return self.client.get(
            f"{PREFIX}{path}", params=params, headers=self.auth(token or self.reader)
        )


class TestCategoriesAndBoards(AdminApiTestCase):
    def test_create_stamps_creator_from_token(self) -> None:
        resp = self.post("/categories", {"title": "Sales"})
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["created_by_id"], 10)
        self.assertIsNotNone(body["created_at"])
        self.assertIsNone(body["modified_by_id"])

    def test_patch_updates_only_sent_fields_and_stamps_modifier(self) -> None:
        category_id = self.post("/categories", {"title": "Sales"}).json()["id"]
        board = self.post(
            "/boards",
            {"category_id": category_id, "title": "Q1", "description": "first quarter"},
        ).json()

        resp = self.patch(f"/boards/{board['id']}", {"title": "Q1 2025"})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["title"], "Q1 2025")
        self.assertEqual(body["description"], "first quarter")
        self.assertEqual(body["modified_by_id"], 10)
        self.assertIsNotNone(body["modified_at"])

    def test_toggle_flips_status(self) -> None:
        category_id = self.post("/categories", {"title": "Sales"}).json()["id"]
        first = self.patch(f"/categories/{category_id}/toggle")
        self.assertFalse(first.json()["status"])
        second = self.patch(f"/categories/{category_id}/toggle")
        self.assertTrue(second.json()["status"])
        self.assertEqual(second.json()["modified_by_id"], 10)

    def test_toggle_activate_sets_explicit_value(self) -> None:
        category_id = self.post("/categories", {"title": "Sales"}).json()["id"]
        for _ in range(2):
            resp = self.patch(f"/categories/{category_id}/toggle?activate=false")
            self.assertEqual(resp.status_code, 200)
            self.assertFalse(resp.json()["status"])
        resp = self.patch(f"/categories/{category_id}/toggle?activate=true")
        self.assertTrue(resp.json()["status"])

    def test_board_title_unique_within_category(self) -> None:
        sales = self.post("/categories", {"title": "Sales"}).json()["id"]
        ops = self.post("/categories", {"title": "Ops"}).json()["id"]
        self.assertEqual(self.post("/boards", {"category_id": sales, "title": "Main"}).status_code, 201)
        self.assertEqual(self.post("/boards", {"category_id": ops, "title": "Main"}).status_code, 201)
        dup = self.post("/boards", {"category_id": sales, "title": "Main"})
        self.assertEqual(dup.status_code, 400)

    def test_board_needs_existing_category(self) -> None:
        resp = self.post("/boards", {"category_id": 404, "title": "Orphan"})
        self.assertEqual(resp.status_code, 400)

    def test_boards_by_category(self) -> None:
        sales = self.post("/categories", {"title": "Sales"}).json()["id"]
        empty = self.post("/categories", {"title": "Empty"}).json()["id"]
        for i in range(3):
            self.post("/boards", {"category_id": sales, "title": f"Board {i}"})

        resp = self.get(f"/boards/by-category/{sales}", page_size=2)
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["total"], 3)
        self.assertEqual(body["total_pages"], 2)
        self.assertEqual(len(body["boards"]), 2)

        self.assertEqual(self.get(f"/boards/by-category/{empty}").status_code, 404)

    def test_get_missing_board(self) -> None:
        self.assertEqual(self.get("/boards/999").status_code, 404)


class TestSlides(AdminApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        category_id = self.post("/categories", {"title": "Sales"}).json()["id"]
        self.board_id = self.post(
            "/boards", {"category_id": category_id, "title": "Lobby"}
        ).json()["id"]

    def test_create_list_by_board(self) -> None:
        for i in range(2):
            resp = self.post(
                "/slides",
                {"board_id": self.board_id, "title": f"Slide {i}", "url": "https://example.com", "time": 30},
            )
            self.assertEqual(resp.status_code, 201)
        body = self.get(f"/slides/by-board/{self.board_id}").json()
        self.assertEqual(body["total"], 2)
        self.assertEqual([s["title"] for s in body["slides"]], ["Slide 0", "Slide 1"])

    def test_time_out_of_range(self) -> None:
        resp = self.post(
            "/slides",
            {"board_id": self.board_id, "title": "Too long", "url": "https://example.com", "time": 5000},
        )
        self.assertEqual(resp.status_code, 422)

    def test_deleting_board_removes_slides(self) -> None:
        self.post("/slides", {"board_id": self.board_id, "title": "S", "url": "https://example.com"})
        board = self.db.get(Board, self.board_id)
        self.db.delete(board)
        self.db.commit()
        self.assertEqual(self.db.query(Slide).count(), 0)


class TestRolesAndUsers(AdminApiTestCase):
    def test_list_roles_paginated(self) -> None:
        body = self.get("/roles", page_number=1, page_size=1).json()
        self.assertEqual(body["total"], 2)
        self.assertEqual(body["page_size"], 1)
        self.assertEqual(len(body["roles"]), 1)

    def test_duplicate_role_name(self) -> None:
        self.assertEqual(self.post("/roles", {"name": "Admin"}).status_code, 400)
        self.assertEqual(self.post("/roles", {"name": "Auditor"}).status_code, 201)

    def test_create_user_without_password_hides_hash(self) -> None:
        resp = self.post(
            "/users",
            {"username": "kiosk1", "email": "k@example.com", "role_id": self.user_role.id},
        )
        self.assertEqual(resp.status_code, 201)
        self.assertNotIn("password_hash", resp.json())
        stored = self.db.query(User).filter(User.username == "kiosk1").one()
        self.assertIsNone(stored.password_hash)
        self.assertEqual(stored.created_by_id, 10)

    def test_toggled_user_cannot_log_in(self) -> None:
        user_id = self.post(
            "/users",
            {"username": "carl", "role_id": self.user_role.id, "password": "pw"},
        ).json()["id"]
        self.assertEqual(
            self.client.post(
                f"{PREFIX}/auth/login", json={"username": "carl", "password": "pw"}
            ).status_code,
            200,
        )
        self.patch(f"/users/{user_id}/toggle")
        resp = self.client.post(f"{PREFIX}/auth/login", json={"username": "carl", "password": "pw"})
        self.assertEqual(resp.status_code, 401)

    def test_user_update_rejects_unknown_role(self) -> None:
        user_id = self.post(
            "/users", {"username": "dora", "role_id": self.user_role.id}
        ).json()["id"]
        resp = self.patch(f"/users/{user_id}", {"role_id": 999})
        self.assertEqual(resp.status_code, 400)

    def test_reader_cannot_toggle(self) -> None:
        self.assertEqual(self.patch("/roles/1/toggle", token=self.reader).status_code, 403)

    def test_concurrent_duplicate_user_insert_is_400(self) -> None:
        body = {"username": "erik", "role_id": self.user_role.id}
        self.assertEqual(self.post("/users", body).status_code, 201)
        # The other request's insert lands between the existence check and the commit.
        with patch.object(SqlAccountRepository, "username_exists", return_value=False):
            resp = self.post("/users", body)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "El usuario ya existe")

    def test_concurrent_rename_to_taken_username_is_400(self) -> None:
        self.post("/users", {"username": "fay", "role_id": self.user_role.id})
        user_id = self.post("/users", {"username": "gus", "role_id": self.user_role.id}).json()["id"]
        with patch("boardsctrl.api.users._ensure_username_free"):
            resp = self.patch(f"/users/{user_id}", {"username": "fay"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "El usuario ya existe")
        self.assertEqual(self.get(f"/users/{user_id}").json()["username"], "gus")

    def test_concurrent_duplicate_role_insert_is_400(self) -> None:
        with patch("boardsctrl.api.roles._ensure_name_free"):
            resp = self.post("/roles", {"name": "Admin"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], ROLE_NAME_TAKEN)

    def test_user_toggle_activate(self) -> None:
        user_id = self.post("/users", {"username": "hal", "role_id": self.user_role.id}).json()["id"]
        resp = self.patch(f"/users/{user_id}/toggle?activate=true")
        self.assertTrue(resp.json()["status"])
        resp = self.patch(f"/users/{user_id}/toggle?activate=false")
        self.assertFalse(resp.json()["status"])


if __name__ == "__main__":
    unittest.main()
