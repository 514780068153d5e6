from tests.api.base import *  # noqa: F401,F403


class BulkEndpointTests(ResourceApiBase):
    def setUp(self):
        super().setUp()
        self.alice = self._create_user("Alice Johnson", "alice@example.com")
        self.first = self._create_post("First", self.alice, status="draft")
        self.second = self._create_post("Second", self.alice, status="draft")
        self.third = self._create_post("Third", self.alice, status="draft")

    def _statuses(self) -> dict[int, str]:
        with self.SessionLocal() as db:
            return {row.id: row.status for row in db.query(Post).all()}

    def test_update_many_returns_every_requested_id(self):
        ids = [self.first, self.second, 999]
        response = self.client.put(
            "/api/posts",
            params={"id": [str(i) for i in ids]},
            json={"status": "published", "unknown": 1},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), ids)
        self.assertEqual(
            self._statuses(),
            {self.first: "published", self.second: "published", self.third: "draft"},
        )

    def test_update_many_collapses_duplicate_ids(self):
        response = self.client.put(
            "/api/posts",
            params={"id": [str(self.first), str(self.first)]},
            json={"status": "published"},
        )
        self.assertEqual(response.json(), [self.first])

    def test_update_many_without_ids_is_empty(self):
        response = self.client.put("/api/posts", json={"status": "published"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])
        self.assertEqual(set(self._statuses().values()), {"draft"})

    def test_update_many_bad_value_changes_nothing(self):
        response = self.client.put(
            "/api/posts",
            params={"id": [str(self.first), str(self.second)]},
            json={"status": "published", "userId": "nobody"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(set(self._statuses().values()), {"draft"})

    def test_delete_many_returns_only_deleted_ids(self):
        response = self.client.delete(
            "/api/posts",
            params={"id": [str(self.first), str(self.second), "999"]},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(sorted(response.json()), [self.first, self.second])
        self.assertEqual(set(self._statuses()), {self.third})

    def test_delete_many_without_ids_is_empty(self):
        response = self.client.delete("/api/posts")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])
        self.assertEqual(len(self._statuses()), 3)
