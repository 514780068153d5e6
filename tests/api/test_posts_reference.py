from tests.api.base import *  # noqa: F401,F403


class PostReferenceTests(ResourceApiBase):
    def setUp(self):
        super().setUp()
        self.alice = self._create_user("Alice Johnson", "alice.johnson@example.com")
        self.bob = self._create_user("Bob Smith", "bob.smith@example.com")
        self.charlie = self._create_user("Charlie Brown", "charlie.brown@example.com")
        self.alice_posts = [
            self._create_post("Introduction to Java", self.alice, "Java is a programming language..."),
            self._create_post("Advanced Java Techniques", self.alice, "In this post, we explore..."),
            self._create_post("Java Best Practices", self.alice, "Following best practices...", status="draft"),
            self._create_post("Spring Boot Basics", self.alice, "Spring Boot makes it easy..."),
            self._create_post("Microservices Architecture", self.alice, "Services talk over HTTP...", status="draft"),
        ]
        self.bob_posts = [
            self._create_post("Python for Beginners", self.bob, "Python is a versatile language..."),
            self._create_post("Data Science with Python", self.bob, "Data analysis with pandas..."),
        ]

    def _by_user(self, user_id, **extra):
        params = self._window()
        params.update(extra)
        return self.client.get(f"/api/posts/of/userId/{user_id}", params=params)

    def test_reference_returns_only_posts_of_the_target(self):
        response = self._by_user(self.alice)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(response.headers["x-total-count"], "5")
        self.assertEqual(len(body), 5)
        self.assertTrue(all(row["userId"] == self.alice for row in body))

        response = self._by_user(self.bob)
        self.assertEqual(response.headers["x-total-count"], "2")
        self.assertEqual([row["id"] for row in response.json()], self.bob_posts)

    def test_reference_without_children_or_unknown_parent_is_empty(self):
        for target in (self.charlie, 999999):
            response = self._by_user(target)
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json(), [])
            self.assertEqual(response.headers["x-total-count"], "0")

    def test_reference_composes_with_filters_search_and_pagination(self):
        response = self._by_user(self.alice, status="draft")
        self.assertEqual({row["id"] for row in response.json()}, {self.alice_posts[2], self.alice_posts[4]})

        response = self._by_user(self.alice, q="java")
        self.assertEqual(response.headers["x-total-count"], "3")

        params = self._window(0, 2, sort="title", order="ASC")
        response = self.client.get(f"/api/posts/of/userId/{self.alice}", params=params)
        self.assertEqual(
            [row["title"] for row in response.json()],
            ["Advanced Java Techniques", "Introduction to Java"],
        )
        self.assertEqual(response.headers["x-total-count"], "5")

    def test_reference_target_overrides_user_supplied_filter(self):
        response = self._by_user(self.alice, userId=str(self.bob))
        self.assertEqual(response.headers["x-total-count"], "5")

    def test_reference_validates_field_id_and_window(self):
        self.assertEqual(self._by_user("not-a-number").status_code, 400)
        response = self.client.get(f"/api/posts/of/authorId/{self.alice}", params=self._window())
        self.assertEqual(response.status_code, 400)
        response = self.client.get(f"/api/posts/of/userId/{self.alice}", params=self._window(3, 3))
        self.assertEqual(response.status_code, 400)

    def test_moving_a_post_updates_both_reference_counts(self):
        moved = self.alice_posts[0]
        response = self.client.put(f"/api/posts/{moved}", json={"userId": self.charlie})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["userId"], self.charlie)

        self.assertEqual(self._by_user(self.alice).headers["x-total-count"], "4")
        charlie = self._by_user(self.charlie)
        self.assertEqual(charlie.headers["x-total-count"], "1")
        self.assertEqual([row["id"] for row in charlie.json()], [moved])
