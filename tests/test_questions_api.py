import pytest


def _category_id(client, name):
    return next(c["id"] for c in client.get("/api/categories").json() if c["name"] == name)


def _create(client, title, category="Mathematics", content="content", answer="answer"):
    resp = client.post(
        "/api/questions",
        json={
            "title": title,
            "content": content,
            "answer": answer,
            "categoryId": _category_id(client, category),
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


class TestCreateQuestion:
    def test_created_with_zero_views(self, admin_client):
        body = _create(admin_client, "What is a prime?")

        assert body["views"] == 0
        assert body["title"] == "What is a prime?"
        assert set(body) == {
            "id", "title", "content", "answer", "categoryId",
            "views", "createdAt", "updatedAt",
        }

    def test_snake_case_input_is_accepted(self, admin_client):
        category_id = _category_id(admin_client, "Science")
        resp = admin_client.post(
            "/api/questions",
            json={"title": "t", "content": "c", "answer": "a", "category_id": category_id},
        )
        assert resp.status_code == 201
        assert resp.json()["categoryId"] == category_id

    def test_missing_category_is_400(self, admin_client):
        resp = admin_client.post("/api/questions", json={"title": "t", "content": "c", "answer": "a"})

        assert resp.status_code == 400
        body = resp.json()
        assert body["message"] == "Invalid question data"
        assert any(err["loc"][-1] == "categoryId" for err in body["errors"])

    def test_unknown_category_is_500(self, admin_client):
        resp = admin_client.post(
            "/api/questions",
            json={"title": "t", "content": "c", "answer": "a", "categoryId": 9999},
        )
        assert resp.status_code == 500
        assert resp.json() == {"message": "Failed to create question"}


class TestListQuestions:
    @pytest.fixture
    def seeded(self, admin_client):
        return {
            "algebra": _create(admin_client, "ALGEBRA basics", "Mathematics"),
            "cells": _create(admin_client, "Cells", "Science", content="the algae cell wall"),
            "rome": _create(admin_client, "Rome", "History"),
        }

    def test_newest_first_with_category(self, admin_client, seeded):
        body = admin_client.get("/api/questions").json()

        assert [q["id"] for q in body] == [seeded["rome"]["id"], seeded["cells"]["id"], seeded["algebra"]["id"]]
        assert body[0]["category"]["name"] == "History"

    def test_new_question_goes_to_the_top(self, admin_client, seeded):
        newest = _create(admin_client, "Newest")
        assert admin_client.get("/api/questions").json()[0]["id"] == newest["id"]

    def test_filter_by_category(self, admin_client, seeded):
        science = _category_id(admin_client, "Science")
        body = admin_client.get("/api/questions", params={"category": science}).json()
        assert [q["id"] for q in body] == [seeded["cells"]["id"]]

    def test_search_is_case_insensitive(self, admin_client, seeded):
        body = admin_client.get("/api/questions", params={"search": "alg"}).json()
        assert {q["id"] for q in body} == {seeded["algebra"]["id"], seeded["cells"]["id"]}

    def test_search_wins_over_category(self, admin_client, seeded):
        history = _category_id(admin_client, "History")
        body = admin_client.get(
            "/api/questions", params={"search": "algebra", "category": history}
        ).json()
        assert [q["id"] for q in body] == [seeded["algebra"]["id"]]

    def test_search_without_match_is_empty(self, admin_client, seeded):
        resp = admin_client.get("/api/questions", params={"search": "quantum"})
        assert resp.status_code == 200
        assert resp.json() == []

    def test_search_ignores_unparsable_category(self, admin_client, seeded):
        body = admin_client.get(
            "/api/questions", params={"search": "algebra", "category": "maths"}
        ).json()
        assert [q["id"] for q in body] == [seeded["algebra"]["id"]]

    def test_search_with_empty_category(self, admin_client, seeded):
        resp = admin_client.get("/api/questions?search=algebra&category=")
        assert resp.status_code == 200
        assert [q["id"] for q in resp.json()] == [seeded["algebra"]["id"]]

    def test_empty_category_lists_everything(self, admin_client, seeded):
        resp = admin_client.get("/api/questions?category=")
        assert resp.status_code == 200
        assert len(resp.json()) == 3

    def test_search_accented_title(self, admin_client, seeded):
        zola = _create(admin_client, "Émile Zola", "Literature")
        for text in ["Émile", "émile", "ÉMILE ZOLA"]:
            body = admin_client.get("/api/questions", params={"search": text}).json()
            assert [q["id"] for q in body] == [zola["id"]], text

    def test_non_integer_category_is_400(self, client):
        resp = client.get("/api/questions", params={"category": "maths"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid question data"


class TestQuestionDetail:
    def test_detail_counts_views(self, admin_client):
        created = _create(admin_client, "Counted")

        first = admin_client.get(f"/api/questions/{created['id']}")
        second = admin_client.get(f"/api/questions/{created['id']}")

        assert first.status_code == 200
        assert first.json()["views"] == 0
        assert second.json()["views"] == 1
        assert first.json()["category"]["name"] == "Mathematics"

    def test_unknown_is_404(self, client):
        resp = client.get("/api/questions/9999")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Question not found"}

    def test_listing_does_not_count_views(self, admin_client):
        created = _create(admin_client, "Listed")
        admin_client.get("/api/questions")
        admin_client.get("/api/questions", params={"search": "Listed"})
        assert admin_client.get("/api/stats").json()["totalViews"] == 0
        assert admin_client.get(f"/api/questions/{created['id']}").json()["views"] == 0


class TestUpdateQuestion:
    def test_partial_update_keeps_other_fields(self, admin_client):
        created = _create(admin_client, "Old title", content="keep me", answer="keep me too")
        admin_client.get(f"/api/questions/{created['id']}")

        resp = admin_client.put(f"/api/questions/{created['id']}", json={"title": "New title"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["title"] == "New title"
        assert body["content"] == "keep me"
        assert body["answer"] == "keep me too"
        assert body["categoryId"] == created["categoryId"]
        assert body["views"] == 1
        assert body["createdAt"] == created["createdAt"]
        assert body["updatedAt"] > created["updatedAt"]

    def test_unknown_is_404(self, admin_client):
        resp = admin_client.put("/api/questions/9999", json={"title": "x"})
        assert resp.status_code == 404
        assert resp.json() == {"message": "Question not found"}

    def test_invalid_type_is_400(self, admin_client):
        created = _create(admin_client, "Typed")
        resp = admin_client.put(f"/api/questions/{created['id']}", json={"categoryId": "not a number"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid question data"


class TestDeleteQuestion:
    def test_delete(self, admin_client):
        created = _create(admin_client, "Doomed")

        resp = admin_client.delete(f"/api/questions/{created['id']}")

        assert resp.status_code == 204
        assert admin_client.get(f"/api/questions/{created['id']}").status_code == 404

    def test_unknown_is_404(self, admin_client):
        resp = admin_client.delete("/api/questions/9999")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Question not found"}


class TestStatsAndHealth:
    def test_stats_without_questions(self, client):
        assert client.get("/api/stats").json() == {
            "totalQuestions": 0,
            "totalCategories": 4,
            "totalViews": 0,
        }

    def test_health(self, client):
        assert client.get("/api/health/live").json() == {"status": "ok"}
        assert client.get("/api/health/db").json() == {"status": "ok"}
