"""End-to-end tests for comments, likes, notifications and deletes."""

from tests.e2e.conftest import publish, signup


def _comment(client, session, blog, text, replying_to=None, notification_id=None):
    body = {"_id": blog["_id"], "comment": text, "blog_author": blog["author_id"]}
    if replying_to:
        body["replying_to"] = replying_to
    if notification_id:
        body["notification_id"] = notification_id
    response = client.post("/add-comment", json=body, headers=session["headers"])
    assert response.status_code == 200, response.text
    return response.json()


def _activity(client, blog):
    response = client.post(
        "/get-blog", json={"blog_id": blog["blog_id"], "mode": "edit"}
    )
    return response.json()["blog"]["activity"]


def _notifications(client, session, filter="all"):
    response = client.post(
        "/notifications", json={"page": 1, "filter": filter}, headers=session["headers"]
    )
    assert response.status_code == 200, response.text
    return response.json()["notifications"]


class TestCommentThread:
    def test_comment_reply_and_delete(self, client):
        """A comments on B's blog, C replies, A deletes the comment."""
        a = signup(client, "anna")
        b = signup(client, "bert")
        c = signup(client, "cleo")
        blog = publish(client, b["headers"])

        comment = _comment(client, a, blog, "Nice")
        assert set(comment) == {"comment", "commentedAt", "_id", "user_id", "children"}
        assert _activity(client, blog)["total_comments"] == 1
        assert _activity(client, blog)["total_parent_comments"] == 1
        [to_b] = _notifications(client, b)
        assert to_b["type"] == "comment"
        assert to_b["user"]["username"] == "anna"
        assert to_b["comment"]["comment"] == "Nice"

        reply = _comment(client, c, blog, "Agreed", replying_to=comment["_id"])
        activity = _activity(client, blog)
        assert activity["total_comments"] == 2
        assert activity["total_parent_comments"] == 1
        [to_a] = _notifications(client, a)
        assert to_a["type"] == "reply"
        assert to_a["comment"]["_id"] == reply["_id"]
        assert to_a["replied_on_comment"]["_id"] == comment["_id"]

        threads = client.post(
            "/get-blog-comments", json={"blog_id": blog["_id"], "skip": 0}
        ).json()
        assert [t["_id"] for t in threads] == [comment["_id"]]
        assert threads[0]["children"] == [reply["_id"]]
        assert threads[0]["commented_by"]["username"] == "anna"
        replies = client.post("/get-replies", json={"_id": comment["_id"]}).json()
        assert [r["comment"] for r in replies["replies"]] == ["Agreed"]
        assert replies["replies"][0]["isReply"] is True

        response = client.post(
            "/delete-comment", json={"_id": comment["_id"]}, headers=a["headers"]
        )

        assert response.status_code == 200
        assert response.json()["deleted"] == 2
        activity = _activity(client, blog)
        assert activity["total_comments"] == 0
        assert activity["total_parent_comments"] == 0
        assert _notifications(client, a) == []
        assert _notifications(client, b) == []
        assert client.post(
            "/get-blog-comments", json={"blog_id": blog["_id"]}
        ).json() == []

    def test_stranger_cannot_delete_comment(self, client):
        author = signup(client, "bert")
        reader = signup(client, "anna")
        stranger = signup(client, "cleo")
        blog = publish(client, author["headers"])
        comment = _comment(client, reader, blog, "Mine")

        response = client.post(
            "/delete-comment", json={"_id": comment["_id"]}, headers=stranger["headers"]
        )

        assert response.status_code == 403
        assert response.json() == {"error": "You are not allowed to change this comment"}

    def test_delete_missing_comment_changes_nothing(self, client):
        author = signup(client, "bert")
        reader = signup(client, "anna")
        blog = publish(client, author["headers"])
        comment = _comment(client, reader, blog, "Stays")
        before = _activity(client, blog)

        response = client.post(
            "/delete-comment",
            json={"_id": "00000000-0000-4000-8000-000000000000"},
            headers=author["headers"],
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Comment not found"}
        after = _activity(client, blog)
        assert after == before
        assert after["total_comments"] == 1
        assert after["total_parent_comments"] == 1
        threads = client.post("/get-blog-comments", json={"blog_id": blog["_id"]}).json()
        assert [t["_id"] for t in threads] == [comment["_id"]]
        count = client.post(
            "/all-notifications-count", json={"filter": "all"}, headers=author["headers"]
        ).json()
        assert count == {"totalDocs": 1}

    def test_blank_comment_rejected(self, client):
        session = signup(client, "anna")
        blog = publish(client, session["headers"])

        response = client.post(
            "/add-comment",
            json={"_id": blog["_id"], "comment": "   "},
            headers=session["headers"],
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Write a comment to submit"}

    def test_malformed_blog_id_is_400(self, client):
        session = signup(client, "anna")

        response = client.post(
            "/add-comment",
            json={"_id": "not-a-uuid", "comment": "Hi"},
            headers=session["headers"],
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_reply_from_notification(self, client):
        author = signup(client, "bert")
        reader = signup(client, "anna")
        blog = publish(client, author["headers"])
        question = _comment(client, reader, blog, "Question?")
        [notification] = _notifications(client, author)

        answer = _comment(
            client,
            author,
            blog,
            "Answer",
            replying_to=question["_id"],
            notification_id=notification["_id"],
        )

        [notification] = _notifications(client, author)
        assert notification["reply"]["_id"] == answer["_id"]
        assert notification["seen"] is True


class TestLikes:
    def test_like_toggle_round_trip(self, client):
        author = signup(client, "bert")
        reader = signup(client, "anna")
        blog = publish(client, author["headers"])

        liked = client.post(
            "/like-blog",
            json={"_id": blog["_id"], "isLikedByUser": False},
            headers=reader["headers"],
        )
        assert liked.json() == {"likedByUser": True}
        assert _activity(client, blog)["total_likes"] == 1
        assert client.post(
            "/isliked-by-user", json={"_id": blog["_id"]}, headers=reader["headers"]
        ).json() == {"result": True}
        new = client.get("/new-notification", headers=author["headers"]).json()
        assert new == {"new_notification_available": True}
        count = client.post(
            "/all-notifications-count", json={"filter": "like"}, headers=author["headers"]
        ).json()
        assert count == {"totalDocs": 1}

        unliked = client.post(
            "/like-blog",
            json={"_id": blog["_id"], "isLikedByUser": True},
            headers=reader["headers"],
        )

        assert unliked.json() == {"likedByUser": False}
        assert _activity(client, blog)["total_likes"] == 0
        assert _notifications(client, author, filter="like") == []

    def test_like_missing_blog_is_404(self, client):
        reader = signup(client, "anna")

        response = client.post(
            "/like-blog",
            json={"_id": "00000000-0000-4000-8000-000000000000", "isLikedByUser": False},
            headers=reader["headers"],
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Blog not found"}

    def test_first_page_clears_new_notification_flag(self, client):
        author = signup(client, "bert")
        reader = signup(client, "anna")
        blog = publish(client, author["headers"])
        for n in range(12):
            _comment(client, reader, blog, f"Comment {n}")

        first_page = _notifications(client, author)

        assert len(first_page) == 10
        new = client.get("/new-notification", headers=author["headers"]).json()
        assert new == {"new_notification_available": False}
        second_page = client.post(
            "/notifications", json={"page": 2, "filter": "all"}, headers=author["headers"]
        ).json()["notifications"]
        assert len(second_page) == 2
        assert all(n["seen"] for n in second_page)

    def test_unknown_notification_filter_is_400(self, client):
        session = signup(client, "anna")

        response = client.post(
            "/notifications", json={"filter": "mentions"}, headers=session["headers"]
        )

        assert response.status_code == 400


class TestDeleteBlog:
    def test_delete_blog_removes_everything(self, client):
        author = signup(client, "bert")
        reader = signup(client, "anna")
        blog = publish(client, author["headers"])
        _comment(client, reader, blog, "Nice")
        client.post(
            "/like-blog",
            json={"_id": blog["_id"], "isLikedByUser": False},
            headers=reader["headers"],
        )

        response = client.post(
            "/delete-blog", json={"blog_id": blog["blog_id"]}, headers=author["headers"]
        )

        assert response.status_code == 200
        assert client.post("/get-blog", json={"blog_id": blog["blog_id"]}).status_code == 404
        assert _notifications(client, author) == []
        profile = client.post("/get-profile", json={"username": "bert"}).json()
        assert profile["total_posts"] == 0

    def test_only_author_can_delete_blog(self, client):
        author = signup(client, "bert")
        other = signup(client, "anna")
        blog = publish(client, author["headers"])

        response = client.post(
            "/delete-blog", json={"blog_id": blog["blog_id"]}, headers=other["headers"]
        )

        assert response.status_code == 403
