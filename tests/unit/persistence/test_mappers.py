"""Unit tests for the row mappers."""

from datetime import datetime
from uuid import uuid4

from blog.domain.value import NotificationType, UserId
from blog.persistence.mappers import (
    blog_to_dict,
    notification_to_dict,
    row_to_blog,
    row_to_comment,
    row_to_notification,
    row_to_user,
    user_to_dict,
)
from tests.conftest import make_blog, make_user


def test_user_row_round_trip():
    user = make_user("alice", blogs=[uuid4()], total_posts=1)

    row = user_to_dict(user)

    assert row["username"] == "alice"
    assert isinstance(row["social_links"], dict)
    assert row_to_user(row) == user


def test_user_row_tolerates_nulls():
    row = user_to_dict(make_user("bob"))
    row.update(bio=None, profile_img=None, social_links=None, blogs=None)

    user = row_to_user(row)

    assert user.bio == ""
    assert user.social_links.github == ""
    assert user.blogs == []


def test_blog_row_accepts_string_ids():
    blog = make_blog(UserId(uuid4()), comments=[uuid4()])
    row = blog_to_dict(blog)
    row["id"] = str(row["id"])
    row["author_id"] = str(row["author_id"])
    row["comments"] = [str(c) for c in row["comments"]]

    assert row_to_blog(row) == blog


def test_comment_row_without_parent():
    now = datetime.now()
    row = {
        "id": uuid4(),
        "blog_id": uuid4(),
        "blog_author": uuid4(),
        "comment": "Hello",
        "children": None,
        "commented_by": uuid4(),
        "is_reply": False,
        "parent": None,
        "commented_at": now,
        "updated_at": now,
    }

    comment = row_to_comment(row)

    assert comment.parent is None
    assert comment.children == []


def test_notification_type_stored_as_string():
    row = {
        "id": uuid4(),
        "type": "reply",
        "blog": uuid4(),
        "notification_for": uuid4(),
        "user": uuid4(),
        "comment": uuid4(),
        "reply": None,
        "replied_on_comment": str(uuid4()),
        "seen": False,
        "created_at": datetime.now(),
    }

    notification = row_to_notification(row)

    assert notification.type == NotificationType.REPLY
    assert notification_to_dict(notification)["type"] == "reply"
