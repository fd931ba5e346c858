"""Strongly typed identifiers for the four stored collections.

NewType keeps a comment id from being passed where a blog id is expected.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
BlogId = NewType("BlogId", UUID)
CommentId = NewType("CommentId", UUID)
NotificationId = NewType("NotificationId", UUID)
