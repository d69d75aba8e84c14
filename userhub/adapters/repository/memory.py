"""
In-memory repository adapters - Implement UserRepository and PostRepository.

Dict-backed stores for development and tests. Ids come from a counter
starting at 1. A lock guards each store so instances can be shared
between threads.
"""

import threading
from dataclasses import replace

from userhub.domain.exceptions import EmailAlreadyRegistered
from userhub.domain.models import Post, User
from userhub.domain.ports import UserRepository


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with a dict keyed by id.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def save(self, user: User) -> User:
        """
        Insert or overwrite a user.

        Users saved with an explicit id keep it, and the counter moves
        past it so generated ids never collide.

        Raises:
            EmailAlreadyRegistered: If another id already holds the email
        """
        with self._lock:
            for stored in self._users.values():
                if stored.email == user.email and stored.id != user.id:
                    raise EmailAlreadyRegistered(user.email)

            if user.id is None:
                user = replace(user, id=self._next_id)
            self._next_id = max(self._next_id, user.id + 1)
            self._users[user.id] = user
            return user

    def find_by_id(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user
            return None


class InMemoryPostRepository:
    """
    Implements PostRepository protocol with a dict keyed by id.

    Reads rebuild the writer from the user repository, so a post always
    carries its writer as it is now rather than as it was when saved.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository
        self._posts: dict[int, Post] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def save(self, post: Post) -> Post:
        with self._lock:
            if post.id is None:
                post = replace(post, id=self._next_id)
            self._next_id = max(self._next_id, post.id + 1)
            self._posts[post.id] = post
            return post

    def find_by_id(self, post_id: int) -> Post | None:
        with self._lock:
            post = self._posts.get(post_id)
        if post is None:
            return None

        writer = self._user_repository.find_by_id(post.writer.id)
        if writer is None:
            return post
        return replace(post, writer=writer)
