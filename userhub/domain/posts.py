"""
Post domain service - Create, read and update posts.
"""

import logging
from dataclasses import dataclass

from .exceptions import ResourceNotFound
from .models import Post, PostCreate, PostUpdate
from .ports import ClockHolder, PostRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass
class PostService:
    """Domain service for posts; writers are resolved in any status."""

    repository: PostRepository
    user_repository: UserRepository
    clock_holder: ClockHolder

    def get_by_id(self, post_id: int) -> Post:
        post = self.repository.find_by_id(post_id)
        if post is None:
            raise ResourceNotFound("Posts", post_id)
        return post

    def create(self, post_create: PostCreate) -> Post:
        """
        Create a post written by an existing user.

        Raises:
            ResourceNotFound: If the writer does not exist
        """
        writer = self.user_repository.find_by_id(post_create.writer_id)
        if writer is None:
            raise ResourceNotFound("Users", post_create.writer_id)

        post = self.repository.save(Post.from_create(writer, post_create, self.clock_holder))
        logger.info("Created post id=%s by user id=%s", post.id, writer.id)
        return post

    def update(self, post_id: int, post_update: PostUpdate) -> Post:
        post = self.get_by_id(post_id).update(post_update, self.clock_holder)
        return self.repository.save(post)
