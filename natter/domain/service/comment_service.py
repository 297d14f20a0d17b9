"""Comment domain service."""

from typing import Sequence

import logfire

from natter.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from natter.domain.model.comment import Comment
from natter.domain.model.comment_tree import CommentNode
from natter.domain.repository import CommentRepository, LikeRepository, PostRepository
from natter.domain.value import CommentId, DisplayName, LikeSubject, PostId, UserId
from natter.util.clock import Clock, IdGenerator

from .base import Service
from .comment_tree import build_comment_tree, count_comments_in_tree


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        like_repository: LikeRepository,
        clock: Clock,
        id_generator: IdGenerator,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (to check the commented post exists)
            like_repository: Like repository (for cascading deletes)
            clock: Source of creation timestamps
            id_generator: Source of new comment IDs
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.like_repository = like_repository
        self.clock = clock
        self.id_generator = id_generator

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        author_name: DisplayName,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            author_name: Author display name
            content: Comment text (trimmed before storage)
            parent_id: Parent comment ID for replies (None for root comments)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or parent belongs to another post
            NotFoundError: If the post or parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = content.strip()
            if not content:
                logfire.warn("Empty comment rejected", post_id=str(post_id))
                raise ValidationError("Comment content cannot be empty")

            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Comment on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            # If replying, verify parent exists on the same post
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to the specified post"
                    )

            now = self.clock.now()
            comment = Comment(
                id=CommentId(self.id_generator.new_id()),
                post_id=post_id,
                author_id=author_id,
                author_name=author_name,
                content=content,
                parent_id=parent_id,
                like_count=0,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=not saved.is_root,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Flat list of comments
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def get_comment_tree(self, post_id: PostId) -> list[CommentNode]:
        """Fetch a post's comments and assemble them into a reply tree.

        The tree is rebuilt from scratch on every call.

        Args:
            post_id: Post ID

        Returns:
            Root comment nodes with nested replies
        """
        comments = await self.get_comments_for_post(post_id)
        with logfire.span("comment_service.build_tree", post_id=str(post_id)):
            roots = build_comment_tree(comments)
            logfire.info(
                "Comment tree built",
                post_id=str(post_id),
                comments=len(comments),
                roots=len(roots),
            )
            attached = count_comments_in_tree(roots)
            if attached < len(comments):
                # Only a parent loop keeps a stored comment out of the tree
                logfire.warn(
                    "Comments unreachable from any root",
                    post_id=str(post_id),
                    unreachable=len(comments) - attached,
                )
            return roots

    async def get_root_comments(
        self, post_id: PostId, limit: int = 20, offset: int = 0
    ) -> list[Comment]:
        """Get root comments of a post, newest first."""
        with logfire.span(
            "comment_service.get_root_comments",
            post_id=str(post_id),
            limit=limit,
            offset=offset,
        ):
            return await self.comment_repository.find_roots(
                post_id, limit=limit, offset=offset
            )

    async def get_replies(
        self, comment_id: CommentId, limit: int | None = None, offset: int = 0
    ) -> list[Comment]:
        """Get direct replies of a comment, oldest first.

        Args:
            comment_id: Parent comment ID
            limit: Maximum number of replies (None for all)
            offset: Number of replies to skip

        Returns:
            Direct replies
        """
        with logfire.span(
            "comment_service.get_replies",
            comment_id=str(comment_id),
            limit=limit,
            offset=offset,
        ):
            return await self.comment_repository.find_children(
                comment_id, limit=limit, offset=offset
            )

    async def count_for_post(self, post_id: PostId) -> int:
        """Count all comments on a post."""
        return await self.comment_repository.count_by_post(post_id)

    async def collect_descendant_ids(self, comment_id: CommentId) -> list[CommentId]:
        """Collect IDs of every reply below a comment.

        Walks the reply tree depth-first, fetching each comment's direct
        replies before descending into them. There is no depth limit.

        Args:
            comment_id: Comment whose subtree to collect

        Returns:
            Descendant IDs (the comment itself excluded)
        """
        descendants: list[CommentId] = []
        for reply in await self.comment_repository.find_children(comment_id):
            descendants.append(reply.id)
            descendants.extend(await self.collect_descendant_ids(reply.id))
        return descendants

    async def delete_comment(
        self, comment_id: CommentId, user_id: UserId
    ) -> list[CommentId]:
        """Delete a comment together with all of its replies.

        Likes on every affected comment are removed before the comments.

        Args:
            comment_id: Comment to delete
            user_id: Requesting user (must be the author)

        Returns:
            IDs of all deleted comments, the requested one first

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the comment's author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Delete of non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.author_id != user_id:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(comment_id), str(user_id)
                )

            comment_ids = [comment_id] + await self.collect_descendant_ids(comment_id)

            likes_deleted = await self.like_repository.delete_by_subjects(
                LikeSubject.COMMENT, comment_ids
            )
            comments_deleted = await self.comment_repository.delete_many(comment_ids)

            logfire.info(
                "Comment thread deleted",
                comment_id=str(comment_id),
                comments_deleted=comments_deleted,
                likes_deleted=likes_deleted,
            )
            return comment_ids

    async def count_for_posts(self, post_ids: Sequence[PostId]) -> int:
        """Count all comments across several posts."""
        if not post_ids:
            return 0
        return await self.comment_repository.count_by_posts(post_ids)
