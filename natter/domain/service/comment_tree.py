"""Comment tree construction and utilities.

Comments are stored flat with a parent_id self-reference. These functions
assemble them into a reply tree and operate on that tree in memory: walking,
searching, sorting, filtering, paginating and formatting it for display.

All functions are pure: they never mutate their input and never touch the
database. Transforms return new CommentNode objects that share the
underlying (immutable) Comment models.
"""

from collections.abc import Iterator, Sequence
from dataclasses import replace
from typing import Callable

from natter.domain.error import ValidationError
from natter.domain.model.comment import Comment
from natter.domain.model.comment_tree import (
    AuthorStat,
    CommentFilter,
    CommentNode,
    CommentPage,
    DisplayComment,
    Pagination,
    TreeStats,
    TreeValidation,
)
from natter.domain.value import CommentId, CommentSort, UserId

# Recursion budget for validate_comment_tree
MAX_VALIDATION_DEPTH = 50

TOP_AUTHORS_LIMIT = 5


def build_comment_tree(comments: Sequence[Comment]) -> list[CommentNode]:
    """Build a reply tree from a flat list of comments.

    Algorithm:
    1. Create one node per comment and an id -> node lookup
    2. Attach each node to its parent's replies, in input order
    3. Nodes without a parent, or whose parent is not in the input, become roots

    Sibling order follows input order, so comments fetched oldest-first
    produce replies in creation order. O(n) time and space.

    Args:
        comments: Comments of a single post, ordered by creation time

    Returns:
        Root nodes with replies populated recursively
    """
    nodes = [CommentNode(comment=comment) for comment in comments]

    lookup: dict[CommentId, CommentNode] = {}
    for node in nodes:
        lookup.setdefault(node.id, node)

    roots: list[CommentNode] = []
    for node in nodes:
        parent = lookup.get(node.parent_id) if node.parent_id else None
        if parent is not None and parent is not node:
            parent.replies.append(node)
        else:
            roots.append(node)

    for node in nodes:
        node.reply_count = len(node.replies)

    return roots


def iter_comment_tree(roots: Sequence[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node depth-first, parents before their replies."""
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.replies))


def flatten_comment_tree(roots: Sequence[CommentNode]) -> list[CommentNode]:
    """Flatten a tree into a pre-order list (root, then its replies recursively)."""
    return list(iter_comment_tree(roots))


def count_comments_in_tree(roots: Sequence[CommentNode]) -> int:
    """Count all comments in a tree, replies included."""
    return sum(1 for _ in iter_comment_tree(roots))


def comment_tree_depth(roots: Sequence[CommentNode]) -> int:
    """Return the maximum nesting level.

    Root comments are level 1; an empty tree has depth 0.
    """
    depth = 0
    level = list(roots)
    while level:
        depth += 1
        level = [reply for node in level for reply in node.replies]
    return depth


def find_comment_in_tree(
    roots: Sequence[CommentNode], comment_id: CommentId
) -> CommentNode | None:
    """Find a node by comment ID (first depth-first match), or None."""
    for node in iter_comment_tree(roots):
        if node.id == comment_id:
            return node
    return None


def comment_path(
    roots: Sequence[CommentNode], comment_id: CommentId
) -> list[CommentId] | None:
    """Return the IDs from the thread root down to the target comment.

    Args:
        roots: Tree to search
        comment_id: Target comment ID

    Returns:
        Ancestor IDs followed by the target ID, or None if not in the tree
    """
    stack: list[tuple[CommentNode, list[CommentId]]] = [
        (node, [node.id]) for node in reversed(roots)
    ]
    while stack:
        node, path = stack.pop()
        if node.id == comment_id:
            return path
        stack.extend((reply, path + [reply.id]) for reply in reversed(node.replies))
    return None


_SORT_KEYS: dict[CommentSort, tuple[Callable[[CommentNode], object], bool]] = {
    CommentSort.NEWEST: (lambda node: node.created_at, True),
    CommentSort.OLDEST: (lambda node: node.created_at, False),
    CommentSort.MOST_LIKED: (lambda node: node.like_count, True),
    CommentSort.MOST_REPLIES: (lambda node: node.reply_count, True),
}


def sort_comments(
    roots: Sequence[CommentNode],
    sort_by: CommentSort,
    recursive: bool = True,
) -> list[CommentNode]:
    """Sort a tree by one of the CommentSort criteria.

    The sort is stable: ties keep their original relative order.

    Args:
        roots: Nodes to sort
        sort_by: Sort criterion
        recursive: Whether to sort every level of replies the same way

    Returns:
        New list of new nodes; the input tree is left untouched
    """
    key, descending = _SORT_KEYS[sort_by]
    ordered = sorted(roots, key=key, reverse=descending)

    if recursive:
        return [
            replace(node, replies=sort_comments(node.replies, sort_by, True))
            for node in ordered
        ]
    return [replace(node, replies=list(node.replies)) for node in ordered]


def _matches(node: CommentNode, criteria: CommentFilter, depth: int) -> bool:
    if criteria.content and criteria.content.lower() not in node.content.lower():
        return False
    if criteria.author_id is not None and node.author_id != criteria.author_id:
        return False
    if (
        criteria.author_name
        and criteria.author_name.lower() not in node.author_name.root.lower()
    ):
        return False
    if criteria.min_likes is not None and node.like_count < criteria.min_likes:
        return False
    if criteria.max_depth is not None and depth > criteria.max_depth:
        return False
    return True


def filter_comments(
    roots: Sequence[CommentNode],
    criteria: CommentFilter,
    depth: int = 1,
) -> list[CommentNode]:
    """Filter a tree, keeping nodes that match every supplied predicate.

    A node that does not match is dropped together with its whole subtree.
    Replies of a kept node are filtered recursively while the node is above
    `criteria.max_depth`; at the depth bound its replies are dropped.

    Args:
        roots: Nodes to filter
        criteria: Filter predicates
        depth: Depth of `roots` (root comments are depth 1)

    Returns:
        New list of matching nodes
    """
    kept: list[CommentNode] = []
    for node in roots:
        if not _matches(node, criteria, depth):
            continue

        if criteria.max_depth is None or depth < criteria.max_depth:
            replies = filter_comments(node.replies, criteria, depth + 1)
        else:
            replies = []

        kept.append(replace(node, replies=replies))
    return kept


def paginate_comments(
    roots: Sequence[CommentNode],
    page: int = 1,
    limit: int = 10,
) -> CommentPage:
    """Paginate the top level of a tree. Replies are never paginated.

    Args:
        roots: Root nodes
        page: 1-indexed page number
        limit: Page size

    Returns:
        Page slice with pagination metadata. Pages past the end are empty.

    Raises:
        ValidationError: If page or limit is below 1
    """
    if page < 1:
        raise ValidationError(f"Page must be at least 1, got {page}")
    if limit < 1:
        raise ValidationError(f"Limit must be at least 1, got {limit}")

    total = len(roots)
    total_pages = (total + limit - 1) // limit
    start = (page - 1) * limit

    return CommentPage(
        comments=list(roots[start : start + limit]),
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        ),
    )


def format_comments_for_display(
    roots: Sequence[CommentNode],
    max_depth: int = 10,
    collapse_after_depth: int = 5,
) -> list[DisplayComment]:
    """Flatten a tree into display rows with indentation metadata.

    Rows are emitted in pre-order. Display depth starts at 0 for roots.
    A row is collapsed once its depth reaches `collapse_after_depth`, and it
    has more replies when it has replies but sits at or below `max_depth`.
    Replies of collapsed rows and of rows at `max_depth` are not emitted.

    Args:
        roots: Tree to format
        max_depth: Deepest display level to descend into
        collapse_after_depth: Depth from which rows are collapsed

    Returns:
        Display rows
    """
    rows: list[DisplayComment] = []

    def visit(
        nodes: Sequence[CommentNode], depth: int, parent_path: list[CommentId]
    ) -> None:
        for node in nodes:
            thread_path = parent_path + [node.id]
            is_collapsed = depth >= collapse_after_depth
            rows.append(
                DisplayComment(
                    comment=node.comment,
                    display_depth=depth,
                    is_collapsed=is_collapsed,
                    has_more_replies=bool(node.replies) and depth >= max_depth,
                    thread_path=thread_path,
                    reply_count=node.reply_count,
                )
            )
            if node.replies and depth < max_depth and not is_collapsed:
                visit(node.replies, depth + 1, thread_path)

    visit(roots, 0, [])
    return rows


def comment_tree_stats(roots: Sequence[CommentNode]) -> TreeStats:
    """Compute aggregate statistics over a tree.

    Top authors are the five most prolific commenters; ties keep the order in
    which authors first appear in a pre-order walk.
    """
    flattened = flatten_comment_tree(roots)
    total_comments = len(flattened)
    total_likes = sum(node.like_count for node in flattened)

    authors: dict[UserId, AuthorStat] = {}
    for node in flattened:
        stat = authors.get(node.author_id)
        if stat is None:
            authors[node.author_id] = AuthorStat(
                author_id=node.author_id, name=node.author_name.root, count=1
            )
        else:
            authors[node.author_id] = stat.model_copy(update={"count": stat.count + 1})

    top_authors = sorted(authors.values(), key=lambda stat: stat.count, reverse=True)

    return TreeStats(
        total_comments=total_comments,
        total_likes=total_likes,
        max_depth=comment_tree_depth(roots),
        top_level_comments=len(roots),
        average_likes_per_comment=(
            total_likes / total_comments if total_comments > 0 else 0.0
        ),
        top_authors=top_authors[:TOP_AUTHORS_LIMIT],
    )


def validate_comment_tree(
    roots: Sequence[CommentNode],
    max_depth: int = MAX_VALIDATION_DEPTH,
    comments: Sequence[Comment] | None = None,
) -> TreeValidation:
    """Check a tree for integrity problems.

    Every node is visited once. Reported problems:
    - duplicate comment IDs
    - empty content, missing author or post ID
    - a node that reappears on its own ancestor path (a cycle)
    - nesting deeper than `max_depth`, which stops descent into that branch
    - comments of `comments` that no root reaches; build_comment_tree
      leaves out comments whose parent chain loops back on itself

    Args:
        roots: Tree to validate
        max_depth: Recursion budget per branch
        comments: Flat comments the tree was built from

    Returns:
        Validation report; problems are listed, never raised
    """
    errors: list[str] = []
    seen_ids: set[CommentId] = set()

    def visit(node: CommentNode, depth: int, ancestors: frozenset[int]) -> None:
        comment = node.comment
        if comment.id in seen_ids:
            errors.append(f"Duplicate comment ID found: {comment.id}")
        seen_ids.add(comment.id)

        if not comment.content or not comment.content.strip():
            errors.append(f"Comment {comment.id} has empty content")
        if comment.author_id is None:
            errors.append(f"Comment {comment.id} missing authorId")
        if comment.post_id is None:
            errors.append(f"Comment {comment.id} missing postId")

        if depth > max_depth:
            errors.append(f"Possible circular reference detected at comment {comment.id}")
            return

        path = ancestors | {id(node)}
        for reply in node.replies:
            if id(reply) in path:
                errors.append(f"Circular reference detected at comment {reply.id}")
                continue
            visit(reply, depth + 1, path)

    for root in roots:
        visit(root, 0, frozenset())

    for comment in comments or ():
        if comment.id not in seen_ids:
            seen_ids.add(comment.id)
            errors.append(f"Circular reference detected at comment {comment.id}")

    return TreeValidation(is_valid=not errors, errors=errors)
