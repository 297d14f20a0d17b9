"""Unit tests for comment tree construction and transforms."""

from uuid import uuid4

import pytest

from natter.domain.error import ValidationError
from natter.domain.model import Comment, CommentFilter, CommentNode
from natter.domain.service.comment_tree import (
    build_comment_tree,
    comment_path,
    comment_tree_depth,
    comment_tree_stats,
    count_comments_in_tree,
    filter_comments,
    find_comment_in_tree,
    flatten_comment_tree,
    format_comments_for_display,
    paginate_comments,
    sort_comments,
    validate_comment_tree,
)
from natter.domain.value import CommentSort
from tests.conftest import make_comment


@pytest.fixture
def post_id():
    return uuid4()


@pytest.fixture
def scenario(post_id):
    """A(root, t=0), B(root, t=1), C(reply to A, t=2)."""
    a = make_comment(post_id, "A", minutes=0)
    b = make_comment(post_id, "B", minutes=1)
    c = make_comment(post_id, "C", parent_id=a.id, minutes=2)
    return a, b, c


def _ids(nodes):
    return [node.id for node in nodes]


class TestBuildCommentTree:
    """Tests for build_comment_tree()."""

    def test_builds_roots_and_replies(self, scenario):
        """Replies should nest under their parent; roots keep input order."""
        a, b, c = scenario

        roots = build_comment_tree([a, b, c])

        assert _ids(roots) == [a.id, b.id]
        assert _ids(roots[0].replies) == [c.id]
        assert roots[1].replies == []

    def test_empty_input_gives_empty_tree(self):
        assert build_comment_tree([]) == []

    def test_flatten_is_permutation_of_input(self, post_id):
        """Every comment should appear exactly once in the flattened tree."""
        root = make_comment(post_id, minutes=0)
        reply = make_comment(post_id, parent_id=root.id, minutes=1)
        nested = make_comment(post_id, parent_id=reply.id, minutes=2)
        sibling = make_comment(post_id, parent_id=root.id, minutes=3)
        other_root = make_comment(post_id, minutes=4)
        comments = [root, reply, nested, sibling, other_root]

        roots = build_comment_tree(comments)

        flat_ids = [node.id for node in flatten_comment_tree(roots)]
        assert sorted(flat_ids) == sorted(c.id for c in comments)
        for node in flatten_comment_tree(roots):
            expected = [c.id for c in comments if c.parent_id == node.id]
            assert _ids(node.replies) == expected

    def test_orphan_becomes_root(self, post_id):
        """A comment whose parent is not in the input should become a root."""
        orphan = make_comment(post_id, parent_id=uuid4())

        roots = build_comment_tree([orphan])

        assert _ids(roots) == [orphan.id]

    def test_self_parent_becomes_root(self, post_id):
        """A comment listing itself as parent should not be attached to itself."""
        comment_id = uuid4()
        looped = make_comment(post_id, parent_id=comment_id, comment_id=comment_id)

        roots = build_comment_tree([looped])

        assert _ids(roots) == [looped.id]
        assert roots[0].replies == []

    def test_reply_before_parent_in_input(self, post_id):
        """Input order should not matter for attaching replies."""
        parent = make_comment(post_id, minutes=0)
        reply = make_comment(post_id, parent_id=parent.id, minutes=1)

        roots = build_comment_tree([reply, parent])

        assert _ids(roots) == [parent.id]
        assert _ids(roots[0].replies) == [reply.id]

    def test_reply_count_is_direct_replies(self, scenario):
        a, b, c = scenario

        roots = build_comment_tree([a, b, c])

        assert roots[0].reply_count == 1
        assert roots[1].reply_count == 0
        assert roots[0].replies[0].reply_count == 0


class TestTraversal:
    """Tests for counting, depth, lookup and path functions."""

    def test_count_and_depth(self, scenario):
        roots = build_comment_tree(list(scenario))

        assert count_comments_in_tree(roots) == 3
        assert comment_tree_depth(roots) == 2

    def test_empty_tree_has_depth_zero(self):
        assert comment_tree_depth([]) == 0
        assert count_comments_in_tree([]) == 0

    def test_flatten_is_pre_order(self, scenario):
        a, b, c = scenario
        roots = build_comment_tree([a, b, c])

        assert _ids(flatten_comment_tree(roots)) == [a.id, c.id, b.id]

    def test_find_comment(self, scenario):
        a, b, c = scenario
        roots = build_comment_tree([a, b, c])

        assert find_comment_in_tree(roots, c.id).comment == c
        assert find_comment_in_tree(roots, uuid4()) is None

    def test_comment_path(self, post_id):
        root = make_comment(post_id, minutes=0)
        reply = make_comment(post_id, parent_id=root.id, minutes=1)
        nested = make_comment(post_id, parent_id=reply.id, minutes=2)
        roots = build_comment_tree([root, reply, nested])

        assert comment_path(roots, nested.id) == [root.id, reply.id, nested.id]
        assert comment_path(roots, root.id) == [root.id]
        assert comment_path(roots, uuid4()) is None


class TestSortComments:
    """Tests for sort_comments()."""

    def test_oldest_keeps_chronological_order(self, scenario):
        a, b, c = scenario
        roots = build_comment_tree([a, b, c])

        sorted_roots = sort_comments(roots, CommentSort.OLDEST)

        assert _ids(sorted_roots) == [a.id, b.id]

    def test_newest_reverses_roots(self, scenario):
        a, b, c = scenario
        roots = build_comment_tree([a, b, c])

        sorted_roots = sort_comments(roots, CommentSort.NEWEST)

        assert _ids(sorted_roots) == [b.id, a.id]

    def test_most_liked_is_stable_for_ties(self, post_id):
        first = make_comment(post_id, like_count=2, minutes=0)
        second = make_comment(post_id, like_count=5, minutes=1)
        third = make_comment(post_id, like_count=2, minutes=2)
        roots = build_comment_tree([first, second, third])

        sorted_roots = sort_comments(roots, CommentSort.MOST_LIKED)

        assert _ids(sorted_roots) == [second.id, first.id, third.id]

    def test_most_replies(self, post_id):
        quiet = make_comment(post_id, minutes=0)
        busy = make_comment(post_id, minutes=1)
        replies = [
            make_comment(post_id, parent_id=busy.id, minutes=2 + i) for i in range(2)
        ]
        roots = build_comment_tree([quiet, busy, *replies])

        sorted_roots = sort_comments(roots, CommentSort.MOST_REPLIES)

        assert _ids(sorted_roots) == [busy.id, quiet.id]

    def test_recursive_sort_orders_replies(self, post_id):
        root = make_comment(post_id, minutes=0)
        early = make_comment(post_id, parent_id=root.id, minutes=1)
        late = make_comment(post_id, parent_id=root.id, minutes=2)
        roots = build_comment_tree([root, early, late])

        recursive = sort_comments(roots, CommentSort.NEWEST)
        shallow = sort_comments(roots, CommentSort.NEWEST, recursive=False)

        assert _ids(recursive[0].replies) == [late.id, early.id]
        assert _ids(shallow[0].replies) == [early.id, late.id]

    def test_sort_is_idempotent_and_keeps_count(self, post_id):
        comments = [make_comment(post_id, minutes=m) for m in (3, 1, 2, 1)]
        roots = build_comment_tree(comments)

        once = sort_comments(roots, CommentSort.NEWEST)
        twice = sort_comments(once, CommentSort.NEWEST)

        assert _ids(once) == _ids(twice)
        assert len(once) == len(roots)

    def test_sort_leaves_input_untouched(self, scenario):
        a, b, c = scenario
        roots = build_comment_tree([a, b, c])

        sort_comments(roots, CommentSort.NEWEST)

        assert _ids(roots) == [a.id, b.id]


class TestFilterComments:
    """Tests for filter_comments()."""

    def test_content_filter_is_case_insensitive(self, post_id):
        match = make_comment(post_id, "Great PHOTO", minutes=0)
        other = make_comment(post_id, "nice", minutes=1)
        roots = build_comment_tree([match, other])

        kept = filter_comments(roots, CommentFilter(content="photo"))

        assert _ids(kept) == [match.id]

    def test_non_matching_parent_drops_subtree(self, post_id):
        parent = make_comment(post_id, "skip me", minutes=0)
        reply = make_comment(post_id, "keep me", parent_id=parent.id, minutes=1)
        roots = build_comment_tree([parent, reply])

        kept = filter_comments(roots, CommentFilter(content="keep"))

        assert kept == []

    def test_author_and_likes_filters_combine(self, post_id):
        bob = uuid4()
        liked_bob = make_comment(
            post_id, author_id=bob, author_name="Bob", like_count=3, minutes=0
        )
        unliked_bob = make_comment(
            post_id, author_id=bob, author_name="Bob", like_count=0, minutes=1
        )
        liked_alice = make_comment(post_id, author_name="Alice", like_count=4, minutes=2)
        roots = build_comment_tree([liked_bob, unliked_bob, liked_alice])

        kept = filter_comments(roots, CommentFilter(author_name="bo", min_likes=1))
        by_id = filter_comments(roots, CommentFilter(author_id=bob))

        assert _ids(kept) == [liked_bob.id]
        assert _ids(by_id) == [liked_bob.id, unliked_bob.id]

    def test_max_depth_drops_deeper_replies(self, post_id):
        root = make_comment(post_id, minutes=0)
        reply = make_comment(post_id, parent_id=root.id, minutes=1)
        nested = make_comment(post_id, parent_id=reply.id, minutes=2)
        roots = build_comment_tree([root, reply, nested])

        kept = filter_comments(roots, CommentFilter(max_depth=2))

        assert _ids(kept[0].replies) == [reply.id]
        assert kept[0].replies[0].replies == []
        # reply_count still reflects the unfiltered tree
        assert kept[0].replies[0].reply_count == 1

    def test_filter_does_not_accumulate(self, post_id):
        comment = make_comment(post_id, "hello", minutes=0)
        roots = build_comment_tree([comment])

        filter_comments(roots, CommentFilter(content="nope"))
        kept = filter_comments(roots, CommentFilter(content="hell"))

        assert _ids(kept) == [comment.id]


class TestPaginateComments:
    """Tests for paginate_comments()."""

    def test_first_page(self, scenario):
        a, b, c = scenario
        roots = build_comment_tree([a, b, c])

        page = paginate_comments(roots, page=1, limit=1)

        assert _ids(page.comments) == [a.id]
        assert page.comments[0].replies[0].id == c.id
        assert page.pagination.total == 2
        assert page.pagination.total_pages == 2
        assert page.pagination.has_next is True
        assert page.pagination.has_prev is False

    @pytest.mark.parametrize("page_number,limit", [(1, 3), (2, 3), (3, 3), (4, 3), (1, 10)])
    def test_page_bounds(self, post_id, page_number, limit):
        roots = build_comment_tree([make_comment(post_id, minutes=m) for m in range(7)])

        page = paginate_comments(roots, page=page_number, limit=limit)

        assert len(page.comments) <= limit
        assert page.pagination.has_next == (page_number * limit < 7)

    def test_page_past_end_is_empty(self, scenario):
        roots = build_comment_tree(list(scenario))

        page = paginate_comments(roots, page=5, limit=10)

        assert page.comments == []
        assert page.pagination.has_next is False
        assert page.pagination.has_prev is True

    def test_empty_roots(self):
        page = paginate_comments([], page=1, limit=10)

        assert page.comments == []
        assert page.pagination.total_pages == 0

    @pytest.mark.parametrize("page_number,limit", [(0, 10), (-1, 10), (1, 0)])
    def test_rejects_malformed_pagination(self, page_number, limit):
        with pytest.raises(ValidationError):
            paginate_comments([], page=page_number, limit=limit)


class TestFormatForDisplay:
    """Tests for format_comments_for_display()."""

    def _chain(self, post_id, length):
        comments = []
        parent_id = None
        for minute in range(length):
            comment = make_comment(post_id, parent_id=parent_id, minutes=minute)
            comments.append(comment)
            parent_id = comment.id
        return comments

    def test_rows_carry_depth_and_path(self, scenario):
        a, b, c = scenario
        roots = build_comment_tree([a, b, c])

        rows = format_comments_for_display(roots)

        assert [row.comment.id for row in rows] == [a.id, c.id, b.id]
        assert [row.display_depth for row in rows] == [0, 1, 0]
        assert rows[1].thread_path == [a.id, c.id]
        assert not any(row.is_collapsed for row in rows)

    def test_stops_at_max_depth(self, post_id):
        roots = build_comment_tree(self._chain(post_id, 4))

        rows = format_comments_for_display(roots, max_depth=1, collapse_after_depth=5)

        assert [row.display_depth for row in rows] == [0, 1]
        assert rows[-1].has_more_replies is True
        assert rows[0].has_more_replies is False

    def test_collapsed_rows_hide_descendants(self, post_id):
        roots = build_comment_tree(self._chain(post_id, 5))

        rows = format_comments_for_display(roots, max_depth=10, collapse_after_depth=2)

        assert [row.display_depth for row in rows] == [0, 1, 2]
        assert rows[-1].is_collapsed is True


class TestCommentTreeStats:
    """Tests for comment_tree_stats()."""

    def test_stats(self, post_id):
        alice, bob = uuid4(), uuid4()
        root = make_comment(post_id, author_id=alice, like_count=4, minutes=0)
        reply = make_comment(
            post_id, parent_id=root.id, author_id=bob, author_name="Bob",
            like_count=1, minutes=1,
        )
        second = make_comment(post_id, author_id=alice, like_count=1, minutes=2)
        roots = build_comment_tree([root, reply, second])

        stats = comment_tree_stats(roots)

        assert stats.total_comments == 3
        assert stats.total_likes == 6
        assert stats.max_depth == 2
        assert stats.top_level_comments == 2
        assert stats.average_likes_per_comment == 2.0
        assert [a.author_id for a in stats.top_authors] == [alice, bob]
        assert stats.top_authors[0].count == 2

    def test_empty_tree(self):
        stats = comment_tree_stats([])

        assert stats.total_comments == 0
        assert stats.average_likes_per_comment == 0.0
        assert stats.top_authors == []

    def test_top_authors_capped_at_five(self, post_id):
        comments = [
            make_comment(post_id, author_name=f"user{i}", minutes=i) for i in range(7)
        ]

        stats = comment_tree_stats(build_comment_tree(comments))

        assert len(stats.top_authors) == 5


class TestValidateCommentTree:
    """Tests for validate_comment_tree()."""

    def test_valid_tree(self, scenario):
        report = validate_comment_tree(build_comment_tree(list(scenario)))

        assert report.is_valid is True
        assert report.errors == []

    def test_duplicate_id_reported_once(self, post_id):
        comment_id = uuid4()
        first = make_comment(post_id, "one", comment_id=comment_id, minutes=0)
        second = make_comment(post_id, "two", comment_id=comment_id, minutes=1)

        report = validate_comment_tree(build_comment_tree([first, second]))

        assert report.is_valid is False
        duplicates = [e for e in report.errors if "Duplicate comment ID" in e]
        assert len(duplicates) == 1

    def test_missing_fields_reported(self, post_id):
        broken = Comment.model_construct(
            id=uuid4(),
            post_id=None,
            author_id=None,
            author_name=None,
            content="   ",
            parent_id=None,
            like_count=0,
        )

        report = validate_comment_tree([CommentNode(comment=broken)])

        assert report.is_valid is False
        assert len(report.errors) == 3
        assert any("empty content" in e for e in report.errors)

    def test_cycle_detected(self, post_id):
        node = CommentNode(comment=make_comment(post_id))
        node.replies.append(node)

        report = validate_comment_tree([node])

        assert report.is_valid is False
        assert any("Circular reference" in e for e in report.errors)

    def test_parent_loop_in_stored_comments_detected(self, post_id):
        """A and B name each other as parent; neither is reachable from R."""
        a_id, b_id = uuid4(), uuid4()
        a = make_comment(post_id, "A", parent_id=b_id, comment_id=a_id, minutes=0)
        b = make_comment(post_id, "B", parent_id=a_id, comment_id=b_id, minutes=1)
        r = make_comment(post_id, "R", minutes=2)
        comments = [a, b, r]

        roots = build_comment_tree(comments)
        report = validate_comment_tree(roots, comments=comments)

        assert _ids(roots) == [r.id]
        assert report.is_valid is False
        assert report.errors == [
            f"Circular reference detected at comment {a.id}",
            f"Circular reference detected at comment {b.id}",
        ]

    def test_source_comments_all_attached_is_valid(self, scenario):
        report = validate_comment_tree(build_comment_tree(scenario), comments=scenario)

        assert report.is_valid is True

    def test_depth_budget_flags_possible_cycle(self, post_id):
        comments = []
        parent_id = None
        for minute in range(8):
            comment = make_comment(post_id, parent_id=parent_id, minutes=minute)
            comments.append(comment)
            parent_id = comment.id

        report = validate_comment_tree(build_comment_tree(comments), max_depth=5)

        assert report.is_valid is False
        assert any("Possible circular reference" in e for e in report.errors)
