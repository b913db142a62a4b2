"""Tests for the comment-proximity cache."""

from __future__ import annotations

import gc

from a11y_analyzer.core.comments import CommentCache
from a11y_analyzer.tree.builders import jsx, source_file, span
from a11y_analyzer.tree.nodes import Comment


def make_file(*comments: Comment, nodes=()):
    return source_file("App.jsx", list(nodes), comments=comments)


class TestGetCommentsNear:
    def test_sorted_by_start(self):
        node = jsx("div", at=span(50, 60))
        make_file(Comment("b", 70, 75), Comment("a", 30, 40), nodes=[node])
        near = CommentCache().get_comments_near(node, 40)
        assert [c.text for c in near] == ["a", "b"]

    def test_lower_edge_overlap(self):
        node = jsx("div", at=span(50, 60))
        make_file(Comment("x", 0, 10), nodes=[node])
        cache = CommentCache()
        assert [c.text for c in cache.get_comments_near(node, 40)] == ["x"]
        assert cache.get_comments_near(node, 39) == ()

    def test_upper_edge(self):
        node = jsx("div", at=span(50, 60))
        make_file(Comment("x", 100, 110), nodes=[node])
        cache = CommentCache()
        assert len(cache.get_comments_near(node, 40)) == 1
        assert cache.get_comments_near(node, 39) == ()

    def test_comment_inside_node(self):
        node = jsx("div", at=span(50, 90))
        make_file(Comment("inner", 60, 70), nodes=[node])
        assert len(CommentCache().get_comments_near(node, 0)) == 1

    def test_long_comment_spanning_lower_edge(self):
        node = jsx("div", at=span(200, 210))
        make_file(Comment("long", 0, 180), Comment("far", 500, 510), nodes=[node])
        near = CommentCache().get_comments_near(node, 40)
        assert [c.text for c in near] == ["long"]

    def test_file_without_comments(self):
        node = jsx("div")
        make_file(nodes=[node])
        assert CommentCache().get_comments_near(node, 40) == ()

    def test_detached_node(self):
        assert CommentCache().get_comments_near(jsx("div"), 40) == ()

    def test_positions_copied(self):
        node = jsx("div", at=span(20, 30))
        make_file(Comment(" a11y-ignore ", 0, 17), nodes=[node])
        (entry,) = CommentCache().get_comments_near(node, 40)
        assert (entry.text, entry.start_pos, entry.end_pos) == (" a11y-ignore ", 0, 17)


class TestCaching:
    def test_extracted_once_per_file(self):
        first, second = jsx("div", at=span(0, 5)), jsx("span", at=span(100, 105))
        make_file(Comment("c", 10, 20), nodes=[first, second])
        cache = CommentCache()
        cache.get_comments_near(first, 40)
        cache.get_comments_near(second, 40)
        cache.get_comments_near(first, 40)
        assert cache.extractions == 1
        assert len(cache) == 1

    def test_idempotent_regardless_of_query_order(self):
        nodes = [jsx("div", at=span(i * 50, i * 50 + 10)) for i in range(6)]
        comments = [Comment(f"c{i}", i * 50 + 20, i * 50 + 30) for i in range(6)]
        make_file(*reversed(comments), nodes=nodes)

        forward = CommentCache()
        expected = [forward.get_comments_near(n, 25) for n in nodes]

        backward = CommentCache()
        for n in reversed(nodes):
            backward.get_comments_near(n, 100)
            backward.get_comments_near(n, 25)
        assert [backward.get_comments_near(n, 25) for n in nodes] == expected

    def test_files_cached_independently(self):
        a, b = jsx("div", at=span(0, 5)), jsx("div", at=span(0, 5))
        make_file(Comment("in a", 6, 10), nodes=[a])
        make_file(Comment("in b", 6, 10), nodes=[b])
        cache = CommentCache()
        assert cache.get_comments_near(a, 5)[0].text == "in a"
        assert cache.get_comments_near(b, 5)[0].text == "in b"
        assert len(cache) == 2

    def test_does_not_keep_file_alive(self):
        cache = CommentCache()
        node = jsx("div", at=span(0, 5))
        root = make_file(Comment("c", 6, 10), nodes=[node])
        cache.get_comments_near(node, 5)
        assert root in cache

        del node, root
        gc.collect()
        assert len(cache) == 0
