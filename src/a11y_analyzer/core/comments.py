"""Comment-proximity cache.

The first query against a file extracts its comments once, sorts them by
start offset and keeps the result in a ``WeakKeyDictionary`` keyed by the
file's ``SourceFile`` root. The cache never keeps a tree alive: once the
host drops the root, its entry goes with it.

A comment is near a node when it overlaps ``[start - window, end + window]``.
Queries bisect to the first comment not strictly before the lower edge and
stop at the first comment starting past the upper edge.
"""

from __future__ import annotations

import logging
import weakref
from bisect import bisect_left
from dataclasses import dataclass

from a11y_analyzer.tree.adapters import root_of
from a11y_analyzer.tree.nodes import CommentEntry, ElementNode, SourceFile

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _FileComments:
    entries: tuple[CommentEntry, ...]
    starts: tuple[int, ...]  # entries[i].start_pos, for bisection


class CommentCache:
    """Per-file sorted comment lists, held weakly by file root.

    One instance may serve many files; it is not safe to share one instance
    between threads analysing different files concurrently.
    """

    def __init__(self) -> None:
        self._files: weakref.WeakKeyDictionary[SourceFile, _FileComments] = weakref.WeakKeyDictionary()
        self.extractions = 0  # cold-path count, for diagnostics and tests

    def comments_for(self, root: SourceFile) -> tuple[CommentEntry, ...]:
        return self._load(root).entries

    def get_comments_near(self, node: ElementNode, window: int) -> tuple[CommentEntry, ...]:
        root = root_of(node)
        if root is None:
            return ()
        cached = self._load(root)
        entries = cached.entries
        if not entries:
            return ()

        low = node.span.start - window
        high = node.span.end + window

        i = bisect_left(cached.starts, low)
        # Comments never overlap, so only the one just before ``low`` can reach into the window.
        if i > 0 and entries[i - 1].end_pos >= low:
            i -= 1

        near: list[CommentEntry] = []
        for entry in entries[i:]:
            if entry.start_pos > high:
                break
            near.append(entry)
        return tuple(near)

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, root: SourceFile) -> bool:
        return root in self._files

    def _load(self, root: SourceFile) -> _FileComments:
        cached = self._files.get(root)
        if cached is None:
            entries = tuple(sorted(
                (CommentEntry(c.text, c.start, c.end) for c in root.comments),
                key=lambda e: (e.start_pos, e.end_pos),
            ))
            cached = _FileComments(entries, tuple(e.start_pos for e in entries))
            self._files[root] = cached
            self.extractions += 1
            log.debug("Cached %d comments for %s", len(entries), root.path)
        return cached


comment_cache = CommentCache()


def get_comments_near(node: ElementNode, window: int) -> tuple[CommentEntry, ...]:
    """Comments near ``node`` using the process-wide cache."""
    return comment_cache.get_comments_near(node, window)
