# -*- coding: utf-8 -*-
"""
Alignment of two token lists.

The aligner looks for the single longest run of tokens shared by both
documents, then keeps looking in the unmatched areas before and after it
until no shared run is left. Work is kept on an explicit stack of
:class:`Segment` objects so deep documents never hit the recursion limit.
"""
import logging
from bisect import bisect_left

from .config import WHITESPACE_KEY

logger = logging.getLogger(__name__)


class Match(object):
    """
    A block of consecutive tokens present in both documents, in global
    coordinates. Ends are inclusive.
    """

    __slots__ = ('start_in_before', 'start_in_after', 'length')

    def __init__(self, start_in_before, start_in_after, length):
        self.start_in_before = start_in_before
        self.start_in_after = start_in_after
        self.length = length

    @property
    def end_in_before(self):
        return self.start_in_before + self.length - 1

    @property
    def end_in_after(self):
        return self.start_in_after + self.length - 1

    def __eq__(self, other):
        if not isinstance(other, Match):
            return NotImplemented
        return (self.start_in_before, self.start_in_after, self.length) == \
            (other.start_in_before, other.start_in_after, other.length)

    def __ne__(self, other):
        rv = self.__eq__(other)
        return rv if rv is NotImplemented else not rv

    __hash__ = None

    def __repr__(self):
        return 'Match(start_in_before=%d, start_in_after=%d, length=%d)' % (
            self.start_in_before, self.start_in_after, self.length)


class Segment(object):
    """
    The part of both documents currently searched for a match.

    `before_index` / `after_index` are the global positions of the first
    token of each slice.
    """

    def __init__(self, before_tokens, after_tokens, before_map, after_map,
                 before_index, after_index):
        self.before_tokens = before_tokens
        self.after_tokens = after_tokens
        self.before_map = before_map
        self.after_map = after_map
        self.before_index = before_index
        self.after_index = after_index

    def __repr__(self):
        return '<Segment before=%d+%d after=%d+%d>' % (
            self.before_index, len(self.before_tokens),
            self.after_index, len(self.after_tokens))


def create_map(tokens):
    """Map each token key to the ordered list of indices where it occurs."""
    rv = {}
    for index, token in enumerate(tokens):
        rv.setdefault(token.key, []).append(index)
    return rv


def create_segment(before_tokens, after_tokens, before_index, after_index):
    return Segment(before_tokens, after_tokens,
                   create_map(before_tokens), create_map(after_tokens),
                   before_index, after_index)


def compare_matches(m1, m2):
    """
    Relative position of `m2` with respect to `m1`: -1 if it comes before,
    1 if it comes after, 0 if the two criss-cross.
    """
    if m2.end_in_before < m1.start_in_before and m2.end_in_after < m1.start_in_after:
        return -1
    if m2.start_in_before > m1.end_in_before and m2.start_in_after > m1.end_in_after:
        return 1
    return 0


class MatchOrdering(object):
    """
    Keeps matches sorted as they are discovered. A match whose position is
    ambiguous with respect to a neighbour is dropped.
    """

    def __init__(self):
        self._matches = []
        self._starts = []

    def add(self, match):
        idx = bisect_left(self._starts, match.start_in_before)
        if idx > 0 and compare_matches(self._matches[idx - 1], match) != 1:
            logger.debug('Dropping %r, criss-crosses %r', match, self._matches[idx - 1])
            return False
        if idx < len(self._matches) and compare_matches(self._matches[idx], match) != -1:
            logger.debug('Dropping %r, criss-crosses %r', match, self._matches[idx])
            return False
        self._matches.insert(idx, match)
        self._starts.insert(idx, match.start_in_before)
        return True

    def __len__(self):
        return len(self._matches)

    def __iter__(self):
        return iter(self._matches)

    def to_list(self):
        return list(self._matches)


def get_full_match(segment, before_start, after_start, min_length, look_behind):
    """
    Extend a match starting at the given local positions as far as it goes.

    Returns None when the candidate cannot beat `min_length`. With
    `look_behind`, a whitespace token right before the start on both sides
    is pulled into the match.
    """
    before_tokens = segment.before_tokens
    after_tokens = segment.after_tokens

    min_before_index = before_start + min_length
    min_after_index = after_start + min_length
    if min_before_index >= len(before_tokens) or min_after_index >= len(after_tokens):
        return None

    # Quick check: the token right after `min_length` must agree or this
    # candidate cannot be longer than the current best.
    if min_length:
        if before_tokens[min_before_index].key != after_tokens[min_after_index].key:
            return None

    current_length = 1
    before_index = before_start + current_length
    after_index = after_start + current_length
    while before_index < len(before_tokens) and after_index < len(after_tokens):
        if before_tokens[before_index].key != after_tokens[after_index].key:
            break
        current_length += 1
        before_index = before_start + current_length
        after_index = after_start + current_length

    if look_behind and before_start > 0 and after_start > 0:
        if (before_tokens[before_start - 1].key == WHITESPACE_KEY
                and after_tokens[after_start - 1].key == WHITESPACE_KEY):
            before_start -= 1
            after_start -= 1
            current_length += 1

    return Match(before_start + segment.before_index,
                 after_start + segment.after_index,
                 current_length)


def find_best_match(segment):
    """
    Longest match in `segment`. Ties keep the first one found (lowest
    before position, then lowest after position).
    """
    before_tokens = segment.before_tokens
    after_map = segment.after_map
    last_space = None
    best_match = None

    for before_index, before_token in enumerate(before_tokens):
        remaining_tokens = len(before_tokens) - before_index
        if best_match is not None and remaining_tokens < best_match.length:
            break

        # Whitespace is too common to start a match; remember it so the
        # next token can try to pull it in.
        if before_token.key == WHITESPACE_KEY:
            last_space = before_index
            continue
        look_behind = last_space == before_index - 1

        for after_index in after_map.get(before_token.key, ()):
            best_length = best_match.length if best_match is not None else 0
            match = get_full_match(segment, before_index, after_index,
                                   best_length, look_behind)
            if match is not None and match.length > best_length:
                best_match = match

    return best_match


def find_matching_blocks(before_tokens, after_tokens):
    """
    All the matching blocks between two token lists, ordered and
    non-overlapping in both documents.
    """
    matches = MatchOrdering()
    segments = [create_segment(before_tokens, after_tokens, 0, 0)]

    while segments:
        segment = segments.pop()
        match = find_best_match(segment)
        if match is None or not match.length:
            continue

        local_before = match.start_in_before - segment.before_index
        local_after = match.start_in_after - segment.after_index

        if local_before > 0 and local_after > 0:
            segments.append(create_segment(
                segment.before_tokens[:local_before],
                segment.after_tokens[:local_after],
                segment.before_index, segment.after_index))

        right_before = segment.before_tokens[local_before + match.length:]
        right_after = segment.after_tokens[local_after + match.length:]
        if right_before and right_after:
            segments.append(create_segment(
                right_before, right_after,
                match.end_in_before + 1, match.end_in_after + 1))

        matches.add(match)

    logger.debug('Found %d matching blocks', len(matches))
    return matches.to_list()
