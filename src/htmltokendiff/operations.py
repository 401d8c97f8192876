# -*- coding: utf-8 -*-
"""
Edit operations between two token lists.

An operation tells whether a range of consecutive tokens is equal,
inserted, deleted or replaced. The list returned by
:func:`calculate_operations` covers both documents from start to end,
without gaps or overlaps.
"""
from enum import Enum

from .matching import Match, find_matching_blocks
from .utils import is_whitespace


class Action(Enum):
    EQUAL = 'equal'
    INSERT = 'insert'
    DELETE = 'delete'
    REPLACE = 'replace'


# (starts at position in before, starts at position in after) -> gap action
_GAP_ACTIONS = {
    (False, False): Action.REPLACE,
    (True, False): Action.INSERT,
    (False, True): Action.DELETE,
    (True, True): None,
}


class Operation(object):
    """
    One edit span. Ends are inclusive; `end_in_before` is None for inserts
    and `end_in_after` is None for deletes.
    """

    def __init__(self, action, start_in_before, end_in_before,
                 start_in_after, end_in_after):
        self.action = action
        self.start_in_before = start_in_before
        self.end_in_before = end_in_before
        self.start_in_after = start_in_after
        self.end_in_after = end_in_after

    def as_tuple(self):
        return (self.action, self.start_in_before, self.end_in_before,
                self.start_in_after, self.end_in_after)

    def __eq__(self, other):
        if not isinstance(other, Operation):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __ne__(self, other):
        rv = self.__eq__(other)
        return rv if rv is NotImplemented else not rv

    __hash__ = None

    def __repr__(self):
        return 'Operation(%s, before=%r..%r, after=%r..%r)' % (
            self.action.value, self.start_in_before, self.end_in_before,
            self.start_in_after, self.end_in_after)


def _is_single_whitespace(op, before_tokens):
    if op.action is not Action.EQUAL:
        return False
    if op.end_in_before != op.start_in_before:
        return False
    return is_whitespace(before_tokens[op.start_in_before].text)


def calculate_operations(before_tokens, after_tokens):
    """
    Operations that turn `before_tokens` into `after_tokens`.

    Raises ValueError when either list is missing (None is not an empty
    document).
    """
    if before_tokens is None:
        raise ValueError('Missing before_tokens')
    if after_tokens is None:
        raise ValueError('Missing after_tokens')

    position_in_before = 0
    position_in_after = 0
    operations = []

    matches = find_matching_blocks(before_tokens, after_tokens)
    matches.append(Match(len(before_tokens), len(after_tokens), 0))

    for match in matches:
        action = _GAP_ACTIONS[(position_in_before == match.start_in_before,
                               position_in_after == match.start_in_after)]
        if action is not None:
            operations.append(Operation(
                action,
                position_in_before,
                match.start_in_before - 1 if action is not Action.INSERT else None,
                position_in_after,
                match.start_in_after - 1 if action is not Action.DELETE else None,
            ))
        if match.length:
            operations.append(Operation(
                Action.EQUAL,
                match.start_in_before, match.end_in_before,
                match.start_in_after, match.end_in_after,
            ))
        position_in_before = match.end_in_before + 1
        position_in_after = match.end_in_after + 1

    return merge_adjacent_replacements(operations, before_tokens)


def merge_adjacent_replacements(operations, before_tokens):
    """
    Fold a replace into the replace right before it, and a single
    whitespace equal into a preceding replace, so the rendering does not
    alternate del/ins around every other word. The merged operations are
    updated in place.
    """
    post_processed = []
    last_op = None
    for op in operations:
        if last_op is not None and last_op.action is Action.REPLACE and (
                op.action is Action.REPLACE
                or _is_single_whitespace(op, before_tokens)):
            last_op.end_in_before = op.end_in_before
            last_op.end_in_after = op.end_in_after
        else:
            post_processed.append(op)
            last_op = op
    return post_processed
