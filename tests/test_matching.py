from __future__ import annotations

from htmltokendiff import Match, create_map, create_segment, find_best_match, find_matching_blocks
from htmltokendiff import html_to_tokens
from htmltokendiff.matching import MatchOrdering, compare_matches, get_full_match


def _segment(before: str, after: str):
    return create_segment(html_to_tokens(before), html_to_tokens(after), 0, 0)


def _assert_strictly_ordered(matches: list[Match]) -> None:
    for prev, cur in zip(matches, matches[1:]):
        assert cur.start_in_before > prev.end_in_before, matches
        assert cur.start_in_after > prev.end_in_after, matches
    for m in matches:
        assert m.length >= 1


def test_create_map_keeps_every_position_in_order():
    tokens = html_to_tokens("a b a")
    assert create_map(tokens) == {"a": [0, 4], " ": [1, 3], "b": [2]}


def test_create_segment_offsets():
    before = html_to_tokens("x y")
    after = html_to_tokens("y")
    segment = create_segment(before, after, 4, 7)
    assert segment.before_index == 4
    assert segment.after_index == 7
    assert segment.after_map == {"y": [0]}


def test_match_ends_are_inclusive():
    m = Match(3, 5, 2)
    assert m.end_in_before == 4
    assert m.end_in_after == 6


def test_best_match_pulls_in_preceding_whitespace():
    match = find_best_match(_segment("a b c d", "x b c d"))
    assert match == Match(1, 1, 6)


def test_best_match_never_starts_on_whitespace():
    assert find_best_match(_segment("a b", "c d")) is None


def test_best_match_tie_keeps_first_found():
    match = find_best_match(_segment("a x b", "b y a"))
    assert match == Match(0, 4, 1)


def test_best_match_prefers_longest():
    match = find_best_match(_segment("one two three four", "four one two three"))
    assert match == Match(0, 2, 5)


def test_best_match_is_in_global_coordinates():
    before = html_to_tokens("z z a b")
    after = html_to_tokens("q a b")
    segment = create_segment(before[4:], after[2:], 4, 2)
    assert find_best_match(segment) == Match(4, 2, 3)


def test_full_match_bails_out_when_it_cannot_beat_min_length():
    segment = _segment("a b c", "a b d")
    assert get_full_match(segment, 0, 0, 0, False) == Match(0, 0, 4)
    # the token right after the required length differs
    assert get_full_match(segment, 0, 0, 4, False) is None
    # the required length overflows the segment
    assert get_full_match(segment, 2, 2, 5, False) is None


def test_compare_matches():
    m1 = Match(5, 5, 2)
    assert compare_matches(m1, Match(0, 0, 2)) == -1
    assert compare_matches(m1, Match(8, 9, 1)) == 1
    assert compare_matches(m1, Match(0, 8, 1)) == 0
    assert compare_matches(m1, Match(6, 6, 1)) == 0


def test_ordering_drops_criss_crossing_matches():
    ordering = MatchOrdering()
    assert ordering.add(Match(5, 5, 2))
    assert ordering.add(Match(0, 0, 2))
    assert not ordering.add(Match(1, 8, 1))
    assert not ordering.add(Match(8, 2, 1))
    assert ordering.add(Match(10, 10, 1))
    assert ordering.to_list() == [Match(0, 0, 2), Match(5, 5, 2), Match(10, 10, 1)]
    assert len(ordering) == 3


def test_matching_blocks_for_inserted_word():
    before = html_to_tokens("<p>this is some text</p>")
    after = html_to_tokens("<p>this is some more text</p>")
    assert find_matching_blocks(before, after) == [Match(0, 0, 7), Match(7, 9, 2)]


def test_matching_blocks_for_moved_text():
    before = html_to_tokens("a b c")
    after = html_to_tokens("c a b")
    assert find_matching_blocks(before, after) == [Match(0, 2, 3)]


def test_matching_blocks_empty_inputs():
    assert find_matching_blocks([], []) == []
    assert find_matching_blocks(html_to_tokens("a"), []) == []


def test_matching_blocks_are_ordered_and_disjoint():
    pairs = [
        ("<p>a b c d e f</p>", "<p>a x c y e z</p>"),
        ("<ul><li>Uno</li><li>Dos</li><li>Tres</li></ul>",
         "<ul><li>Uno</li><li>Dos cambiado</li><li>Tres</li></ul>"),
        ("one two one two one", "two one two one two"),
        ("<table><tr><td>A</td><td>B</td></tr></table>",
         "<table><tr><td>A</td><td>C</td></tr><tr><td>B</td></tr></table>"),
    ]
    for before, after in pairs:
        matches = find_matching_blocks(html_to_tokens(before), html_to_tokens(after))
        assert matches
        _assert_strictly_ordered(matches)
