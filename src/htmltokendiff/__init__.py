# -*- coding: utf-8 -*-
"""
    htmltokendiff
    ~~~~~~~~~~~~~

    Diffs HTML fragments token by token.  Both documents are merged into one
    where removed content is wrapped in ``<del>`` and added content in
    ``<ins>``, while the surrounding markup is kept as it is.  Examples:

    >>> from htmltokendiff import diff

    >>> print(diff('<p>this is some text</p>', '<p>this is some more text</p>'))
    <p>this is some <ins>more </ins>text</p>

    >>> print(diff('<p>this is some text</p>', '<p>this is some more text</p>', 'diff-class'))
    <p>this is some <ins class="diff-class">more </ins>text</p>

    >>> print(diff('<p>a b c</p>', '<p>a c</p>'))
    <p>a <del>b </del>c</p>

    >>> print(diff('<p>red</p>', '<p>blue</p>'))
    <p><del>red</del><ins>blue</ins></p>

    Tags compare by name, so an attribute change alone is not a difference:

    >>> print(diff('<div>same</div>', '<div class="x">same</div>'))
    <div class="x">same</div>

    :copyright: (c) 2026 by the htmltokendiff authors.
    :license: BSD, see pyproject.toml for details.
"""
from .config import DiffConfig
from .tokenizer import (
    Token, TokenizerStateError, create_token, get_key_for_token,
    html_to_tokens, tokenize,
)
from .matching import (
    Match, Segment, create_map, create_segment, find_best_match,
    find_matching_blocks,
)
from .operations import Action, Operation, calculate_operations
from .render import render_operations
from .differ import diff, diff_stream, parse_html, render_html_diff

__all__ = [
    'diff',
    'render_html_diff',
    'diff_stream',
    'parse_html',
    'DiffConfig',
    'html_to_tokens',
    'tokenize',
    'find_matching_blocks',
    'calculate_operations',
    'render_operations',
    'Token',
    'Match',
    'Segment',
    'Operation',
    'Action',
    'TokenizerStateError',
    'create_token',
    'get_key_for_token',
    'create_map',
    'create_segment',
    'find_best_match',
]
