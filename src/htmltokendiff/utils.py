# -*- coding: utf-8 -*-
"""
Funciones utilitarias para htmltokendiff.

Predicates over raw token text, shared by the tokenizer and the renderer.
"""
from .config import (
    _whitespace_re, _word_char_re, _tag_re, _void_tag_re, _default_atomic_re,
    HTML_COMMENT_START, HTML_COMMENT_END,
)


def is_start_of_tag(char):
    return char == u'<'


def is_end_of_tag(char):
    return char == u'>'


def is_whitespace(s):
    """True si `s` está compuesto sólo por espacios en blanco."""
    return bool(s) and _whitespace_re.match(s) is not None


def is_word_char(char):
    return _word_char_re.match(char) is not None


def is_tag(token):
    """
    Plain markup tag (opening, closing or self-closing). Comments and
    multi-tag atomic elements are not tags in this sense.
    """
    return _tag_re.match(token) is not None


def is_void_tag(token):
    return _void_tag_re.match(token) is not None


def is_start_of_html_comment(word):
    return word.startswith(HTML_COMMENT_START)


def is_end_of_html_comment(word):
    return word.endswith(HTML_COMMENT_END)


def atomic_tag_name(word, atomic_re=_default_atomic_re):
    """
    Return the atomic element name `word` opens (e.g. ``'svg'`` for
    ``'<svg width="1"'``), or None.
    """
    match = atomic_re.match(word)
    if match is None:
        return None
    return match.group(1)


def is_end_of_atomic_tag(word, tag):
    """
    True once `word` holds everything up to the closing bracket of the
    element's end tag, e.g. ``'<iframe></iframe'``.
    """
    return word.endswith(u'</' + tag)


def is_unwrapped_markup(token):
    """Plain tags and comments: written out as they are, never marked."""
    return is_tag(token) or is_start_of_html_comment(token)


def is_wrappable(token, atomic_re=_default_atomic_re):
    """Token that may sit inside an <ins>/<del> marker."""
    if is_start_of_html_comment(token):
        return False
    return (not is_tag(token)
            or atomic_tag_name(token, atomic_re) is not None
            or is_void_tag(token))
