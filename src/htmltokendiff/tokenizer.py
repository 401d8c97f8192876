# -*- coding: utf-8 -*-
"""
HTML tokenizer.

Turns a markup string into a flat list of :class:`Token` objects: tags,
words, whitespace runs, entities, comments and atomic elements. The scan
never parses attributes or nesting; it only has to decide where one token
ends and the next begins, so that joining every ``token.text`` gives back
the input unchanged.
"""
from collections import namedtuple

from .config import DiffConfig, _tag_name_re, _key_space_re, text_type
from .utils import (
    is_start_of_tag, is_end_of_tag, is_whitespace, is_word_char,
    is_start_of_html_comment, is_end_of_html_comment,
    atomic_tag_name, is_end_of_atomic_tag,
)

# Scanner modes
CHAR = 'char'
TAG = 'tag'
ATOMIC_TAG = 'atomic_tag'
HTML_COMMENT = 'html_comment'
WHITESPACE = 'whitespace'


class TokenizerStateError(AssertionError):
    """The scanner reached a mode it does not know. Always a bug."""


class Token(namedtuple('Token', ['text', 'key'])):
    """
    A piece of the document. `text` is used to rebuild the output, `key`
    to compare tokens while aligning both documents.
    """
    __slots__ = ()

    def __str__(self):
        return self.text


def get_key_for_token(token):
    """
    Key used to match before and after tokens.

    Tags compare by lowercased name only, so ``<p class="a">`` and ``<P>``
    share the key ``<p>``. Comments compare by their whole text. Any other
    token, and any comment, has its whitespace runs and non-breaking space
    entities collapsed to a single space.

    >>> get_key_for_token('<a href="/x">')
    '<a>'
    >>> get_key_for_token('&nbsp;')
    ' '
    >>> get_key_for_token('<!--  note\\n-->')
    '<!-- note -->'
    """
    if is_start_of_html_comment(token):
        return _key_space_re.sub(u' ', token)
    tag_name = _tag_name_re.search(token)
    if tag_name:
        return u'<%s>' % tag_name.group(1).lower()
    return _key_space_re.sub(u' ', token)


def create_token(current_word):
    return Token(text_type(current_word), get_key_for_token(current_word))


def html_to_tokens(html, config=None):
    """Tokenize a string of HTML into a list of :class:`Token`."""
    config = config or DiffConfig()
    atomic_re = config.atomic_tag_re()

    mode = CHAR
    current_word = u''
    current_atomic_tag = u''
    words = []

    def flush():
        if current_word:
            words.append(create_token(current_word))

    for char in html:
        if mode == TAG:
            atomic_tag = atomic_tag_name(current_word, atomic_re)
            if atomic_tag:
                mode = ATOMIC_TAG
                current_atomic_tag = atomic_tag
                current_word += char
            elif is_start_of_html_comment(current_word):
                mode = HTML_COMMENT
                current_word += char
            elif is_end_of_tag(char):
                current_word += char
                words.append(create_token(current_word))
                current_word = u''
                mode = CHAR
            else:
                current_word += char
        elif mode == ATOMIC_TAG:
            if is_end_of_tag(char) and is_end_of_atomic_tag(current_word, current_atomic_tag):
                current_word += char
                words.append(create_token(current_word))
                current_word = u''
                current_atomic_tag = u''
                mode = CHAR
            else:
                current_word += char
        elif mode == HTML_COMMENT:
            current_word += char
            if is_end_of_html_comment(current_word):
                words.append(create_token(current_word))
                current_word = u''
                mode = CHAR
        elif mode == CHAR:
            if is_start_of_tag(char):
                flush()
                current_word = char
                mode = TAG
            elif is_whitespace(char):
                flush()
                current_word = char
                mode = WHITESPACE
            elif is_word_char(char):
                current_word += char
            elif char == u'&':
                flush()
                current_word = char
            else:
                # Punctuation closes the pending word (``foo.``, ``&amp;``).
                current_word += char
                words.append(create_token(current_word))
                current_word = u''
        elif mode == WHITESPACE:
            if is_start_of_tag(char):
                flush()
                current_word = char
                mode = TAG
            elif is_whitespace(char):
                current_word += char
            else:
                flush()
                current_word = char
                mode = CHAR
        else:
            raise TokenizerStateError('Unknown mode %r' % (mode,))

    flush()
    return words


tokenize = html_to_tokens
