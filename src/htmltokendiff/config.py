# -*- coding: utf-8 -*-
"""
Configuración y constantes para htmltokendiff.
"""
import re

text_type = str

# Expresiones regulares (exportadas para uso en otros módulos)
_whitespace_re = re.compile(r'^\s+$', re.U)
_word_char_re = re.compile(r'[\w#@]', re.U)
_tag_re = re.compile(r'^\s*<[^!>][^>]*>\s*$', re.U)
_void_tag_re = re.compile(r'^\s*<[^>]+/>\s*$', re.U)
_tag_name_re = re.compile(r'<([^\s>]+)[\s>]', re.U)
_key_space_re = re.compile(r'(\s+|&nbsp;|&#160;)', re.U)

HTML_COMMENT_START = u'<!--'
HTML_COMMENT_END = u'-->'

# Key shared by every whitespace-like token once normalized.
WHITESPACE_KEY = u' '

ATOMIC_TAGS = ('iframe', 'object', 'math', 'svg', 'script')


def atomic_tag_regex(tags):
    """Compila el patrón que reconoce la apertura de un tag atómico."""
    return re.compile(u'^<(%s)' % u'|'.join(re.escape(t) for t in tags), re.U)


_default_atomic_re = atomic_tag_regex(ATOMIC_TAGS)


class DiffConfig(object):
    """
    Runtime configuration for tokenizing and rendering a diff.

    Defaults live on the class; override them per instance::

        cfg = DiffConfig()
        cfg.class_name = 'diff-class'
    """

    # Marker elements wrapped around removed / added content
    insert_tag = 'ins'
    delete_tag = 'del'

    # Elements whose whole subtree is a single opaque token. Matched
    # case-sensitively against the opening ``<name``.
    atomic_tags = ATOMIC_TAGS

    # Class attribute for the markers when the caller does not pass one.
    class_name = None

    def atomic_tag_re(self):
        if tuple(self.atomic_tags) == ATOMIC_TAGS:
            return _default_atomic_re
        return atomic_tag_regex(self.atomic_tags)
