# -*- coding: utf-8 -*-
"""
Entry points that run the whole pipeline: tokenize, align, calculate
operations and render.
"""
import logging

from genshi.core import Stream
from genshi.input import ET
import html5lib

from .config import DiffConfig
from .tokenizer import html_to_tokens
from .operations import calculate_operations
from .render import render_operations

logger = logging.getLogger(__name__)


def diff(before, after, class_name=None, config=None):
    """
    Compare two pieces of HTML and return the combined content with the
    differences wrapped in ``<ins>`` and ``<del>`` tags.
    """
    if before == after:
        return before

    config = config or DiffConfig()
    before_tokens = html_to_tokens(before, config)
    after_tokens = html_to_tokens(after, config)
    logger.debug('Tokenized %d before / %d after tokens',
                 len(before_tokens), len(after_tokens))
    ops = calculate_operations(before_tokens, after_tokens)
    logger.debug('Calculated %d operations', len(ops))
    return render_operations(before_tokens, after_tokens, ops, class_name, config)


def _strip_comments(element):
    # html5lib gives comments a non-text tag that Genshi cannot convert.
    previous = None
    for child in list(element):
        if isinstance(child.tag, str):
            _strip_comments(child)
            previous = child
            continue
        if child.tail:
            if previous is not None:
                previous.tail = (previous.tail or u'') + child.tail
            else:
                element.text = (element.text or u'') + child.tail
        element.remove(child)


def parse_html(markup, wrapper_element='div', wrapper_class='diff'):
    """
    Turn diff markup into a Genshi stream rooted at one `wrapper_element`.

    The token diff only guarantees that markers never wrap plain tags; tags
    themselves may come out crossed (``<b><i>bar</b></i>``) or unclosed.
    html5lib rebuilds a balanced tree from whatever it gets, keeping the
    ``<ins>``/``<del>`` elements where the browser would put them. Comments
    are dropped.
    """
    fragment = html5lib.parseFragment(markup, treebuilder='etree')
    _strip_comments(fragment)
    fragment.tag = wrapper_element
    if wrapper_class is not None:
        fragment.set('class', wrapper_class)
    return Stream(list(ET(fragment)))


def diff_stream(before, after, class_name=None, config=None,
                wrapper_element='div', wrapper_class='diff'):
    """Diff two HTML fragments into a Genshi stream."""
    return parse_html(diff(before, after, class_name, config),
                      wrapper_element, wrapper_class)


def render_html_diff(old, new, wrapper_element='div', wrapper_class='diff',
                     class_name=None, config=None):
    """Renders the diff between two HTML fragments as a balanced fragment."""
    rv = diff_stream(old, new, class_name, config, wrapper_element, wrapper_class)
    return rv.render('html', encoding=None)
