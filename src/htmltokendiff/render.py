# -*- coding: utf-8 -*-
"""
Rendering of edit operations back into HTML.

Only textual payload is marked: plain tags inside an inserted or deleted
range are written out as they are, so the markers never cut through the
document structure.
"""
from .config import DiffConfig
from .operations import Action
from .utils import is_unwrapped_markup, is_wrappable


def consecutive_where(start, content, predicate):
    """Leading run of `content[start:]` for which `predicate` holds."""
    content = content[start:]
    last_matching_index = None
    for index, token in enumerate(content):
        if not predicate(token):
            break
        last_matching_index = index
    if last_matching_index is None:
        return []
    return content[:last_matching_index + 1]


def wrap(tag, content, class_name=None, config=None):
    """
    Wrap and concatenate `content` (token texts) with `tag`. Tag tokens are
    left outside the wrapper unless they are atomic or self-closing, and so
    are comments; whitespace-only runs are dropped.
    """
    config = config or DiffConfig()
    atomic_re = config.atomic_tag_re()

    def wrappable(token):
        return is_wrappable(token, atomic_re)

    attrs = u' class="%s"' % class_name if class_name else u''
    rendering = []
    position = 0
    length = len(content)

    while position < length:
        non_tags = consecutive_where(position, content, wrappable)
        position += len(non_tags)
        if non_tags:
            val = u''.join(non_tags)
            if val.strip():
                rendering.append(u'<%s%s>%s</%s>' % (tag, attrs, val, tag))

        if position >= length:
            break

        tags = consecutive_where(position, content, is_unwrapped_markup)
        position += len(tags)
        rendering.append(u''.join(tags))

    return u''.join(rendering)


def _texts(tokens, start, end):
    return [token.text for token in tokens[start:end + 1]]


def render_operation(op, before_tokens, after_tokens, class_name=None, config=None):
    config = config or DiffConfig()
    action = op.action
    if action is Action.EQUAL:
        return u''.join(_texts(after_tokens, op.start_in_after, op.end_in_after))
    elif action is Action.INSERT:
        return wrap(config.insert_tag,
                    _texts(after_tokens, op.start_in_after, op.end_in_after),
                    class_name, config)
    elif action is Action.DELETE:
        return wrap(config.delete_tag,
                    _texts(before_tokens, op.start_in_before, op.end_in_before),
                    class_name, config)
    elif action is Action.REPLACE:
        # Deleted content always precedes the inserted content.
        return (wrap(config.delete_tag,
                     _texts(before_tokens, op.start_in_before, op.end_in_before),
                     class_name, config)
                + wrap(config.insert_tag,
                       _texts(after_tokens, op.start_in_after, op.end_in_after),
                       class_name, config))
    raise ValueError('Unknown action %r' % (action,))


def render_operations(before_tokens, after_tokens, operations, class_name=None, config=None):
    """
    Combined document: after-text for equal ranges, before-text wrapped in
    deletion markers and after-text wrapped in insertion markers for the rest.
    """
    config = config or DiffConfig()
    if class_name is None:
        class_name = config.class_name
    return u''.join(
        render_operation(op, before_tokens, after_tokens, class_name, config)
        for op in operations
    )
