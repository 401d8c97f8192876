import doctest
import htmltokendiff
from htmltokendiff import DiffConfig
import re

doctest.testmod(htmltokendiff, verbose=True)

# Additional regression checks (basic asserts)
def _assert_contains(haystack, needle):
    assert needle in haystack, "Expected %r to contain %r" % (haystack, needle)


def run_regressions():
    # Inserted word
    out = htmltokendiff.diff('<p>this is some text</p>', '<p>this is some more text</p>')
    assert out == '<p>this is some <ins>more </ins>text</p>', out

    # Identical input comes back untouched, malformed or not
    html = '<p>unclosed <b'
    assert htmltokendiff.diff(html, html) is html

    # Delete before insert ordering
    out = htmltokendiff.diff('<p>red</p>', '<p>blue</p>')
    assert out.index('<del>') < out.index('<ins>'), out

    # Tags are never wrapped, only their text
    out = htmltokendiff.diff('<p>a</p>', '<p>a</p><p>b</p>')
    _assert_contains(out, '<p><ins>b</ins></p>')

    # Atomic elements go in or out as a whole
    out = htmltokendiff.diff('<p>x<svg><circle r="1"/></svg></p>', '<p>x</p>')
    assert re.search(r'<del>\s*<svg>.*</svg>\s*</del>', out), out

    # Whitespace-only insertions vanish
    out = htmltokendiff.diff('<p>a</p>', '<p>a </p>')
    assert '<ins' not in out, out

    # Class name and marker tags from config
    cfg = DiffConfig()
    cfg.class_name = 'diff-class'
    out = htmltokendiff.diff('Foo', 'Foo bar', config=cfg)
    _assert_contains(out, '<ins class="diff-class">')

    # Normalized output through html5lib + genshi
    out = htmltokendiff.render_html_diff('Foo', 'Foo bar')
    assert out.startswith('<div class="diff">'), out


if __name__ == '__main__':
    run_regressions()
