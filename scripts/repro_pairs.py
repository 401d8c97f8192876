import logging
import sys
from pathlib import Path

# Ensure we import the repo-local htmltokendiff (not a pip-installed one).
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

import htmltokendiff  # noqa: E402
from htmltokendiff import calculate_operations, html_to_tokens  # noqa: E402


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Moved paragraph, an <svg> that only changes inside (one token, same
    # key), a reworded sentence whose leading space joins the next match,
    # and a comment that goes away.
    before = (
        '<p>Quarterly results are in.</p>'
        '<p>Revenue <svg width="10"><rect height="4"/></svg> grew by four percent.</p>'
        '<!-- draft --><p>Thanks for reading</p>'
    )
    after = (
        '<p>Thanks for reading</p>'
        '<p>Quarterly results are finally in.</p>'
        '<p>Revenue <svg width="12"><rect height="6"/></svg> grew by six percent.</p>'
    )

    before_tokens = html_to_tokens(before)
    after_tokens = html_to_tokens(after)
    for op in calculate_operations(before_tokens, after_tokens):
        print(op)
    print(htmltokendiff.diff(before, after))


if __name__ == "__main__":
    main()
