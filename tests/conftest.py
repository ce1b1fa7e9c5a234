"""Test setup for article_affix."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def build_page(headings: str, *, page_kind: str = "Reference", affix: bool = True) -> str:
    """Return a generated page with the given article headings markup."""
    placeholder = '<div id="affix" class="sideaffix"><p>stale</p></div>' if affix else ""
    return f"""
    <html>
      <body>
        <div class="container body-content">
          <div class="content-column {page_kind}">
            <article id="_content" data-uid="">
              {headings}
            </article>
          </div>
        </div>
        {placeholder}
      </body>
    </html>
    """


@pytest.fixture
def make_page() -> Callable[..., str]:
    """Factory for generated page markup."""
    return build_page
