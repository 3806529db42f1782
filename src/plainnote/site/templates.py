"""Page templates for the generated site.

Templates ship inside the package (``plainnote/templates``) and are rendered
with jinja2. Autoescaping is on for HTML templates; the compiled note body is
already HTML and is marked safe inside ``note.html``.
"""

from __future__ import annotations

from datetime import datetime
from functools import cache
from importlib import resources

from jinja2 import Environment, PackageLoader, select_autoescape

from plainnote.site.notes import NoteLink


@cache
def get_environment() -> Environment:
    """Return the shared jinja2 environment (created on first use)."""
    return Environment(
        loader=PackageLoader("plainnote", "templates"),
        autoescape=select_autoescape(),
        keep_trailing_newline=True,
    )


def format_date(created: datetime) -> str:
    """Format a creation time like ``Oct  5 2026`` (day padded to two columns).

    Example:
        >>> from datetime import datetime
        >>> format_date(datetime(2026, 10, 5))
        'Oct  5 2026'
    """
    return f"{created:%b} {created.day:>2} {created:%Y}"


def render_note_page(title: str, date: str, content: str) -> str:
    template = get_environment().get_template("note.html")
    return template.render(title=title, date=date, content=content)


def render_index(links: list[NoteLink]) -> str:
    template = get_environment().get_template("index.html")
    return template.render(links=links)


def stylesheet() -> str:
    return resources.files("plainnote").joinpath("templates/main.css").read_text(encoding="utf-8")
