"""Turn a converted tree into HTML text."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .dom_model import DomDocument, dom_to_html, prettify_html

TEMPLATES_DIR = Path(__file__).parent / "templates"


def page_environment() -> Environment:
    """Jinja environment for the standalone page template."""
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_page(title: str, body_html: str, *, lang: str = "en") -> str:
    """Wrap an HTML fragment in a complete page titled ``title``."""
    template = page_environment().get_template("page.html.jinja")
    return template.render(title=title, body=body_html, lang=lang)


def render_document(
    root: DomDocument,
    *,
    title: str | None = None,
    standalone: bool = False,
    pretty: bool = False,
) -> str:
    html_text = dom_to_html(root)
    if standalone:
        html_text = render_page(title or "", html_text)
    if pretty:
        html_text = prettify_html(html_text)
    return html_text


__all__ = ["page_environment", "render_document", "render_page"]
