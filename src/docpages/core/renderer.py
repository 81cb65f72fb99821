"""Markdown page rendering.

Default renderer: looks up markdown sources by language, category and document
id and wraps the converted HTML in the page layout.
"""

import logging
from pathlib import Path
from typing import Any

import mistune
from jinja2 import Environment, PackageLoader, select_autoescape

from docpages.core.types import PageRequest, PageResponse, RenderError

logger = logging.getLogger(__name__)


class MarkdownRenderer:
    """Renders markdown documents stored as <source_dir>/<lang>/<cat>/<doc>.md.

    Missing documents produce a 404 page rather than an error. Documents that
    exist but cannot be read raise RenderError.
    """

    def __init__(self, source_dir: Path) -> None:
        """Initialize renderer.

        Args:
            source_dir: Root directory containing one subdirectory per language
        """
        self._source_dir = source_dir
        self._markdown = mistune.create_markdown(
            escape=False,
            plugins=["strikethrough", "table", "url"],
        )
        self._templates = Environment(
            loader=PackageLoader("docpages", "templates"),
            autoescape=select_autoescape(["html"]),
        )

    @property
    def source_dir(self) -> Path:
        """Root directory containing markdown sources."""
        return self._source_dir

    def render(self, page: PageRequest) -> PageResponse:
        """Render the document identified by page.

        Args:
            page: Requested language, category and document id

        Returns:
            PageResponse with status 200 and the page, or 404 and a not-found page

        Raises:
            RenderError: If the source file exists but cannot be read
        """
        source_path = self._resolve_source_path(page)
        if source_path is None:
            logger.info(f"Document not found: {page.lang}/{page.cat}/{page.doc}")
            return PageResponse(status=404, html=self._render_not_found(page))

        try:
            markdown_text = source_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RenderError(f"Failed to read {source_path}: {e}") from e

        logger.debug(f"Converting {len(markdown_text)} characters of markdown from {source_path}")
        content, state = self._markdown.parse(markdown_text)
        template = self._templates.get_template("page.html")
        html = template.render(
            lang=page.lang,
            title=_extract_title(state.tokens) or page.doc,
            content=content,
        )
        return PageResponse(status=200, html=html)

    def _resolve_source_path(self, page: PageRequest) -> Path | None:
        """Resolve a page request to its markdown source.

        Handles index.md convention for directories.

        Args:
            page: Requested language, category and document id

        Returns:
            Path to the source file, or None if it is missing or outside source_dir
        """
        base = self._source_dir / page.lang / page.cat
        for candidate in (base / f"{page.doc}.md", base / page.doc / "index.md"):
            if not candidate.is_file():
                continue
            if not candidate.resolve().is_relative_to(self._source_dir.resolve()):
                logger.warning(f"Rejected path outside source directory: {candidate}")
                return None
            return candidate
        return None

    def _render_not_found(self, page: PageRequest) -> str:
        template = self._templates.get_template("not_found.html")
        return template.render(lang=page.lang, cat=page.cat, doc=page.doc)


def _extract_title(tokens: list[dict[str, Any]]) -> str | None:
    """Return the text of the first level-1 heading in a parsed token stream."""
    for token in tokens:
        if token["type"] == "heading" and token.get("attrs", {}).get("level") == 1:
            return _plain_text(token).strip() or None
    return None


def _plain_text(token: dict[str, Any]) -> str:
    if "children" in token:
        return "".join(_plain_text(child) for child in token["children"])
    if token["type"] in ("linebreak", "softbreak"):
        return " "
    return token.get("raw", token.get("text", ""))
