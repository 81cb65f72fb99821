"""Core type definitions.

Value objects exchanged between the pages route and a renderer.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

PAGE_PARAMS = ("lang", "cat", "doc")


class RenderError(Exception):
    """Raised by a renderer that cannot produce a page."""


class MissingParameterError(ValueError):
    """Raised when a page request lacks one of its path parameters."""


@dataclass(frozen=True)
class PageRequest:
    """Identifies a document by language, category and document id."""

    lang: str
    cat: str
    doc: str

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "PageRequest":
        """Build a page request from path parameters.

        Values are copied as-is, empty strings included.

        Args:
            params: Mapping containing "lang", "cat" and "doc"

        Returns:
            PageRequest with the three values

        Raises:
            MissingParameterError: If any of the keys is absent
        """
        missing = [name for name in PAGE_PARAMS if name not in params]
        if missing:
            raise MissingParameterError(f"Missing path parameters: {', '.join(missing)}")
        return cls(lang=params["lang"], cat=params["cat"], doc=params["doc"])


@dataclass(frozen=True)
class PageResponse:
    """Rendered page returned by a renderer."""

    status: int
    html: str


class Renderer(Protocol):
    """Turns a page request into an HTML page and a status code."""

    def render(self, page: PageRequest) -> PageResponse: ...
