"""docpages - serves localized documentation pages by language, category and document."""

from docpages.core.types import PageRequest, PageResponse, Renderer, RenderError

__all__ = ["PageRequest", "PageResponse", "RenderError", "Renderer"]
