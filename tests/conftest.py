"""Shared test fixtures."""

from pathlib import Path

import pytest
from docpages.config import Config, DocsConfig, LoggingConfig, ServerConfig
from docpages.core.types import PageRequest, PageResponse


class RecordingRenderer:
    """Renderer stub that records calls and returns a fixed response."""

    def __init__(self, response: PageResponse | None = None) -> None:
        self.calls: list[PageRequest] = []
        self.response = response or PageResponse(status=200, html="<p>ok</p>")

    def render(self, page: PageRequest) -> PageResponse:
        self.calls.append(page)
        return self.response


class FailingRenderer:
    """Renderer stub that raises the given exception."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    def render(self, page: PageRequest) -> PageResponse:
        raise self.error


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create docs directory."""
    docs = tmp_path / "docs"
    docs.mkdir(exist_ok=True)
    return docs


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration pointing at docs_dir."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=docs_dir),
        logging=LoggingConfig(level="DEBUG", log_requests=True),
    )


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()


def write_doc(docs_dir: Path, lang: str, cat: str, doc: str, text: str) -> Path:
    """Write a markdown document at <docs_dir>/<lang>/<cat>/<doc>.md."""
    path = docs_dir / lang / cat / f"{doc}.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
