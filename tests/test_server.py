"""Tests for server module."""

from docpages.app_keys import log_requests_key, renderer_key
from docpages.config import Config
from docpages.core.renderer import MarkdownRenderer
from docpages.server import create_app

from conftest import RecordingRenderer


class TestCreateApp:
    """Tests for create_app()."""

    def test__default_renderer__uses_source_dir(self, test_config: Config) -> None:
        """Create a markdown renderer over the configured source directory."""
        app = create_app(test_config)

        renderer = app[renderer_key]
        assert isinstance(renderer, MarkdownRenderer)
        assert renderer.source_dir == test_config.docs.source_dir
        assert app[log_requests_key] is True

    def test__injected_renderer__stored(
        self, test_config: Config, recording_renderer: RecordingRenderer
    ) -> None:
        """Store an explicitly provided renderer."""
        app = create_app(test_config, renderer=recording_renderer)

        assert app[renderer_key] is recording_renderer

    def test__pages_route__registered(self, test_config: Config) -> None:
        """Register GET /{lang}/{cat}/{doc}."""
        app = create_app(test_config)

        canonicals = {
            resource.canonical for resource in app.router.resources()
        }
        assert "/{lang}/{cat}/{doc}" in canonicals
