from __future__ import annotations

import pytest

from md2html.errors import DuplicateRendererError, RendererNotFoundError
from md2html.models import FrontMatter
from md2html.plugins import PluginRegistry, available_renderers, get_renderer_factory, register_renderer
from md2html.renderers import DocumentRenderer, HtmlRenderer


def test_bundled_renderers_are_registered() -> None:
    assert available_renderers() == ["document", "html"]
    assert isinstance(get_renderer_factory("html")(frontmatter=FrontMatter()), HtmlRenderer)
    assert isinstance(get_renderer_factory("document")(frontmatter=FrontMatter()), DocumentRenderer)


def test_registry_rejects_duplicates() -> None:
    registry = PluginRegistry[object]("Renderer")
    registry.register("one", object())

    with pytest.raises(DuplicateRendererError):
        registry.register("one", object())
    with pytest.raises(ValueError):
        registry.register("one", object())


def test_registry_reports_missing_names() -> None:
    registry = PluginRegistry[object]("Renderer")
    registry.register("b", object())
    registry.register("a", object())

    with pytest.raises(RendererNotFoundError) as excinfo:
        registry.get("missing")

    assert isinstance(excinfo.value, KeyError)
    assert str(excinfo.value) == "Renderer 'missing' is not registered (available: a, b)."
    assert registry.names() == ["a", "b"]


def test_bundled_names_cannot_be_registered_twice() -> None:
    with pytest.raises(DuplicateRendererError):
        register_renderer("html", lambda *, frontmatter, **_: HtmlRenderer())

    assert available_renderers() == ["document", "html"]
