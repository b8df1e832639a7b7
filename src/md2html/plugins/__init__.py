from __future__ import annotations

from ..conversion.core import RendererFactory
from .registry import PluginRegistry


renderer_plugins = PluginRegistry[RendererFactory]("Renderer")


def register_renderer(name: str, factory: RendererFactory) -> None:
    renderer_plugins.register(name, factory)


def get_renderer_factory(name: str) -> RendererFactory:
    return renderer_plugins.get(name)


def available_renderers() -> list[str]:
    return renderer_plugins.names()


__all__ = [
    "PluginRegistry",
    "available_renderers",
    "get_renderer_factory",
    "register_renderer",
    "renderer_plugins",
]
