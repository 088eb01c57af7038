from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable

from .config import Settings
from .identifiers import ModulePaths, is_sanitized

logger = logging.getLogger(__name__)

FragmentRenderer = Callable[[str], str]


class ModuleRegistrationError(ValueError):
    """Raised when a module cannot be added to the registry."""


class FileFragment:
    """Renders a module's index file verbatim.

    The file is read on every render so a file removed after startup
    degrades to an empty content area instead of failing the request.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def __call__(self, web_dir: str) -> str:
        try:
            return self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("Fragment %s not readable for %s: %s", self.path, web_dir, exc)
            return ""

    def __repr__(self) -> str:
        return f"FileFragment({str(self.path)!r})"


class ModuleRegistry:
    """Allow-listed mapping of module identifier to fragment renderer."""

    def __init__(self, allowed: Iterable[str] | None = None) -> None:
        self._renderers: dict[str, FragmentRenderer] = {}
        self._allowed = set(allowed) if allowed is not None else None
        if self._allowed is not None:
            for identifier in self._allowed:
                self._check_identifier(identifier)

    @staticmethod
    def _check_identifier(identifier: str) -> None:
        if not identifier or not is_sanitized(identifier):
            raise ModuleRegistrationError(f"Invalid module identifier: {identifier!r}")

    def is_allowed(self, identifier: str) -> bool:
        return self._allowed is None or identifier in self._allowed

    def register(self, identifier: str, renderer: FragmentRenderer) -> None:
        self._check_identifier(identifier)
        if not callable(renderer):
            raise ModuleRegistrationError(f"Renderer for {identifier!r} is not callable")
        if not self.is_allowed(identifier):
            raise ModuleRegistrationError(f"Module {identifier!r} is not in the allow-list")
        self._renderers[identifier] = renderer

    def module(self, identifier: str) -> Callable[[FragmentRenderer], FragmentRenderer]:
        """Decorator form of :meth:`register`."""

        def decorator(renderer: FragmentRenderer) -> FragmentRenderer:
            self.register(identifier, renderer)
            return renderer

        return decorator

    def get(self, identifier: str) -> FragmentRenderer | None:
        return self._renderers.get(identifier)

    def render(self, paths: ModulePaths) -> str:
        renderer = self.get(paths.identifier)
        if renderer is None:
            logger.debug("No module registered for %r", paths.identifier)
            return ""
        return renderer(paths.web_dir)

    def identifiers(self) -> list[str]:
        return sorted(self._renderers)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._renderers

    def __len__(self) -> int:
        return len(self._renderers)


def discover_modules(settings: Settings, registry: ModuleRegistry | None = None) -> ModuleRegistry:
    """Register a FileFragment for every module directory under module_root."""
    if registry is None:
        registry = ModuleRegistry(settings.allowed_modules)
    root = Path(settings.module_root)

    if not root.is_dir():
        logger.warning("Module root %s does not exist; no modules registered", root)
        return registry

    for entry in sorted(root.iterdir()):
        if not entry.is_dir():
            continue
        if not is_sanitized(entry.name):
            logger.warning("Skipping module directory with unsafe name: %r", entry.name)
            continue
        if not (entry / settings.index_filename).is_file():
            continue
        if not registry.is_allowed(entry.name):
            logger.warning("Skipping module %s: not in allow-list", entry.name)
            continue
        if entry.name in registry:
            continue
        paths = ModulePaths.for_identifier(entry.name, settings)
        registry.register(entry.name, FileFragment(paths.local_file))

    logger.info("Registered %d module(s) from %s", len(registry), root)
    return registry
