from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePosixPath

from .config import Settings

_DISALLOWED = re.compile(r"[^A-Za-z0-9_-]")

SUGGEST_FILENAME = "suggest.php"


def sanitize_identifier(raw: str) -> str:
    """Strip everything outside ``[A-Za-z0-9_-]``."""
    return _DISALLOWED.sub("", raw)


def is_sanitized(identifier: str) -> bool:
    return sanitize_identifier(identifier) == identifier


@dataclass(frozen=True)
class ModulePaths:
    """Locations derived from a sanitized module identifier."""

    identifier: str
    web_dir: str
    local_file: str

    @property
    def search_id(self) -> str:
        return f"{self.identifier}_search"

    @property
    def suggest_url(self) -> str:
        return f"{self.web_dir}/search/{SUGGEST_FILENAME}"

    @classmethod
    def for_identifier(cls, identifier: str, settings: Settings) -> "ModulePaths":
        web_root = settings.web_module_root.rstrip("/")
        local_file = PurePosixPath(settings.module_root) / identifier / settings.index_filename
        return cls(
            identifier=identifier,
            web_dir=f"{web_root}/{identifier}",
            local_file=str(local_file),
        )
