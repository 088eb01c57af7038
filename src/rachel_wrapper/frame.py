"""
Frame height synchronization, modelled over a minimal DOM.

Mirrors ``static/js/custom.js`` so the sizing rules can be exercised
without a browser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

RESET_HEIGHT = "10px"
HEIGHT_PAD = 4


@dataclass
class Element:
    scroll_height: int = 0
    offset_height: int = 0
    client_height: int = 0


@dataclass
class Document:
    body: Element = field(default_factory=Element)
    document_element: Element = field(default_factory=Element)


@dataclass
class FrameStyle:
    visibility: str = "visible"
    height: str = ""


@dataclass
class Frame:
    style: FrameStyle = field(default_factory=FrameStyle)
    content_document: Document | None = None
    content_window: Any = None

    def inner_document(self) -> Document:
        if self.content_document is not None:
            return self.content_document
        return self.content_window.document


def measure_document_height(doc: Document) -> int:
    """Largest of the body and root element size metrics, in pixels."""
    body, root = doc.body, doc.document_element
    return max(
        body.scroll_height,
        body.offset_height,
        root.client_height,
        root.scroll_height,
        root.offset_height,
    )


def sync_frame_height(frame: Frame) -> None:
    doc = frame.inner_document()
    frame.style.visibility = "hidden"
    frame.style.height = RESET_HEIGHT
    frame.style.height = f"{measure_document_height(doc) + HEIGHT_PAD}px"
    frame.style.visibility = "visible"
