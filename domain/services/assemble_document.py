from __future__ import annotations

from collections.abc import Iterable

from domain.models import DEFAULT_FONT_FAMILY, ExcalidrawDocument, ExcalidrawElement


def default_app_state() -> dict:
    return {
        "viewBackgroundColor": "#ffffff",
        "currentItemFontFamily": DEFAULT_FONT_FAMILY,
        "gridSize": None,
    }


def assemble_document(elements: Iterable[ExcalidrawElement]) -> ExcalidrawDocument:
    # Vector primitives only, so the files map is always empty.
    return ExcalidrawDocument(elements=list(elements), app_state=default_app_state(), files={})
