"""
Marker-delimited region replacement for the GameManager script.

The script is treated as opaque text: nothing outside the region between the
start tag and the end tag is parsed or touched.
"""
from __future__ import annotations

from typing import NamedTuple, Tuple

from mapbridge.errors import MarkersNotFound, MarkersOutOfOrder

START_TAG = "-- BEGIN stage1"
END_TAG = "-- END stage1"


class MarkerPair(NamedTuple):
    start_tag: str
    end_tag: str


DEFAULT_MARKERS = MarkerPair(START_TAG, END_TAG)


def render_region(payload: str) -> str:
    return f"\n    stage1 = \n        {payload}\n    ,\n"


def find_region(document_text: str, markers: MarkerPair = DEFAULT_MARKERS) -> Tuple[int, int]:
    """
    Devuelve (start, end) de la región editable:
    - start: offset justo después de la primera aparición de start_tag.
    - end: offset de la primera aparición de end_tag, buscada desde el
      inicio del documento (no desde start).
    Un start_tag ausente es error, igual que un end_tag ausente.
    """
    start_idx = document_text.find(markers.start_tag)
    end_idx = document_text.find(markers.end_tag)
    if start_idx == -1 or end_idx == -1:
        raise MarkersNotFound(
            f"start_tag at {start_idx}, end_tag at {end_idx}"
        )
    start = start_idx + len(markers.start_tag)
    if end_idx < start:
        raise MarkersOutOfOrder(
            f"end_tag at {end_idx} precedes region start {start}"
        )
    return start, end_idx


def patch(document_text: str, payload: str, markers: MarkerPair = DEFAULT_MARKERS) -> str:
    """Return ``document_text`` with the marked region rewritten around ``payload``.

    Raises MarkersNotFound (or MarkersOutOfOrder) without building anything.
    """
    start, end = find_region(document_text, markers)
    return document_text[:start] + render_region(payload) + document_text[end:]
