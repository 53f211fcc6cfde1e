"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples" / "drawable"

ANDROID_XMLNS = 'xmlns:android="http://schemas.android.com/apk/res/android"'


def vector_xml(body: str, width: str | None = "24", height: str | None = "24") -> str:
    """Wrap `body` in a <vector> root with the android namespace declared."""
    attrs = [ANDROID_XMLNS]
    if width is not None:
        attrs.append(f'android:viewportWidth="{width}"')
    if height is not None:
        attrs.append(f'android:viewportHeight="{height}"')
    return f"<vector {' '.join(attrs)}>{body}</vector>"


# End-to-end scenarios

SINGLE_PATH_XML = vector_xml('<path android:pathData="M0,0 L24,24" android:fillColor="#FF0000"/>')

SYMBOLIC_FILL_XML = vector_xml('<path android:pathData="M0,0 L24,24" android:fillColor="@color/red"/>')

GROUP_TWO_PATHS_XML = vector_xml(
    '<group><path android:pathData="A"/><path android:pathData="B"/></group>',
    width="48",
    height="48",
)

EMPTY_GROUP_XML = vector_xml('<group><clip-path android:pathData="M0,0h24v24h-24z"/></group>')

MIXED_LAYOUT_XML = vector_xml(
    '<path android:pathData="P1"/>'
    '<group><path android:pathData="G1"/></group>'
    '<path android:pathData="P2"/>'
)

STROKE_XML = vector_xml(
    '<path android:pathData="M2,2 L22,22" android:strokeWidth="2.5" android:strokeColor="#000000"/>'
)


@pytest.fixture
def single_path_xml() -> str:
    return SINGLE_PATH_XML


@pytest.fixture
def mixed_layout_xml() -> str:
    return MIXED_LAYOUT_XML


@pytest.fixture
def star_xml_path() -> Path:
    return SAMPLES_DIR / "ic_star.xml"


@pytest.fixture
def badge_xml_path() -> Path:
    return SAMPLES_DIR / "ic_badge.xml"


# Android tooling emits xmlns:android, but hand-written resources often omit it
UNDECLARED_PREFIX_XML = (
    '<vector android:viewportWidth="24" android:viewportHeight="24">'
    '<path android:pathData="M0,0 L24,24" android:fillColor="#FF0000"/>'
    "</vector>"
)
