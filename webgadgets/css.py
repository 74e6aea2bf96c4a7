"""CSS value helpers used by the layout functions."""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

CssSize = Union[int, float, str]

_CSS_UNIT_RE = re.compile(
    r"^(auto|inherit|fit-content|calc\(.*\)|((\.\d+)|(\d+(\.\d+)?))"
    r"(%|in|cm|mm|ch|em|ex|rem|pt|pc|px|vh|vw|vmin|vmax))$"
)
_NUMBER_RE = re.compile(r"^\d+(\.\d+)?$|^\.\d+$")
_CAMEL_RE = re.compile(r"([A-Z])")

_SIDES = ("top", "right", "bottom", "left")


def _format_number(value: Union[int, float]) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}px"


def validate_css_unit(value: Optional[CssSize]) -> Optional[str]:
    """Return ``value`` as a CSS length.

    Numbers (and numeric strings) are interpreted as pixels. Strings must be
    a length/percentage with a unit, ``auto``, ``inherit``, ``fit-content``
    or a ``calc()`` expression.

    Raises:
        ValueError: If ``value`` is not a valid CSS unit.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"'{value}' is not a valid CSS unit")
    if isinstance(value, (int, float)):
        if value < 0:
            raise ValueError(f"'{value}' is not a valid CSS unit (negative)")
        return _format_number(value)

    text = str(value).strip()
    if _NUMBER_RE.match(text):
        return _format_number(float(text))
    if _CSS_UNIT_RE.match(text):
        return text
    raise ValueError(
        f"'{value}' is not a valid CSS unit (e.g., \"100%\", \"400px\", \"auto\")"
    )


def _as_sizes(padding: Union[CssSize, Sequence[CssSize], None]) -> List[str]:
    if padding is None:
        return []
    if isinstance(padding, (str, int, float)):
        padding = [padding]
    return [validate_css_unit(size) for size in padding]  # type: ignore[misc]


def collapse_sizes(padding: Union[CssSize, Sequence[CssSize]]) -> str:
    """Join one to four sizes into a CSS shorthand value, e.g. ``"10px 2em"``."""

    return " ".join(_as_sizes(padding))


def padding_to_position(padding: Union[CssSize, Sequence[CssSize], None]) -> str:
    """Expand shorthand padding into ``top:..;right:..;bottom:..;left:..;``.

    One value applies to all sides, two are top/bottom and left/right, three
    are top, left/right and bottom, four are top, right, bottom and left.
    """

    sizes = _as_sizes(padding)
    if not sizes:
        expanded = ["0"] * 4
    elif len(sizes) == 1:
        expanded = sizes * 4
    elif len(sizes) == 2:
        expanded = [sizes[0], sizes[1], sizes[0], sizes[1]]
    elif len(sizes) == 3:
        expanded = [sizes[0], sizes[1], sizes[2], sizes[1]]
    else:
        expanded = sizes[:4]
    return "".join(f"{side}:{size};" for side, size in zip(_SIDES, expanded))


def css_property_name(name: str) -> str:
    """``alignItems`` / ``align_items`` / ``align.items`` -> ``align-items``."""

    dashed = _CAMEL_RE.sub(r"-\1", name).lower()
    return re.sub(r"[._]", "-", dashed)


def css_list(props: Mapping[str, Any]) -> str:
    """Render a mapping as inline CSS declarations, skipping ``None`` values."""

    declarations: Iterable[str] = (
        f"{css_property_name(name)}:{value};" for name, value in props.items() if value is not None
    )
    return "".join(declarations)


__all__ = [
    "collapse_sizes",
    "css_list",
    "css_property_name",
    "padding_to_position",
    "validate_css_unit",
]
