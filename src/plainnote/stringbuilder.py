"""Append-then-join string accumulator used by the HTML renderer.

Source slices are appended as they are resolved and joined once at the end,
so rendering a note copies each character of output a single time.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Collects string fragments and joins them on ``build()``.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<p>").append("hi").append(" ").append("</p>").build()
        '<p>hi </p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment; empty fragments are skipped."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
