"""Copying planar layer data onto a canvas."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def copy_layer_data(
    layer_data: Sequence,
    canvas_data: MutableSequence,
    layer_left: int,
    layer_top: int,
    layer_right: int,
    layer_bottom: int,
    canvas_width: int,
    canvas_height: int,
) -> None:
    """Copy the part of a planar layer that overlaps the canvas into ``canvas_data``.

    The layer covers the rectangle ``[layer_left, layer_right) x
    [layer_top, layer_bottom)`` in canvas coordinates; ``canvas_data`` is
    modified in place.
    """
    if layer_right < layer_left or layer_bottom < layer_top:
        raise ValueError("invalid layer bounds")

    planar_width = layer_right - layer_left
    planar_height = layer_bottom - layer_top
    if len(layer_data) < planar_width * planar_height:
        raise ValueError(
            f"layer data holds {len(layer_data)} values, "
            f"expected {planar_width * planar_height}"
        )
    if len(canvas_data) < canvas_width * canvas_height:
        raise ValueError(
            f"canvas data holds {len(canvas_data)} values, "
            f"expected {canvas_width * canvas_height}"
        )

    if (
        layer_left >= canvas_width
        or layer_top >= canvas_height
        or layer_right < 0
        or layer_bottom < 0
    ):
        return

    if (layer_left, layer_top, layer_right, layer_bottom) == (
        0,
        0,
        canvas_width,
        canvas_height,
    ):
        count = canvas_width * canvas_height
        canvas_data[:count] = layer_data[:count]
        return

    left = max(layer_left, 0)
    top = max(layer_top, 0)
    right = min(layer_right, canvas_width)
    bottom = min(layer_bottom, canvas_height)
    region_width = right - left

    for y in range(top, bottom):
        src = (y - layer_top) * planar_width + (left - layer_left)
        dest = y * canvas_width + left
        canvas_data[dest:dest + region_width] = layer_data[src:src + region_width]