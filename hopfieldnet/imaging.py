"""Conversion between image files and neuron patterns."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Union

import numpy as np
from PIL import Image

from hopfieldnet.network import State

PATTERN_SIDE = 100
_THRESHOLD = 128

PathLike = Union[str, "os.PathLike[str]"]


def load_image(path: PathLike) -> list[State]:
    """Read an image file as greyscale and turn it into a pattern."""
    try:
        with Image.open(path) as img:
            gray = img.convert("L")
    except (OSError, ValueError) as exc:
        raise OSError(f"Couldn't load image: {path}") from exc
    return preprocess_image(gray)


def _linear_axis(src: int, dst: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    pos = (np.arange(dst) + 0.5) * (src / dst) - 0.5
    low = np.floor(pos).astype(int)
    frac = pos - low
    under = low < 0
    low[under] = 0
    frac[under] = 0.0
    over = low >= src - 1
    low[over] = src - 1
    frac[over] = 0.0
    high = np.minimum(low + 1, src - 1)
    return low, high, frac


def _resize(pixels: np.ndarray, width: int, height: int) -> np.ndarray:
    src_h, src_w = pixels.shape
    data = pixels.astype(np.float64)
    y0, y1, fy = _linear_axis(src_h, height)
    x0, x1, fx = _linear_axis(src_w, width)
    top = data[y0][:, x0] * (1 - fx) + data[y0][:, x1] * fx
    bottom = data[y1][:, x0] * (1 - fx) + data[y1][:, x1] * fx
    out = top * (1 - fy)[:, None] + bottom * fy[:, None]
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)


def _blur(pixels: np.ndarray) -> np.ndarray:
    padded = np.pad(pixels.astype(np.float64), 1, mode="reflect")
    rows = 0.25 * padded[:-2] + 0.5 * padded[1:-1] + 0.25 * padded[2:]
    out = 0.25 * rows[:, :-2] + 0.5 * rows[:, 1:-1] + 0.25 * rows[:, 2:]
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)


def preprocess_image(image) -> list[State]:
    """Resize to 100x100, blur, binarise and flatten into a pattern.

    Dark pixels become UPPER, light pixels LOWER.
    """
    if isinstance(image, Image.Image):
        image = image.convert("L")
    pixels = np.asarray(image)
    if pixels.ndim != 2 or pixels.size == 0:
        raise ValueError("Expected a non-empty single-channel image")
    pixels = np.clip(pixels, 0, 255).astype(np.uint8)

    blurred = _blur(_resize(pixels, PATTERN_SIDE, PATTERN_SIDE))
    light = blurred.reshape(-1) > _THRESHOLD
    return [State.LOWER if is_light else State.UPPER for is_light in light]


def save_image(states: Sequence[int], path: PathLike, width: int, height: int) -> None:
    """Write a pattern as a black-and-white greyscale image."""
    needed = width * height
    if len(states) < needed:
        raise ValueError(
            f"Pattern has {len(states)} states, {needed} needed for {width}x{height}"
        )
    pixels = np.array(
        [0 if state == State.UPPER else 255 for state in states[:needed]],
        dtype=np.uint8,
    ).reshape(height, width)
    Image.fromarray(pixels).save(path)


def image_size(path: PathLike) -> tuple[int, int]:
    """Return the (width, height) of an image file."""
    try:
        with Image.open(path) as img:
            return img.size
    except (OSError, ValueError) as exc:
        raise OSError(f"Couldn't load image: {path}") from exc