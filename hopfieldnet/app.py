"""Command-line front end: train on a directory of images, recall a test image."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image

from hopfieldnet.imaging import PATTERN_SIDE, image_size, load_image
from hopfieldnet.network import State
from hopfieldnet.worker import NeuralWorker

_IMAGE_SUFFIXES = (".png", ".jpg")


@dataclass
class TrainingSet:
    """Patterns read from a directory and the size of its first image."""

    patterns: list[list[State]] = field(default_factory=list)
    width: int = 0
    height: int = 0


def load_training_set(directory) -> TrainingSet:
    """Load every .png and .jpg file of a directory, in name order."""
    root = Path(directory)
    files = (
        sorted(
            (p for p in root.iterdir() if p.is_file() and p.suffix.lower() in _IMAGE_SUFFIXES),
            key=lambda p: p.name.casefold(),
        )
        if root.is_dir()
        else []
    )
    if not files:
        raise FileNotFoundError("No training images found in resource directory")

    training = TrainingSet()
    training.width, training.height = image_size(files[0])
    training.patterns = [load_image(path) for path in files]
    return training


def render_pattern(pattern: Sequence[int], width: int, height: int) -> Image.Image:
    """Draw a pattern as a greyscale image: UPPER black, LOWER white."""
    needed = width * height
    if len(pattern) < needed:
        raise ValueError(
            f"Pattern has {len(pattern)} states, {needed} needed for {width}x{height}"
        )
    pixels = np.array(
        [0 if state == State.UPPER else 255 for state in pattern[:needed]],
        dtype=np.uint8,
    ).reshape(height, width)
    return Image.fromarray(pixels)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hopfieldnet",
        description="Train a Hopfield network on images and recall a test image.",
    )
    parser.add_argument("test_image", nargs="?", help="image to recognise")
    parser.add_argument(
        "--resources", default="./resources", help="directory of training images"
    )
    parser.add_argument("--output", help="where to write the recognised image")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    try:
        training = load_training_set(args.resources)
    except (OSError, ValueError) as exc:
        print(f"Warning: {exc}", file=sys.stderr)
        return 1

    if not args.test_image:
        print("Warning: Please select a test file first", file=sys.stderr)
        return 1

    try:
        pattern = load_image(args.test_image)
    except OSError as exc:
        print(f"Error: Failed to load image: {exc}", file=sys.stderr)
        return 1

    def report_error(message: str) -> None:
        print(f"Error: {message}", file=sys.stderr)

    with NeuralWorker(on_error=report_error) as worker:
        if not worker.train_network(training.patterns).result():
            return 1
        print("Training completed!")
        outcome = worker.recognize_pattern(pattern).result()

    if outcome is None:
        return 1
    result, steps = outcome
    print(f"Recognition completed in {steps} steps")

    if args.output:
        render_pattern(result, PATTERN_SIDE, PATTERN_SIDE).save(args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())