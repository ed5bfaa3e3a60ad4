"""An in-memory RGB image split into equally sized rectangular chunks."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from .color import Color


@dataclass
class ImageChunk:
    """A rectangular window onto an image's pixels.

    ``x`` is the first row and ``y`` the first column of the window.
    """

    x: int
    y: int
    width: int
    height: int
    pixels: list[list[Color]] = field(repr=False)


class Image:
    """A grid of colours that can be handed out chunk by chunk and written as PPM."""

    def __init__(self, width: int, height: int, chunk_width: int, chunk_height: int) -> None:
        if chunk_width <= 0 or chunk_height <= 0:
            raise ValueError("Chunk dimensions must be positive.")
        if width % chunk_width != 0:
            raise ValueError("Chunk width must be a factor of total width.")
        if height % chunk_height != 0:
            raise ValueError("Chunk height must be a factor of total height.")
        self.width = width
        self.height = height
        self.num_chunks = width * height // (chunk_width * chunk_height)
        self._chunk_width = chunk_width
        self._chunk_height = chunk_height
        self._chunks_per_row = width // chunk_width
        self.pixels: list[list[Color]] = [[Color() for _ in range(width)] for _ in range(height)]

    def get(self, chunk_id: int) -> ImageChunk:
        """Return the chunk with the given index, counted row by row."""
        if not 0 <= chunk_id < self.num_chunks:
            raise IndexError(f"chunk {chunk_id} out of range")
        row, col = divmod(chunk_id, self._chunks_per_row)
        return ImageChunk(
            row * self._chunk_height,
            col * self._chunk_width,
            self._chunk_width,
            self._chunk_height,
            self.pixels,
        )

    def write(self, out: TextIO | None = None) -> None:
        """Write the image as a plain-text PPM (P3) file."""
        out = sys.stdout if out is None else out
        out.write("P3\n")
        out.write(f"{self.width} {self.height}\n")
        out.write("255\n")
        for row in self.pixels:
            for color in row:
                out.write(f"{color}\n")