# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Text rendering

Maps pixels to characters of a density ramp by luminance, optionally
wrapped in 24-bit ANSI color escapes.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from typing import List

from pixtext.pixel_grid import Pixel, PixelGrid

DEFAULT_CHARACTERS = " ·:-=+*#%@█"

# ITU-R BT.709 luma weights in ten-thousandths; white sums to exactly 255
RED_WEIGHT = 2126
GREEN_WEIGHT = 7152
BLUE_WEIGHT = 722
WEIGHT_SCALE = 10000

COLOR_ESCAPE = "\x1b[38;2;{r};{g};{b}m{char}\x1b[0m"


@dataclass(frozen=True)
class CharacterRamp:
    """Characters ordered from darkest to brightest."""
    characters: str = DEFAULT_CHARACTERS

    def __post_init__(self):
        if not self.characters:
            raise ValueError("Character ramp must not be empty")

    def __len__(self) -> int:
        return len(self.characters)

    def character_for(self, brightness: float) -> str:
        """
        Pick the character for a brightness in [0, 255].
        """
        index = int(brightness / 255.0 * (len(self.characters) - 1))
        index = min(max(index, 0), len(self.characters) - 1)
        return self.characters[index]


DEFAULT_RAMP = CharacterRamp()


def premultiply(pixel: Pixel) -> Pixel:
    """Scale color channels by alpha; transparent pixels become black."""
    r, g, b, a = pixel
    if a == 255:
        return pixel
    return (r * a // 255, g * a // 255, b * a // 255, a)


def luminance(pixel: Pixel) -> float:
    r, g, b, _ = premultiply(pixel)
    return (RED_WEIGHT * r + GREEN_WEIGHT * g + BLUE_WEIGHT * b) / WEIGHT_SCALE


def render_pixel(pixel: Pixel, ramp: CharacterRamp = DEFAULT_RAMP, color: bool = False) -> str:
    char = ramp.character_for(luminance(pixel))
    if not color:
        return char
    r, g, b, _ = premultiply(pixel)
    return COLOR_ESCAPE.format(r=r, g=g, b=b, char=char)


def render(grid: PixelGrid, ramp: CharacterRamp = DEFAULT_RAMP, color: bool = False) -> str:
    """
    Render a grid as text.

    Args:
        grid: Pixel grid, one character per pixel
        ramp: Density characters
        color: Wrap each character in a true-color escape

    Returns:
        The rendered text, one newline-terminated line per row
    """
    lines: List[str] = []
    for row in grid.rows():
        lines.append(''.join(render_pixel(pixel, ramp, color) for pixel in row))
        lines.append('\n')
    return ''.join(lines)
