"""The lane game: four hit circles that light up while their key is held."""

import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import pygame

from .fileio import read_entire_file, write_entire_file
from .input import Input, Key
from .logs import log

ENEMY_SHIP_SIZE = 250.0
HIT_CIRCLES_SIZE = 250.0
HIT_CIRCLES_OFFSET_INIT = 0.65
HIT_CIRCLES_OFFSET = 0.08
HIT_CIRCLE_WIDTH = 0.08
EDGE_OFFSET = -0.05
LANE_COUNT = 4

GAME_DATA_FILE = "gameData.data"
TARGET_TEXTURE = Path("game resc") / "stiched" / "hit circle-stitched.png"

_GAME_DATA_FORMAT = struct.Struct("<2f")

PathLike = Union[str, Path]


@dataclass(frozen=True)
class TextureAtlas:
    """A texture split into a grid of equally sized cells."""

    columns: int
    rows: int
    width: int
    height: int

    def get(self, x: int, y: int) -> pygame.Rect:
        """The pixel region of cell (x, y)."""
        if not (0 <= x < self.columns and 0 <= y < self.rows):
            raise IndexError(f"atlas cell ({x}, {y}) is outside a {self.columns}x{self.rows} grid")
        cell_w = self.width // self.columns
        cell_h = self.height // self.rows
        return pygame.Rect(x * cell_w, y * cell_h, cell_w, cell_h)


@dataclass
class GameData:
    """State saved between runs."""

    rect_pos: tuple[float, float] = (100.0, 100.0)

    def to_bytes(self) -> bytes:
        return _GAME_DATA_FORMAT.pack(*self.rect_pos)

    @classmethod
    def from_bytes(cls, data: bytes) -> "GameData":
        """Load saved state; bytes missing from a short record keep their defaults."""
        record = bytes(data[: _GAME_DATA_FORMAT.size])
        record += cls().to_bytes()[len(record):]
        x, y = _GAME_DATA_FORMAT.unpack(record)
        return cls((x, y))


def lane_inputs(input: Input) -> tuple[float, float, float, float]:
    """1.0 for every lane whose key is held, 0.0 otherwise: left, down, up, right."""
    pairs = ((Key.LEFT, Key.D), (Key.DOWN, Key.F), (Key.UP, Key.J), (Key.RIGHT, Key.K))
    return tuple(
        1.0 if input.is_button_held(arrow) or input.is_button_held(letter) else 0.0
        for arrow, letter in pairs
    )


def lane_rects(width: int, height: int) -> tuple[list[pygame.Rect], list[pygame.Rect]]:
    """Square boxes for the spawn circles at the top and the hit circles at the bottom."""
    size = width * HIT_CIRCLE_WIDTH
    top = height * EDGE_OFFSET
    bottom = height - size - height * EDGE_OFFSET
    spawns = []
    hits = []
    for lane in range(LANE_COUNT):
        left = width * (HIT_CIRCLES_OFFSET_INIT + HIT_CIRCLES_OFFSET * lane)
        spawns.append(pygame.Rect(round(left), round(top), round(size), round(size)))
        hits.append(pygame.Rect(round(left), round(bottom), round(size), round(size)))
    return spawns, hits


def render_target(surface: pygame.Surface, rect: pygame.Rect, texture: pygame.Surface, uvs: pygame.Rect) -> None:
    """Draw the ``uvs`` region of ``texture`` stretched over ``rect``."""
    rect = pygame.Rect(rect)
    if rect.width <= 0 or rect.height <= 0:
        return
    sprite = pygame.transform.scale(texture.subsurface(uvs), rect.size)
    surface.blit(sprite, rect.topleft)


@dataclass
class Target:
    """A falling note; ``type`` picks its sprite from the atlas."""

    type: tuple[int, int] = (0, 0)
    transforms: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))
    speed: float = 0.0
    spawn_rate: float = 0.0

    def render(self, surface: pygame.Surface, rect: pygame.Rect, sprites: pygame.Surface, atlas: TextureAtlas) -> None:
        render_target(surface, rect, sprites, atlas.get(*self.type))


class Game:
    """Loads resources, draws each frame and saves state on close."""

    def __init__(self, resources: PathLike = "resources", texture: Optional[pygame.Surface] = None) -> None:
        self.resources = Path(resources)
        self.data = GameData()
        self.texture = texture
        self.atlas: Optional[TextureAtlas] = None
        self.inputs: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)

    @property
    def data_file(self) -> Path:
        return self.resources / GAME_DATA_FILE

    def init(self) -> bool:
        try:
            self.data = GameData.from_bytes(read_entire_file(self.data_file, _GAME_DATA_FORMAT.size))
        except OSError:
            pass
        if self.texture is None:
            self.texture = pygame.image.load(str(self.resources / TARGET_TEXTURE))
        width, height = self.texture.get_size()
        self.atlas = TextureAtlas(2, 1, width, height)
        log("Init")
        return True

    def logic(self, surface: pygame.Surface, delta_time: float, input: Input) -> bool:
        """Draw one frame; returns False to end the game."""
        if self.texture is None or self.atlas is None:
            raise RuntimeError("Game.init must be called before Game.logic")
        surface.fill((0, 0, 0))
        self.inputs = lane_inputs(input)
        print("Inputs: " + ", ".join(f"{value:g}" for value in self.inputs))

        spawns, hits = lane_rects(*surface.get_size())
        lit = self.atlas.get(0, 0)
        unlit = self.atlas.get(1, 0)
        for rect in spawns:
            render_target(surface, rect, self.texture, lit)
        for rect, held in zip(hits, self.inputs):
            render_target(surface, rect, self.texture, lit if held == 1.0 else unlit)
        return True

    def close(self) -> None:
        """Save the game data."""
        try:
            write_entire_file(self.data_file, self.data.to_bytes())
        except OSError:
            pass