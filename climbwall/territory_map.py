"""The territory grid: which player holds each cell."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, Sequence

import pygame

from climbwall.config import TerritoryConfig
from climbwall.vectors import Vec2

NO_BODY = 255
LEFT_BODY = 1


class Owner(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2


class BodyMaskTracker(Protocol):
    """What the map needs from a tracker that sees whole bodies."""

    def body_mask(self) -> Sequence[Sequence[int]]: ...

    def simplify_body_mask(self) -> None: ...

    def project(self, point: Vec2) -> Vec2: ...


class _CellCounter(Protocol):
    def captured_cell(self) -> None: ...

    def lost_cell(self) -> None: ...


class Map:
    """A grid of ``size``-pixel cells covering a ``width`` x ``height`` field."""

    def __init__(
        self,
        width: float,
        height: float,
        size: int,
        left: _CellCounter,
        right: _CellCounter,
        config: TerritoryConfig,
    ) -> None:
        if size <= 0:
            raise ValueError(f"cell size must be positive, got {size}")
        self.size = int(size)
        self.n_rows = int(width / size)
        self.n_cols = int(height / size)
        self.left = left
        self.right = right
        self.colors = {Owner.LEFT: config.red, Owner.RIGHT: config.green}
        self._cells = [[Owner.NONE] * self.n_cols for _ in range(self.n_rows)]
        self._tiles: dict[Owner, pygame.Surface] = {}

    def set_texture(self, texture: pygame.Surface) -> None:
        """Show captured cells with ``texture`` tinted in the owner's colour."""
        tile = pygame.transform.scale(texture, (self.size, self.size))
        self._tiles = {}
        for owner, color in self.colors.items():
            tinted = tile.copy()
            tinted.fill((*color[:3], 255), special_flags=pygame.BLEND_RGBA_MULT)
            self._tiles[owner] = tinted

    def update(self, tracker: BodyMaskTracker, kinect_control: bool) -> None:
        """Claim the cells under every body point the tracker sees."""
        if not kinect_control:
            return
        for i, row in enumerate(tracker.body_mask()):
            for j, value in enumerate(row):
                if value != NO_BODY:
                    ci, cj = self.cell_of(tracker.project(Vec2(float(i), float(j))))
                    self.set_enabled(ci, cj, value == LEFT_BODY)

    def _in_bounds(self, i: int, j: int) -> bool:
        return 0 <= i < self.n_rows and 0 <= j < self.n_cols

    def set_enabled(self, i: int, j: int, left: bool) -> None:
        """Give cell (i, j) to a player; cells outside the grid are ignored."""
        if not self._in_bounds(i, j):
            return
        current = self._cells[i][j]
        if left:
            if current is Owner.RIGHT:
                self.right.lost_cell()
            if current is not Owner.LEFT:
                self.left.captured_cell()
            self._cells[i][j] = Owner.LEFT
        else:
            if current is Owner.LEFT:
                self.left.lost_cell()
            if current is not Owner.RIGHT:
                self.right.captured_cell()
            self._cells[i][j] = Owner.RIGHT

    def owner(self, i: int, j: int) -> Owner:
        """Who holds cell (i, j)."""
        if not self._in_bounds(i, j):
            raise IndexError(f"cell ({i}, {j}) is outside a {self.n_rows}x{self.n_cols} map")
        return self._cells[i][j]

    def cell_of(self, point: Vec2) -> tuple[int, int]:
        """The grid cell a point falls in, truncating toward zero."""
        return int(point.x / self.size), int(point.y / self.size)

    def render(self, surface: pygame.Surface) -> None:
        for i, column in enumerate(self._cells):
            for j, owner in enumerate(column):
                if owner is Owner.NONE:
                    continue
                corner = (i * self.size, j * self.size)
                tile = self._tiles.get(owner)
                if tile is not None:
                    surface.blit(tile, corner)
                else:
                    surface.fill(self.colors[owner], pygame.Rect(corner, (self.size, self.size)))