"""Grid view for the pathfinding visualization."""

from typing import Dict

from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QGraphicsScene, QGraphicsView

from ..app.controller import PathfinderController
from ..domain.types import Coord
from .tiles import GridTile


class GridView(QGraphicsView):
    """Graphics view for displaying and painting the grid."""

    def __init__(self, controller: PathfinderController, tile_size: float = 32.0):
        super().__init__()

        self.controller = controller
        self.scene = QGraphicsScene()
        self.setScene(self.scene)

        self.tiles: Dict[Coord, GridTile] = {}
        self.tile_size = tile_size

        self.setRenderHint(QPainter.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        self._build_tiles()
        self.controller.grid_updated.connect(self.update_grid)

    def _build_tiles(self):
        """Create one tile per cell; the grid size never changes afterwards."""
        grid = self.controller.grid
        side = grid.size * self.tile_size
        self.scene.setSceneRect(0, 0, side, side)
        self.setFixedSize(int(side) + 4, int(side) + 4)

        for coord in grid.coords():
            tile = GridTile(coord[0], coord[1], self.tile_size, grid.get(coord))
            self.scene.addItem(tile)
            self.tiles[coord] = tile

    def update_grid(self):
        """Sync tile colors with the controller's grid."""
        grid = self.controller.grid
        for coord, tile in self.tiles.items():
            tile.set_state(grid.get(coord))

    def mousePressEvent(self, event):
        """Paint the selected tool on left click."""
        if event.button() == Qt.LeftButton:
            scene_pos = self.mapToScene(event.pos())
            coord = (int(scene_pos.y() // self.tile_size), int(scene_pos.x() // self.tile_size))
            if self.controller.grid.in_bounds(coord):
                self.controller.paint_cell(coord)

        super().mousePressEvent(event)
