"""Main window for the pathfinding visualizer."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QKeySequence, QPalette, QShortcut
from PySide6.QtWidgets import (
    QButtonGroup, QComboBox, QFrame, QGroupBox, QHBoxLayout, QLabel,
    QMainWindow, QMessageBox, QPushButton, QRadioButton, QSlider,
    QStatusBar, QVBoxLayout, QWidget,
)

from ..app.controller import NOTICE_MISSING_ENDPOINT, PathfinderController
from ..app.fsm import RunState
from ..app.scheduler import MAX_INTERVAL_MS, MIN_INTERVAL_MS
from ..domain.types import Algorithm, CellState, SearchResult
from .grid_view import GridView
from .tiles import GridTile

ALGORITHM_DESCRIPTIONS = {
    Algorithm.ASTAR: "Uses Manhattan distance to guide the search towards the goal, "
                     "making it more efficient.",
    Algorithm.DIJKSTRA: "Explores uniformly in all directions, guaranteeing the shortest "
                        "path but exploring more nodes.",
}


class MainWindow(QMainWindow):
    """Main application window: the grid plus its tool, algorithm and run controls."""

    def __init__(self, controller: PathfinderController):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("Pathfinding Visualizer")

        self._create_ui()
        self._setup_connections()
        self._setup_shortcuts()

        self._update_button_states()
        self._update_statistics_display()

    def _create_ui(self):
        """Create the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QHBoxLayout(central_widget)
        main_layout.setSpacing(24)

        self.grid_view = GridView(self.controller)
        main_layout.addWidget(self.grid_view, 0, Qt.AlignCenter)
        main_layout.addLayout(self._create_controls())
        main_layout.addWidget(self._create_algorithm_info())

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready - Place start and end, draw walls, then press Find Path")

    def _create_controls(self) -> QVBoxLayout:
        """Create the control column."""
        layout = QVBoxLayout()

        # Tools
        tools_group = QGroupBox("Tools")
        tools_layout = QVBoxLayout(tools_group)

        self.tool_button_group = QButtonGroup(self)
        self.tool_buttons = {
            CellState.WALL: QRadioButton("Wall"),
            CellState.START: QRadioButton("Start"),
            CellState.END: QRadioButton("End"),
            CellState.EMPTY: QRadioButton("Erase"),
        }
        for radio in self.tool_buttons.values():
            self.tool_button_group.addButton(radio)
            tools_layout.addWidget(radio)
        self.tool_buttons[self.controller.tool].setChecked(True)

        # Algorithm selection
        algo_group = QGroupBox("Algorithm")
        algo_layout = QVBoxLayout(algo_group)
        self.algorithm_combo = QComboBox()
        for algorithm in Algorithm:
            self.algorithm_combo.addItem(algorithm.label, algorithm)
        self.algorithm_combo.setCurrentIndex(list(Algorithm).index(self.controller.algorithm))
        algo_layout.addWidget(self.algorithm_combo)

        # Speed control
        speed_group = QGroupBox("Animation Speed")
        speed_layout = QHBoxLayout(speed_group)
        self.speed_slider = QSlider(Qt.Horizontal)
        self.speed_slider.setRange(MIN_INTERVAL_MS, MAX_INTERVAL_MS)
        self.speed_slider.setValue(self.controller.speed)
        self.speed_label = QLabel(f"{self.controller.speed}ms")
        self.speed_label.setFixedWidth(48)
        speed_layout.addWidget(self.speed_slider)
        speed_layout.addWidget(self.speed_label)

        # Action buttons
        self.run_btn = QPushButton("Find Path")
        self.reset_btn = QPushButton("Reset")

        # Statistics
        stats_group = QGroupBox("Statistics")
        stats_layout = QVBoxLayout(stats_group)
        self.state_label = QLabel()
        self.nodes_explored_label = QLabel()
        self.visited_label = QLabel()
        self.path_length_label = QLabel()
        for label in [self.state_label, self.nodes_explored_label,
                      self.visited_label, self.path_length_label]:
            stats_layout.addWidget(label)

        for widget in [tools_group, algo_group, speed_group, self.run_btn,
                       self.reset_btn, self._create_color_legend(), stats_group]:
            layout.addWidget(widget)
        layout.addStretch()

        return layout

    def _create_color_legend(self) -> QGroupBox:
        """Create the color legend for the visualization."""
        legend_group = QGroupBox("Legend")
        legend_layout = QVBoxLayout(legend_group)

        legend_items = [
            (CellState.START, "Start"),
            (CellState.END, "End"),
            (CellState.WALL, "Wall"),
            (CellState.VISITED, "Explored"),
            (CellState.PATH, "Path"),
        ]

        for state, description in legend_items:
            legend_layout.addWidget(self._create_legend_item(GridTile.COLORS[state], description))

        return legend_group

    def _create_legend_item(self, color: QColor, description: str) -> QWidget:
        """Create a single legend item with color box and description."""
        item_widget = QWidget()
        item_layout = QHBoxLayout(item_widget)
        item_layout.setContentsMargins(2, 2, 2, 2)

        color_box = QFrame()
        color_box.setFixedSize(16, 16)
        color_box.setAutoFillBackground(True)
        palette = color_box.palette()
        palette.setColor(QPalette.Window, color)
        color_box.setPalette(palette)
        color_box.setFrameStyle(QFrame.Box | QFrame.Plain)

        item_layout.addWidget(color_box)
        item_layout.addWidget(QLabel(description))
        item_layout.addStretch()

        return item_widget

    def _create_algorithm_info(self) -> QWidget:
        info = QWidget()
        info_layout = QVBoxLayout(info)
        for algorithm, description in ALGORITHM_DESCRIPTIONS.items():
            label = QLabel(f"<b>{algorithm.label}:</b> {description}")
            label.setWordWrap(True)
            label.setMaximumWidth(260)
            info_layout.addWidget(label)
        info_layout.addStretch()
        return info

    def _setup_connections(self):
        """Setup signal connections."""
        self.tool_button_group.buttonClicked.connect(self._on_tool_clicked)
        self.algorithm_combo.currentIndexChanged.connect(self._on_algorithm_changed)
        self.speed_slider.valueChanged.connect(self._on_speed_changed)
        self.run_btn.clicked.connect(self.controller.run)
        self.reset_btn.clicked.connect(self.controller.reset)

        self.controller.state_changed.connect(self._on_state_changed)
        self.controller.step_completed.connect(self._update_statistics_display)
        self.controller.run_completed.connect(self._on_run_completed)
        self.controller.notice_raised.connect(self._on_notice)
        self.controller.error_occurred.connect(self._on_error)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        QShortcut(QKeySequence("Return"), self, self.controller.run)
        QShortcut(QKeySequence("R"), self, self.controller.reset)
        QShortcut(QKeySequence("Q"), self, self.close)
        QShortcut(QKeySequence("Ctrl+Q"), self, self.close)

    def _on_tool_clicked(self, button):
        for tool, radio in self.tool_buttons.items():
            if radio is button:
                self.controller.select_tool(tool)

    def _on_algorithm_changed(self, index: int):
        self.controller.select_algorithm(self.algorithm_combo.itemData(index))

    def _on_speed_changed(self, value: int):
        """Handle speed slider change."""
        if self.controller.set_speed(value):
            self.speed_label.setText(f"{self.controller.speed}ms")

    def _on_state_changed(self, state: RunState):
        """Handle run state change."""
        self._update_button_states()
        self._update_statistics_display()
        if state == RunState.RUNNING:
            self.status_bar.showMessage(f"Running {self.controller.algorithm.label}...")

    def _on_run_completed(self, result: SearchResult):
        if result.success:
            self.status_bar.showMessage(
                f"Path found! Length: {result.path_cost}, Nodes explored: {result.nodes_explored}"
            )
        else:
            self.status_bar.showMessage(f"No path found. Nodes explored: {result.nodes_explored}")
        self._update_statistics_display()

    def _on_notice(self, kind: str, message: str):
        """Show a blocking notice."""
        title = "Missing Endpoint" if kind == NOTICE_MISSING_ENDPOINT else "No Path"
        QMessageBox.information(self, title, message)

    def _on_error(self, error_msg: str):
        """Handle error from controller."""
        self.status_bar.showMessage(f"Error: {error_msg}")

    def _update_button_states(self):
        """Disable every input while a run is in progress."""
        idle = self.controller.current_state == RunState.IDLE
        for widget in [self.run_btn, self.reset_btn, self.algorithm_combo, self.speed_slider,
                       *self.tool_buttons.values()]:
            widget.setEnabled(idle)

    def _update_statistics_display(self, *_):
        stats = self.controller.get_statistics()
        self.state_label.setText(f"State: {stats['state_description']}")
        self.nodes_explored_label.setText(f"Nodes Explored: {stats['nodes_explored']}")
        self.visited_label.setText(f"Explored Cells: {stats['visited_cells']}")
        self.path_length_label.setText(f"Path Length: {stats['path_length']}")

    def closeEvent(self, event):
        """Cancel any in-flight run before closing."""
        self.controller.cancel_run()
        event.accept()
