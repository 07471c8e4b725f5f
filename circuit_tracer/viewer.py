"""
Solution Viewer Module for Circuit Tracer

Provides a PyQt5 window that shows the unsolved board and lets the user
step through the solved boards returned by a solver.
"""

import logging
from typing import List, Optional, Tuple

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QGridLayout, QHBoxLayout, QVBoxLayout, QLabel,
    QListWidget, QListWidgetItem, QAction, QMessageBox, QApplication,
    QAbstractItemView
)
from PyQt5.QtCore import Qt, QSize
from PyQt5.QtGui import QFont

from circuit_tracer.solver import CircuitBoard, START, END, TRACE

logger = logging.getLogger(__name__)


BOARD_WIDTH = 800
BOARD_HEIGHT = 800
SOLUTIONS_WIDTH = 250
SOLUTION_CELL_HEIGHT = 25

START_COLOR = "#57bcf2"
END_COLOR = "#e03a3a"
TRACE_COLOR = "#e45eeb"
DEFAULT_COLOR = "#ffffff"

MAX_FONT_SIZE = 50


def cell_color(tag: str) -> str:
    """
    Get background color for a cell tag.

    Args:
        tag: Board cell tag

    Returns:
        Hex color code string
    """
    if tag == START:
        return START_COLOR
    elif tag == END:
        return END_COLOR
    elif tag == TRACE:
        return TRACE_COLOR
    return DEFAULT_COLOR


def solutions_label_text(count: int) -> str:
    """Header text for the solutions list, e.g. "1 Solution" or "3 Solutions"."""
    return f"{count} Solution{'s' if count != 1 else ''}"


def cell_size(board: CircuitBoard) -> Tuple[int, int]:
    """
    Get the pixel size of one board cell.

    Boards wider or taller than the board area get 1px cells.

    Returns:
        (width, height) tuple, each at least 1
    """
    cell_width = BOARD_WIDTH // board.num_cols
    cell_height = BOARD_HEIGHT // board.num_rows
    if cell_width < 1 or cell_height < 1:
        logger.warning(
            f"Board {board.num_rows}x{board.num_cols} exceeds "
            f"{BOARD_WIDTH}x{BOARD_HEIGHT}px, cells clamped to 1px"
        )
    return max(1, cell_width), max(1, cell_height)


class SolutionViewer(QMainWindow):
    """
    Window displaying search results.

    The board area starts out showing the unsolved board. Selecting an
    entry in the solutions list redraws the board with that solution's
    trace.
    """

    def __init__(self, unsolved_board: CircuitBoard, solved_boards: List[CircuitBoard]):
        """
        Initialize the viewer.

        Args:
            unsolved_board: Board as read from the input file
            solved_boards: Solved boards to display
        """
        super().__init__()
        self.unsolved_board = unsolved_board
        self.solved_boards = solved_boards
        self.viewing_solution: Optional[int] = None
        self._cells: List[List[QLabel]] = []
        self._init_ui()

    def _init_ui(self):
        """Initialize the user interface components."""
        self.setWindowTitle("--={ Circuit Tracer }=--")
        self.setFixedSize(BOARD_WIDTH + SOLUTIONS_WIDTH, BOARD_HEIGHT)

        self._init_menus()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QHBoxLayout()
        layout.setSpacing(0)
        layout.setContentsMargins(0, 0, 0, 0)
        central_widget.setLayout(layout)

        # Board cells
        board_widget = QWidget()
        board_widget.setFixedSize(BOARD_WIDTH, BOARD_HEIGHT)
        grid = QGridLayout()
        grid.setSpacing(1)
        grid.setContentsMargins(0, 0, 0, 0)
        board_widget.setLayout(grid)

        board = self.unsolved_board
        cell_width, cell_height = cell_size(board)
        cell_font = QFont("Arial")
        cell_font.setBold(True)
        cell_font.setPixelSize(max(8, min(MAX_FONT_SIZE, min(cell_width, cell_height) // 2)))

        for row in range(board.num_rows):
            row_cells = []
            for col in range(board.num_cols):
                cell = QLabel()
                cell.setAlignment(Qt.AlignCenter)
                cell.setFont(cell_font)
                grid.addWidget(cell, row, col)
                row_cells.append(cell)
            self._cells.append(row_cells)

        layout.addWidget(board_widget)

        # Solutions panel
        side_layout = QVBoxLayout()
        side_layout.setContentsMargins(5, 5, 5, 5)

        self.count_label = QLabel(solutions_label_text(len(self.solved_boards)))
        count_font = QFont()
        count_font.setPointSize(10)
        count_font.setBold(True)
        self.count_label.setFont(count_font)
        side_layout.addWidget(self.count_label)

        self.solutions_list = QListWidget()
        self.solutions_list.setSelectionMode(QAbstractItemView.SingleSelection)
        for index in range(len(self.solved_boards)):
            item = QListWidgetItem(f"Solution {index + 1}")
            item.setSizeHint(QSize(SOLUTIONS_WIDTH - 10, SOLUTION_CELL_HEIGHT))
            self.solutions_list.addItem(item)
        self.solutions_list.currentRowChanged.connect(self._on_solution_selected)
        side_layout.addWidget(self.solutions_list, 1)  # stretch factor 1

        side_widget = QWidget()
        side_widget.setFixedWidth(SOLUTIONS_WIDTH)
        side_widget.setLayout(side_layout)
        layout.addWidget(side_widget)

        self._show_board(self.unsolved_board)

    def _init_menus(self):
        """Create File and Help menus."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("File")
        exit_action = QAction("Exit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        help_menu = menu_bar.addMenu("Help")
        about_action = QAction("About...", self)
        about_action.triggered.connect(self._on_about)
        help_menu.addAction(about_action)

    def _on_about(self):
        """Show the About dialog."""
        QMessageBox.information(self, "--={ About }=--", "Circuit Tracer")

    def _on_solution_selected(self, index: int):
        """Handle solutions list selection change."""
        if index < 0 or index == self.viewing_solution:
            return
        self.view_solution(index)

    def view_solution(self, index: int):
        """
        Display a solved board.

        Args:
            index: Index into solved_boards

        Raises:
            IndexError: If index out of range
        """
        board = self.solved_boards[index]
        self.viewing_solution = index
        logger.debug(f"Viewing solution {index + 1} of {len(self.solved_boards)}")
        self._show_board(board)

    def _show_board(self, board: CircuitBoard):
        """Write tags and colors of a board into the cell widgets."""
        for row in range(board.num_rows):
            for col in range(board.num_cols):
                tag = board.char_at(row, col)
                cell = self._cells[row][col]
                cell.setText(tag)
                cell.setStyleSheet(f"background-color: {cell_color(tag)}; color: #000000;")

    def cell_text(self, row: int, col: int) -> str:
        """Text currently displayed at a board position."""
        return self._cells[row][col].text()

    def center_on_screen(self):
        """Place the window in the center of the primary screen."""
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        geometry = screen.availableGeometry()
        self.move(
            geometry.x() + (geometry.width() - self.width()) // 2,
            geometry.y() + (geometry.height() - self.height()) // 2
        )
