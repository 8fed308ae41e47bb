# grid_controller.py

from PySide6.QtWidgets import QAbstractItemView, QHeaderView
from PySide6.QtCore import QObject, Signal, QModelIndex

import config
from data_model import CsvTableModel
from dialogs import CellDetailWindow
from table_model import TableModel


class GridController(QObject):
    """グリッド表示とセル詳細ウィンドウを管理するコントローラー"""

    # シグナル定義
    detail_opened = Signal(object)  # CellDetailWindow

    def __init__(self, table_view, table_model=None, theme=None):
        super().__init__()
        self.table_view = table_view
        self.theme = theme if theme is not None else config.CURRENT_THEME
        self.qt_model = CsvTableModel(table_model or TableModel(), theme=self.theme)
        self.detail_windows = []
        self._setup_table_view()

    def _setup_table_view(self):
        view = self.table_view
        view.setModel(self.qt_model)
        view.setSelectionBehavior(QAbstractItemView.SelectItems)
        view.setSelectionMode(QAbstractItemView.SingleSelection)
        view.setEditTriggers(QAbstractItemView.NoEditTriggers)
        view.verticalHeader().setVisible(False)
        view.verticalHeader().setSectionResizeMode(QHeaderView.ResizeToContents)
        view.horizontalHeader().setSectionResizeMode(QHeaderView.Interactive)
        view.setShowGrid(True)
        view.setStyleSheet(f"QTableView {{ gridline-color: {self.theme.GRID_LINE}; }}")
        view.horizontalHeader().setStyleSheet(self.theme.header_stylesheet())
        view.doubleClicked.connect(self._on_double_clicked)

    @property
    def table_model(self):
        return self.qt_model.table_model

    def set_table_model(self, table_model):
        """表示中のモデルを丸ごと差し替える"""
        self.qt_model.set_table_model(table_model)
        print(f"DEBUG: グリッド更新 - rows: {self.qt_model.rowCount()}, columns: {self.qt_model.columnCount()}")

    def detail_title(self, row, col):
        # タイトルは0始まり、列ヘッダーは1始まり
        return config.DETAIL_TITLE_FORMAT.format(column=col, row=row)

    def detail_text(self, row, col):
        return self.table_model.display_text(row, col)

    def _on_double_clicked(self, index: QModelIndex):
        if not index.isValid():
            return
        self.open_cell_detail(index.row(), index.column())

    def open_cell_detail(self, row, col):
        window = CellDetailWindow(
            self.detail_title(row, col),
            self.detail_text(row, col),
            parent=self.table_view.window(),
        )
        window.closed.connect(self._forget_detail_window)
        self.detail_windows.append(window)
        window.show()
        self.detail_opened.emit(window)
        return window

    def _forget_detail_window(self, window):
        if window in self.detail_windows:
            self.detail_windows.remove(window)

    def close_all_details(self):
        for window in list(self.detail_windows):
            window.close()
