# data_model.py

from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
import pandas as pd

from table_model import TableModel


class CsvTableModel(QAbstractTableModel):
    """QTableView 用の表示専用モデル。TableModel から作った DataFrame を保持する。"""

    def __init__(self, table_model=None, theme=None, parent=None):
        super().__init__(parent)
        self._table_model = table_model if table_model is not None else TableModel()
        self._dataframe = self._table_model.to_dataframe()
        self._headers = list(self._dataframe.columns)
        self._theme = theme

    @property
    def table_model(self):
        return self._table_model

    def set_table_model(self, table_model):
        self.beginResetModel()
        self._table_model = table_model if table_model is not None else TableModel()
        self._dataframe = self._table_model.to_dataframe()
        self._headers = list(self._dataframe.columns)
        self.endResetModel()

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return self._dataframe.shape[0]

    def columnCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._headers)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid(): return None
        row, col = index.row(), index.column()

        if role in (Qt.DisplayRole, Qt.ToolTipRole):
            if not (0 <= row < self._dataframe.shape[0] and 0 <= col < self.columnCount()):
                return None
            cell_content = self._dataframe.iloc[row, col]
            # 欠損セルはグリッド上では空欄
            return "" if cell_content is None or pd.isna(cell_content) else str(cell_content)

        if self._theme:
            if role == Qt.BackgroundRole:
                return self._theme.BG_LEVEL_0_QCOLOR
            if role == Qt.ForegroundRole:
                return self._theme.TEXT_PRIMARY_QCOLOR

        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and 0 <= section < len(self._headers):
            if role == Qt.DisplayRole:
                return self._headers[section]
            if self._theme:
                if role == Qt.BackgroundRole: return self._theme.HEADER_BG_QCOLOR
                if role == Qt.ForegroundRole: return self._theme.HEADER_TEXT_QCOLOR
        elif orientation == Qt.Vertical and role == Qt.DisplayRole:
            return str(section + 1)
        return None

    def flags(self, index):
        if not index.isValid(): return Qt.NoItemFlags
        # 読み取り専用
        return Qt.ItemIsSelectable | Qt.ItemIsEnabled
