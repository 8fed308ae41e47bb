# table_model.py

import pandas as pd

import config
from csv_parser import Table


class _Missing:
    """欠損セルを表すセンチネル。空文字列とは区別される。"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


MISSING = _Missing()


class TableModel:
    """解析済み ``Table`` を矩形として見せる読み取り専用ビュー。

    ``columnCount()`` より短い行は、足りない位置に ``MISSING`` を返す。
    """

    def __init__(self, table=None):
        self._table = table if table is not None else Table()

    @property
    def table(self):
        return self._table

    def rowCount(self):
        return self._table.row_count

    def columnCount(self):
        return self._table.column_count

    def cellAt(self, row, col):
        if not 0 <= row < self.rowCount():
            raise IndexError(f"row {row} out of range (rows: {self.rowCount()})")
        if not 0 <= col < self.columnCount():
            raise IndexError(f"column {col} out of range (columns: {self.columnCount()})")
        fields = self._table.rows[row]
        if col >= len(fields):
            return MISSING
        return fields[col]

    def display_text(self, row, col):
        """詳細表示用のテキスト。欠損・空文字列はプレースホルダーになる。"""
        value = self.cellAt(row, col)
        if value is MISSING or value == "":
            return config.EMPTY_CELL_PLACEHOLDER
        return value

    def column_labels(self):
        return [config.COLUMN_LABEL_FORMAT.format(number=i + 1) for i in range(self.columnCount())]

    def to_dataframe(self):
        """表示用のDataFrame。欠損位置は None になる。"""
        width = self.columnCount()
        padded = [list(row) + [None] * (width - len(row)) for row in self._table.rows]
        return pd.DataFrame(padded, columns=self.column_labels(), dtype=object)
