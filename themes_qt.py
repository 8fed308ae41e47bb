# themes_qt.py
from PySide6.QtGui import QColor


class ThemeQt:
    """テーマの基底クラス (PySide6向け調整)"""
    # 列ヘッダー
    HEADER_BG = "#000080"  # Navy
    HEADER_TEXT = "#FFFFFF"
    HEADER_BOLD = True

    # グリッド
    GRID_LINE = "#000000"
    BG_LEVEL_0 = "#FFFFFF"  # セル背景

    # テキスト
    TEXT_PRIMARY = "#212529"

    # PySide6のQColorオブジェクト
    @property
    def HEADER_BG_QCOLOR(self): return QColor(self.HEADER_BG)
    @property
    def HEADER_TEXT_QCOLOR(self): return QColor(self.HEADER_TEXT)
    @property
    def BG_LEVEL_0_QCOLOR(self): return QColor(self.BG_LEVEL_0)
    @property
    def TEXT_PRIMARY_QCOLOR(self): return QColor(self.TEXT_PRIMARY)

    def header_stylesheet(self):
        """列ヘッダー用のスタイルシート"""
        weight = "bold" if self.HEADER_BOLD else "normal"
        return (
            "QHeaderView::section {"
            f" background-color: {self.HEADER_BG};"
            f" color: {self.HEADER_TEXT};"
            f" font-weight: {weight};"
            f" border: 1px solid {self.GRID_LINE};"
            " }"
        )
