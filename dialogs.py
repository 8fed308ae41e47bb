# dialogs.py

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFileDialog, QWidget
)
from PySide6.QtCore import Qt, Signal

import config
from file_io_controller import FileChoice


class FileSelectDialog(QDialog):
    """CSVファイル選択を促すダイアログ。

    ファイル未選択のまま閉じるとキャンセル扱いになる。
    ファイルダイアログを閉じただけならこのダイアログは開いたままで、選び直せる。
    """

    def __init__(self, parent=None, open_file_dialog=None):
        super().__init__(parent)
        self.setWindowTitle(config.APP_TITLE)
        self.setModal(True)
        self._open_file_dialog = open_file_dialog or QFileDialog.getOpenFileName
        self.selected_path = None
        self.setupUi()

    def setupUi(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(50, 50, 50, 10)

        self.prompt_label = QLabel(config.SELECT_PROMPT_TEXT)
        layout.addWidget(self.prompt_label)
        layout.addStretch()

        button_panel = QHBoxLayout()
        self.select_button = QPushButton(config.SELECT_BUTTON_TEXT)
        self.select_button.clicked.connect(self._on_select_clicked)
        button_panel.addWidget(self.select_button)
        button_panel.addStretch()
        layout.addLayout(button_panel)

    def _on_select_clicked(self):
        filepath, _ = self._open_file_dialog(self, config.APP_TITLE, "", config.CSV_FILE_FILTER)
        # ファイルダイアログが閉じられただけならプロンプトは開いたまま
        if not filepath:
            return
        self.selected_path = filepath
        self.accept()

    def choice(self):
        if self.selected_path:
            return FileChoice.selected(self.selected_path)
        return FileChoice.cancelled()


class CellDetailWindow(QWidget):
    """セルの値を全文表示する独立ウィンドウ"""

    closed = Signal(object)

    def __init__(self, title, text, parent=None):
        # 親を持たせるとトップレベルにならないので Qt.Window を明示する
        super().__init__(parent, Qt.Window)
        self.setAttribute(Qt.WA_DeleteOnClose, True)
        self.setWindowTitle(title)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(50, 50, 50, 50)
        self.value_label = QLabel(text)
        self.value_label.setTextFormat(Qt.PlainText)
        self.value_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        layout.addWidget(self.value_label)

    def text(self):
        return self.value_label.text()

    def closeEvent(self, event):
        self.closed.emit(self)
        super().closeEvent(event)
