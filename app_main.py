# app_main.py

"""
アプリケーション本体。ファイル選択 → 読み込み → 解析 → 表示を順番に実行します。

プロセスの終了を決めるのは ``run`` だけで、選択・読み込みの各ステップは
結果オブジェクトを返し、``run`` がそれを終了コードに変換する。
"""

import sys
from dataclasses import dataclass

from PySide6.QtWidgets import QApplication, QMainWindow, QTableView

import config
from error_log import ErrorLog
from file_io_controller import FileIOController
from grid_controller import GridController
from table_model import TableModel


@dataclass(frozen=True)
class Session:
    """1回のファイル読み込みに対応する状態"""
    filepath: str
    model: TableModel

    @classmethod
    def from_table(cls, filepath, table):
        return cls(filepath=str(filepath), model=TableModel(table))


class CsvDisplayApp(QMainWindow):
    """CSVをグリッド表示するメインウィンドウ"""

    def __init__(self, session=None, parent=None):
        super().__init__(parent)
        self.session = None
        self.setWindowTitle(config.APP_TITLE)
        self.resize(*config.MAIN_WINDOW_SIZE)

        self.table_view = QTableView(self)
        self.table_view.setMinimumSize(*config.GRID_MINIMUM_SIZE)
        self.setCentralWidget(self.table_view)
        self.grid_controller = GridController(self.table_view, theme=config.CURRENT_THEME)

        if session is not None:
            self.set_session(session)

    def set_session(self, session):
        """セッションを差し替え、グリッドを作り直す"""
        self.session = session
        self.grid_controller.set_table_model(session.model)
        self.setWindowTitle(f"{config.APP_TITLE} - {session.filepath}")

    def closeEvent(self, event):
        self.grid_controller.close_all_details()
        super().closeEvent(event)


def start_session(file_controller, error_log):
    """ファイルを選択して読み込む。(session, exit_code) を返し、どちらか一方は None。"""
    choice = file_controller.select_file()
    if choice.is_cancelled:
        # ファイル未選択でのクローズはプログラム終了の意思とみなす
        print("DEBUG: ファイル選択がキャンセルされました。終了します。")
        return None, config.EXIT_CODE_CANCELLED

    table, failure = file_controller.load_file(choice.path)
    if failure is not None:
        error_log.write_failure(failure)
        return None, config.EXIT_CODE_READ_FAILURE

    return Session.from_table(choice.path, table), None


def run(argv=None, file_controller=None, error_log=None):
    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    file_controller = file_controller or FileIOController()
    error_log = error_log or ErrorLog()

    session, exit_code = start_session(file_controller, error_log)
    if session is None:
        return exit_code

    window = CsvDisplayApp(session)
    window.show()
    print("DEBUG: メインウィンドウ表示完了")
    return app.exec()
