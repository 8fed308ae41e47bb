# error_log.py

import sys
from datetime import datetime
from pathlib import Path

from PySide6.QtCore import QStandardPaths

import config


def default_log_path():
    """デスクトップ上のエラーログのパス。デスクトップが取れなければホーム。"""
    desktop = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.DesktopLocation)
    # 存在しないデスクトップのパスが返ることがあるので確認する
    base = Path(desktop) if desktop and Path(desktop).is_dir() else Path.home()
    return base / config.ERROR_LOG_FILENAME


class ErrorLog:
    """追記専用のエラーログ。

    ログファイルに書けない場合は同じ内容を標準エラーに出力する。write は例外を投げない。
    """

    def __init__(self, path=None, stream=None):
        self.path = Path(path) if path is not None else default_log_path()
        self._stream = stream

    def format_block(self, summary, error):
        return "\n".join([
            config.ERROR_LOG_RULE,
            datetime.now().isoformat(timespec="seconds"),
            f"ERROR: {summary}",
            str(error),
            config.ERROR_LOG_RULE,
        ]) + "\n"

    def write(self, summary, error):
        block = self.format_block(summary, error)
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(block)
            return True
        except Exception as e:
            stream = self._stream or sys.stderr
            try:
                print("ERROR: Could not write to error log file", file=stream)
                print(e, file=stream)
                print(block, end="", file=stream)
            except Exception:
                # コンソールにも書けない場合は諦める
                pass
            return False

    def write_failure(self, failure):
        return self.write(failure.summary, failure.message)
