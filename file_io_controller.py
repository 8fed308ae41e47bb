# file_io_controller.py

import enum
import traceback
from dataclasses import dataclass
from typing import Optional

import config
from csv_parser import ParseError, parse


@dataclass(frozen=True)
class FileChoice:
    """ファイル選択の結果。path が None ならキャンセル。"""
    path: Optional[str] = None

    @classmethod
    def selected(cls, path):
        return cls(path=str(path))

    @classmethod
    def cancelled(cls):
        return cls(path=None)

    @property
    def is_cancelled(self):
        return self.path is None


class ReadFailureKind(enum.Enum):
    ARGUMENT = "argument"
    OUT_OF_MEMORY = "out_of_memory"
    IO = "io"


@dataclass(frozen=True)
class ReadFailure:
    kind: ReadFailureKind
    summary: str
    error: BaseException

    @property
    def message(self):
        return str(self.error)


@dataclass(frozen=True)
class ReadResult:
    """読み込み結果。text か failure のどちらか一方だけを持つ。"""
    path: str
    text: Optional[str] = None
    failure: Optional[ReadFailure] = None

    @property
    def ok(self):
        return self.failure is None

    def unwrap(self):
        if self.failure is not None:
            raise ParseError(self.failure.summary, failure=self.failure) from self.failure.error
        return self.text


def _classify(path, error):
    if isinstance(error, MemoryError):
        return ReadFailure(
            ReadFailureKind.OUT_OF_MEMORY,
            "There is insufficient memory to allocate a buffer for the returned string",
            error,
        )
    # ストリームとして読めないもの (権限なし、ディレクトリ、不正な引数)
    if isinstance(error, (PermissionError, IsADirectoryError, ValueError, TypeError)):
        return ReadFailure(ReadFailureKind.ARGUMENT, "File stream does not support reading", error)
    return ReadFailure(ReadFailureKind.IO, f"Failed to read the file {path}:", error)


def read_csv_text(path) -> ReadResult:
    """ファイル全体をテキストとして読み込む。例外は ReadResult に変換する。"""
    try:
        with open(path, "r", **config.CSV_READ_OPTIONS) as f:
            text = f.read()
    except (MemoryError, OSError, ValueError, TypeError) as e:
        failure = _classify(path, e)
        print(f"ERROR: ファイル読み込み失敗 ({failure.kind.value}): {e}")
        return ReadResult(path=str(path), failure=failure)
    return ReadResult(path=str(path), text=text)


class FileIOController:
    """ファイル選択と読み込みを管理するコントローラー"""

    def __init__(self, parent_widget=None, chooser=None, reader=read_csv_text):
        self.parent_widget = parent_widget
        # chooser: () -> FileChoice。未指定ならプロンプトダイアログを使う
        self._chooser = chooser
        self._reader = reader

    def select_file(self) -> FileChoice:
        print("DEBUG: FileIOController.select_file called.")
        if self._chooser is not None:
            return self._chooser()

        from dialogs import FileSelectDialog
        dialog = FileSelectDialog(self.parent_widget)
        dialog.exec()
        return dialog.choice()

    def load_file(self, filepath):
        """ファイルを読み込んで解析する。成功時は (table, None)、失敗時は (None, failure)。"""
        print(f"DEBUG: ファイル読み込みを開始: {filepath}")
        result = self._reader(filepath)
        if not result.ok:
            return None, result.failure

        try:
            table = parse(result.text)
        except MemoryError as e:
            print(f"ERROR: 解析中にメモリ不足: {e}")
            traceback.print_exc()
            failure = _classify(filepath, e)
            return None, failure

        print(f"DEBUG: 読み込み完了 - rows: {table.row_count}, columns: {table.column_count}")
        return table, None
