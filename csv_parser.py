# csv_parser.py

"""
CSVテキストを行とフィールドに分割するパーサーです。

行は ``\\n``、フィールドは ``,`` で区切るだけで、クォートやエスケープは扱わない。
フィールドはそのまま保持する (CRLF の ``\\r`` は最後のフィールドに残る)。
長さ0の行は読み飛ばすため、空のデータ行と空行は区別できない。
"""

from dataclasses import dataclass, field
from typing import Tuple

import config

Row = Tuple[str, ...]


class ParseError(Exception):
    """CSVテキスト自体を取得できなかったときの例外。

    パーサーは文字列入力に対してこれを投げない。読み込み失敗 (file_io_controller) を包む。
    """

    def __init__(self, message, failure=None):
        super().__init__(message)
        self.failure = failure


@dataclass(frozen=True)
class Table:
    """ファイルの行順に並んだ解析結果。生成後は変更しない。"""
    rows: Tuple[Row, ...] = ()
    column_count: int = field(init=False)

    def __post_init__(self):
        # 最長行の長さが列数になる
        width = max((len(row) for row in self.rows), default=0)
        object.__setattr__(self, "column_count", width)

    @property
    def row_count(self) -> int:
        return len(self.rows)


def split_line(line: str) -> Row:
    return tuple(line.split(config.FIELD_SEPARATOR))


def parse(raw_text: str) -> Table:
    """ファイルのテキストを ``Table`` に変換する。

    >>> parse("a,b,c\\nd,e\\n").rows
    (('a', 'b', 'c'), ('d', 'e'))
    """
    rows = tuple(
        split_line(line)
        for line in raw_text.split(config.LINE_SEPARATOR)
        if len(line) > 0  # 空行はスキップ
    )
    return Table(rows)
