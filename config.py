# config.py

"""
アプリケーション全体で使用する定数や設定値を管理します。
Constants shared across the CSV display application.
"""

from themes_qt import ThemeQt

# UI設定
# アプリケーション全体でこのテーマオブジェクトを参照する
CURRENT_THEME = ThemeQt()

APP_TITLE = "CSV Display"
MAIN_WINDOW_SIZE = (600, 500)
GRID_MINIMUM_SIZE = (500, 250)

# =============================================================================
# ファイル選択
# =============================================================================
SELECT_PROMPT_TEXT = "Please select a .CSV file:"
SELECT_BUTTON_TEXT = "select"
CSV_FILE_FILTER = "CSV files (*.csv)"

# =============================================================================
# CSV読み込み設定
# =============================================================================
CSV_READ_OPTIONS = {
    "encoding": "utf-8-sig",
    "errors": "replace",
    "newline": "",  # 改行はパーサー側で扱うのでそのまま残す
}
LINE_SEPARATOR = "\n"
FIELD_SEPARATOR = ","

# =============================================================================
# グリッド表示
# =============================================================================
COLUMN_LABEL_FORMAT = "Column {number}"
EMPTY_CELL_PLACEHOLDER = "(Empty)"
DETAIL_TITLE_FORMAT = "Cell[{column},{row}]"

# =============================================================================
# エラーログ
# =============================================================================
ERROR_LOG_FILENAME = "CSVDisplay-Error.txt"
ERROR_LOG_RULE = "-" * 46

# ファイル選択のキャンセル・読み込み失敗時の終了コード
EXIT_CODE_CANCELLED = 0
EXIT_CODE_READ_FAILURE = 0
