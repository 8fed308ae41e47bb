# main.py

"""
アプリケーションを起動するためのエントリーポイントです。
このファイルを実行すると、CSVファイルの選択ダイアログが開きます。
"""

import sys

from app_main import run


def main():
    sys.exit(run(sys.argv))


if __name__ == "__main__":
    main()
