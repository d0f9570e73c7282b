"""コマンド結果のステータス"""

from enum import Enum


class Status(str, Enum):
    """コマンド出力のステータス"""

    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
