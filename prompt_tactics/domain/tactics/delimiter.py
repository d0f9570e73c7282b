"""区切り文字によるフェンシング

呼び出し元が渡したテキストは、必ずここを通してテンプレートへ埋め込む。
フェンスの内側は指示ではなくデータとして扱われる前提であり、
中身の加工やエスケープは行わない。
"""

from enum import Enum


class Delimiter(str, Enum):
    """テキストを囲む区切り文字"""

    TRIPLE_BACKTICKS = "```"
    TRIPLE_QUOTES = '"""'
    TRIPLE_DASHES = "---"
    ANGLE_BRACKETS = "<>"

    @property
    def opening(self) -> str:
        """開始マーカー"""
        if self is Delimiter.ANGLE_BRACKETS:
            return "<"
        return self.value

    @property
    def closing(self) -> str:
        """終了マーカー"""
        if self is Delimiter.ANGLE_BRACKETS:
            return ">"
        return self.value

    @property
    def description(self) -> str:
        """プロンプト本文中での呼び方"""
        return self.name.lower().replace("_", " ")


def fence(text: str, delimiter: Delimiter = Delimiter.TRIPLE_BACKTICKS) -> str:
    """テキストを区切り文字で囲む"""
    return f"{delimiter.opening}{text}{delimiter.closing}"
