"""LLMクライアントインターフェースおよびその入出力DTOの定義"""

from abc import ABC, abstractmethod
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# 決定的デコーディング (サンプリングなし)
DETERMINISTIC_TEMPERATURE = 0.0

# ================================
# 入出力DTO
# ================================


class Prompt(BaseModel):
    """LLMに送信するプロンプトを表すイミュータブルなデータクラス"""

    model_config = ConfigDict(frozen=True)

    text: str


class Message(BaseModel):
    """会話の1ターン (ロールタグと本文)"""

    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    content: str


class CompletionRequest(BaseModel):
    """外部サービスへ送る1回分のリクエスト

    呼び出しごとに生成され、送信後は破棄される。
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(min_length=1)
    messages: tuple[Message, ...] = Field(min_length=1)
    temperature: float = Field(default=DETERMINISTIC_TEMPERATURE, ge=0.0, le=2.0)

    @classmethod
    def single_turn(cls, prompt: Prompt, model: str) -> "CompletionRequest":
        """プロンプトをそのまま唯一のuserターンとするリクエストを作る"""
        return cls(model=model, messages=(Message(content=prompt.text),))


class LLMResult(BaseModel):
    """LLMの応答結果を表すモデル"""

    output: str


# ================================
# インターフェース
# ================================


class LLMClientBase(ABC):
    """LLMクライアントの抽象基底クラス"""

    @abstractmethod
    def complete(self, request: CompletionRequest) -> LLMResult:
        """リクエストを1回送信し、先頭の候補のテキストを返す"""
        ...

    def predict(self, prompt: Prompt, model: str) -> LLMResult:
        """プロンプトを単一ターンの会話に包んで実行する"""
        return self.complete(CompletionRequest.single_turn(prompt, model))
