"""プロンプトに対する補完を取得するユースケース"""

import logging

from prompt_tactics.domain.llm_client.llm_client_base import LLMClientBase, LLMResult, Prompt
from prompt_tactics.usecase.completion.dto import CompletionResponse

logger = logging.getLogger(__name__)


class CompletionUsecase:
    """プロンプトに対する補完を取得するユースケース

    プロンプトは加工せずに1回だけ送信し、応答も加工せずに返す。
    外部サービスの例外は捕捉しない。
    """

    def __init__(self, llm_client: LLMClientBase, model: str) -> None:
        """初期化"""
        self.llm_client = llm_client
        self.model = model

    def execute(self, prompt: str) -> CompletionResponse:
        """プロンプトに対する補完を取得する"""
        logger.info(
            "completion requested",
            extra={"_extra": {"model": self.model, "prompt_length": len(prompt)}},
        )
        result: LLMResult = self.llm_client.predict(Prompt(text=prompt), self.model)
        logger.info(
            "completion received",
            extra={"_extra": {"model": self.model, "answer_length": len(result.output)}},
        )
        return CompletionResponse(model=self.model, answer=result.output)
