"""OpenAI Chat Completions APIを使用したLLMクライアント"""

import logging

import httpx
from openai import OpenAI

from prompt_tactics.domain.llm_client.llm_client_base import (
    CompletionRequest,
    LLMClientBase,
    LLMResult,
)

logger = logging.getLogger(__name__)


class OpenAIChatClient(LLMClientBase):
    """OpenAI Chat Completions APIを使用したLLMクライアントクラス

    base_url を指定すれば OpenAI 互換の他サービスにも接続できる。
    SDKの自動リトライは無効にし、1回の呼び出しで送るリクエストは1つだけにする。
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """初期化"""
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=0,
            http_client=http_client,
        )

    def complete(self, request: CompletionRequest) -> LLMResult:
        """Chat Completions APIを使用してリクエストを実行する"""
        messages = [
            {"role": message.role, "content": message.content}
            for message in request.messages
        ]

        logger.debug("openai request: model=%s", request.model)
        response = self.client.chat.completions.create(
            model=request.model,
            messages=messages,
            temperature=request.temperature,
        )

        content = response.choices[0].message.content
        if content is None:
            msg = f"model {request.model} returned no text content"
            raise ValueError(msg)

        return LLMResult(output=content)
