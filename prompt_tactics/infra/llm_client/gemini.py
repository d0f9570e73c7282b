"""Gemini APIを使用したLLMクライアント"""

import logging

from google import genai

from prompt_tactics.domain.llm_client.llm_client_base import (
    CompletionRequest,
    LLMClientBase,
    LLMResult,
)

logger = logging.getLogger(__name__)


class GeminiClient(LLMClientBase):
    """Gemini APIを使用したLLMクライアントクラス"""

    def __init__(self, api_key: str) -> None:
        """初期化"""
        self.client = genai.Client(api_key=api_key)

    def complete(self, request: CompletionRequest) -> LLMResult:
        """Gemini APIを使用してリクエストを実行する"""
        contents = [
            genai.types.Content(
                role=message.role,
                parts=[genai.types.Part(text=message.content)],
            )
            for message in request.messages
        ]

        logger.debug("gemini request: model=%s", request.model)
        response = self.client.models.generate_content(
            model=request.model,
            contents=contents,
            config=genai.types.GenerateContentConfig(
                temperature=request.temperature,
                candidate_count=1,
            ),
        )

        # 先頭の候補のテキストパートをそのまま連結する
        # プロンプトがブロックされた場合は candidates が空になる
        candidates = response.candidates or []
        content = getattr(candidates[0], "content", None) if candidates else None
        parts = getattr(content, "parts", None) or []
        texts = [
            part.text
            for part in parts
            if getattr(part, "text", None) and not getattr(part, "thought", False)
        ]
        if not texts:
            msg = f"model {request.model} returned no text content"
            raise ValueError(msg)

        return LLMResult(output="".join(texts))
