"""コマンド共通の設定 (プロバイダ選択、環境変数、クライアント生成)"""

import os
from enum import Enum

from prompt_tactics.domain.llm_client.llm_client_base import LLMClientBase
from prompt_tactics.infra.llm_client.gemini import GeminiClient
from prompt_tactics.infra.llm_client.openai_chat import OpenAIChatClient


class Provider(str, Enum):
    """LLMプロバイダ"""

    OPENAI = "openai"
    GEMINI = "gemini"


DEFAULT_PROVIDER = Provider.OPENAI

API_KEY_ENV: dict[Provider, str] = {
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.GEMINI: "GEMINI_API_KEY",
}

DEFAULT_MODELS: dict[Provider, str] = {
    Provider.OPENAI: "gpt-3.5-turbo",
    Provider.GEMINI: "gemini-2.5-flash-lite",
}

MODEL_ENV: dict[Provider, str] = {
    Provider.OPENAI: "OPENAI_MODEL",
    Provider.GEMINI: "GEMINI_MODEL",
}


def resolve_provider(name: str | None = None) -> Provider:
    """プロバイダ名を解決する (引数 > LLM_PROVIDER > デフォルト)"""
    value = (name or os.getenv("LLM_PROVIDER") or DEFAULT_PROVIDER.value).lower()
    try:
        return Provider(value)
    except ValueError as e:
        available = ", ".join(p.value for p in Provider)
        msg = f"Unknown LLM provider '{value}'. Available: {available}"
        raise ValueError(msg) from e


def resolve_model(provider: Provider, model: str | None = None) -> str:
    """モデル名を解決する (引数 > プロバイダごとの環境変数 > プロバイダのデフォルト)"""
    return model or os.getenv(MODEL_ENV[provider]) or DEFAULT_MODELS[provider]


def validate_env(provider: Provider) -> str:
    """環境変数を検証し、APIキーを返す"""
    name = API_KEY_ENV[provider]
    api_key = os.getenv(name)
    if not api_key:
        msg = f"{name} is required"
        raise ValueError(msg)
    return api_key


def build_llm_client(provider: Provider) -> LLMClientBase:
    """プロバイダに対応するLLMクライアントを生成する"""
    api_key = validate_env(provider)
    if provider is Provider.GEMINI:
        return GeminiClient(api_key=api_key)
    return OpenAIChatClient(api_key=api_key)
