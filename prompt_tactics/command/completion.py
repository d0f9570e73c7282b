"""プロンプトに対する補完を取得するコマンド"""

import argparse

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from prompt_tactics.command.config import (
    build_llm_client,
    resolve_model,
    resolve_provider,
)
from prompt_tactics.command.status import Status
from prompt_tactics.infra.logging.logger import setup_logging
from prompt_tactics.usecase.completion.dto import CompletionResponse
from prompt_tactics.usecase.completion.usecase import CompletionUsecase

load_dotenv()


class Request(BaseModel):
    """プロンプトに対する補完を取得するリクエスト"""

    prompt: str
    model: str | None = None
    provider: str | None = None


class Response(BaseModel):
    """APIレスポンスラッパー"""

    status: Status
    data: CompletionResponse


class ErrorResponse(BaseModel):
    """エラー時のレスポンスラッパー"""

    status: Status = Status.FAILED
    error: str


def render_error(error: Exception) -> str:
    """例外をエラーレスポンスのJSONに変換する"""
    return ErrorResponse(error=str(error)).model_dump_json()


def process(request: Request) -> Response:
    """ユースケースを実行する"""
    # 0. プロバイダを解決し、環境変数を検証
    provider = resolve_provider(request.provider)

    # 1. ユースケースを定義
    usecase = CompletionUsecase(
        llm_client=build_llm_client(provider),
        model=resolve_model(provider, request.model),
    )

    # 2. ユースケースを実行
    try:
        response = usecase.execute(request.prompt)
    except Exception as e:
        error_message = f"Exception: {e}"
        raise ValueError(error_message) from e

    # 3. レスポンスを返す
    return Response(status=Status.SUCCESS, data=response)


def lambda_handler(event, context):  # noqa: ARG001, ANN201, ANN001
    """AWS Lambda handler function"""
    setup_logging("prompt_tactics.completion")
    try:
        req = Request.model_validate(event)
    except ValidationError as e:
        error_message = f"ValidationError: {e}"
        raise ValueError(error_message) from e

    resp = process(req)

    return resp.model_dump_json()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="プロンプトに対する補完を取得する")
    parser.add_argument(
        "--prompt",
        required=True,
        help="プロンプト",
    )
    parser.add_argument(
        "--model",
        help="モデル名 (省略時は OPENAI_MODEL / GEMINI_MODEL またはデフォルト)",
    )
    parser.add_argument("--provider", help="openai または gemini")

    args = parser.parse_args()
    setup_logging("prompt_tactics.completion")

    try:
        # リクエストを作成
        request = Request(prompt=args.prompt, model=args.model, provider=args.provider)

        response = process(request)
        print(response.model_dump_json())
    except Exception as e:  # noqa: BLE001
        print(render_error(e))
        exit(1)  # noqa: PLR1722
