"""プロンプト作成の戦術を実行するコマンドのテスト."""
# ruff: noqa: S101, ARG002

import json
import runpy
from unittest.mock import patch

import pytest

from prompt_tactics.command.status import Status
from prompt_tactics.command.tactic import build_parser, build_prompt_builder, process
from prompt_tactics.domain.llm_client.llm_client_base import (
    CompletionRequest,
    LLMClientBase,
    LLMResult,
)
from prompt_tactics.domain.tactics.build_prompt import (
    BookTitlesPrompt,
    ConsistentStylePrompt,
    InstructionStepsPrompt,
    SequentialActionsPrompt,
    SolutionCheckPrompt,
    SummarizePrompt,
)

# ================================
# build_prompt_builder
# ================================


class TestBuildPromptBuilder:
    """build_prompt_builderのテスト"""

    @pytest.mark.parametrize(
        ("argv", "expected_cls"),
        [
            (["summarize", "--text", "本文"], SummarizePrompt),
            (["book-titles", "--count", "2"], BookTitlesPrompt),
            (["extract-steps", "--text", "本文"], InstructionStepsPrompt),
            (["consistent-style", "--query", "Teach me about resilience."], ConsistentStylePrompt),
            (["sequential-actions", "--text", "本文"], SequentialActionsPrompt),
            (["check-solution", "--question", "Q", "--solution", "S"], SolutionCheckPrompt),
        ],
    )
    def test_subcommand_selects_builder(self, argv: list[str], expected_cls: type) -> None:
        """サブコマンドに対応するプロンプトが生成される"""
        args = build_parser().parse_args(argv)
        assert isinstance(build_prompt_builder(args), expected_cls)

    def test_arguments_are_passed_through(self) -> None:
        """引数がプロンプトに反映される"""
        args = build_parser().parse_args(
            ["--model", "m", "sequential-actions", "--text", "本文", "--language", "German"],
        )
        builder = build_prompt_builder(args)

        assert args.model == "m"
        assert isinstance(builder, SequentialActionsPrompt)
        assert builder.text == "本文"
        assert builder.language == "German"

    def test_tactic_required(self) -> None:
        """サブコマンドがなければ終了する"""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


# ================================
# process
# ================================


class TestProcess:
    """processのテスト"""

    def test_sends_built_prompt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """組み立てたプロンプトを送り、回答を返す"""
        monkeypatch.delenv("OPENAI_MODEL", raising=False)
        captured: list[CompletionRequest] = []

        class SpyLLMClient(LLMClientBase):
            def complete(self, request: CompletionRequest) -> LLMResult:
                captured.append(request)
                return LLMResult(output="Step 1 - Boil water.")

        builder = InstructionStepsPrompt(text="Boil water.")
        with patch(
            "prompt_tactics.command.completion.build_llm_client",
            return_value=SpyLLMClient(),
        ):
            response = process(builder, provider="openai")

        assert response.status == Status.SUCCESS
        assert response.data.answer == "Step 1 - Boil water."
        assert response.data.model == "gpt-3.5-turbo"
        assert captured[0].messages[0].content == builder.get_prompt()
        assert captured[0].temperature == 0.0

    def test_failure_is_wrapped_like_completion(self) -> None:
        """失敗時は補完コマンドと同じくValueErrorに包まれる"""

        class FailingLLMClient(LLMClientBase):
            def complete(self, request: CompletionRequest) -> LLMResult:
                msg = "rate limited"
                raise RuntimeError(msg)

        with (
            patch(
                "prompt_tactics.command.completion.build_llm_client",
                return_value=FailingLLMClient(),
            ),
            pytest.raises(ValueError, match="Exception: rate limited"),
        ):
            process(BookTitlesPrompt(), provider="openai", model="m")


# ================================
# __main__
# ================================


@pytest.fixture
def run_main(monkeypatch: pytest.MonkeyPatch):  # noqa: ANN201
    """コマンドラインからの実行を再現する"""
    for name in ("LLM_PROVIDER", "OPENAI_MODEL", "GEMINI_MODEL", "OPENAI_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("prompt_tactics.infra.logging.logger.setup_logging", lambda _: None)

    def _run(*argv: str) -> None:
        monkeypatch.setattr("sys.argv", ["tactic", *argv])
        runpy.run_module("prompt_tactics.command.tactic", run_name="__main__")

    return _run


@pytest.mark.filterwarnings("ignore::RuntimeWarning")
class TestMain:
    """コマンドとして実行した場合のテスト"""

    def test_show_prompt_does_not_call_model(
        self,
        run_main,  # noqa: ANN001
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """--show-promptではプロンプトを表示するだけで送信しない"""
        with patch("prompt_tactics.command.completion.build_llm_client") as mock_build:
            run_main("--show-prompt", "summarize", "--text", "本文")

        mock_build.assert_not_called()
        out = capsys.readouterr().out
        assert out == (
            "Summarize the text delimited by triple backticks into a single sentence.\n"
            "```本文```\n"
        )

    def test_prints_success_json(
        self,
        run_main,  # noqa: ANN001
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """成功時はSUCCESSのJSONを出力する"""

        class StubLLMClient(LLMClientBase):
            def complete(self, request: CompletionRequest) -> LLMResult:
                return LLMResult(output="No steps provided.")

        with patch(
            "prompt_tactics.command.completion.build_llm_client",
            return_value=StubLLMClient(),
        ):
            run_main("extract-steps", "--text", "晴れた日")

        body = json.loads(capsys.readouterr().out)
        assert body == {
            "status": "SUCCESS",
            "data": {"model": "gpt-3.5-turbo", "answer": "No steps provided."},
        }

    def test_error_prints_failed_json_and_exits(
        self,
        run_main,  # noqa: ANN001
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """失敗時はFAILEDのJSONを出力して終了コード1で終わる"""
        with pytest.raises(SystemExit) as exc_info:
            run_main("--provider", "anthropic", "summarize", "--text", "本文")

        assert exc_info.value.code == 1
        body = json.loads(capsys.readouterr().out)
        assert body["status"] == "FAILED"
        assert "Unknown LLM provider 'anthropic'" in body["error"]
