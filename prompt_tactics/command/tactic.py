"""プロンプト作成の戦術を実行するコマンド"""

import argparse

from dotenv import load_dotenv

from prompt_tactics.command.completion import Request, Response, render_error
from prompt_tactics.command.completion import process as process_completion
from prompt_tactics.domain.tactics.build_prompt import (
    BookTitlesPrompt,
    ConsistentStylePrompt,
    InstructionStepsPrompt,
    PromptBuilder,
    SequentialActionsPrompt,
    SolutionCheckPrompt,
    SummarizePrompt,
)
from prompt_tactics.infra.logging.logger import setup_logging

load_dotenv()


def build_parser() -> argparse.ArgumentParser:
    """サブコマンドごとの引数を定義する"""
    parser = argparse.ArgumentParser(description="プロンプト作成の戦術を実行する")
    parser.add_argument(
        "--model",
        help="モデル名 (省略時は OPENAI_MODEL / GEMINI_MODEL またはデフォルト)",
    )
    parser.add_argument("--provider", help="openai または gemini")
    parser.add_argument(
        "--show-prompt",
        action="store_true",
        help="送信せずにプロンプトだけを表示する",
    )

    subparsers = parser.add_subparsers(dest="tactic", required=True)

    summarize = subparsers.add_parser("summarize", help="区切り文字で囲んだテキストを要約")
    summarize.add_argument("--text", required=True)

    book_titles = subparsers.add_parser("book-titles", help="JSON形式で出力させる")
    book_titles.add_argument("--count", type=int, default=3)

    extract_steps = subparsers.add_parser("extract-steps", help="手順の有無を確認させる")
    extract_steps.add_argument("--text", required=True)

    consistent_style = subparsers.add_parser("consistent-style", help="few-shotでスタイルを揃える")
    consistent_style.add_argument("--query", required=True)

    sequential_actions = subparsers.add_parser(
        "sequential-actions",
        help="手順と出力フォーマットを指定",
    )
    sequential_actions.add_argument("--text", required=True)
    sequential_actions.add_argument("--language", default="French")

    check_solution = subparsers.add_parser("check-solution", help="自分で解いてから判定させる")
    check_solution.add_argument("--question", required=True)
    check_solution.add_argument("--solution", required=True)

    return parser


def build_prompt_builder(args: argparse.Namespace) -> PromptBuilder:
    """サブコマンドに対応するプロンプトを生成する"""
    if args.tactic == "summarize":
        return SummarizePrompt(text=args.text)
    if args.tactic == "book-titles":
        return BookTitlesPrompt(count=args.count)
    if args.tactic == "extract-steps":
        return InstructionStepsPrompt(text=args.text)
    if args.tactic == "consistent-style":
        return ConsistentStylePrompt(query=args.query)
    if args.tactic == "sequential-actions":
        return SequentialActionsPrompt(text=args.text, language=args.language)
    if args.tactic == "check-solution":
        return SolutionCheckPrompt(question=args.question, student_solution=args.solution)

    msg = f"Unknown tactic: {args.tactic}"
    raise ValueError(msg)


def process(
    builder: PromptBuilder,
    provider: str | None = None,
    model: str | None = None,
) -> Response:
    """プロンプトを組み立て、補完コマンドと同じ手順で実行する"""
    request = Request(prompt=builder.get_prompt(), model=model, provider=provider)
    return process_completion(request)


if __name__ == "__main__":
    args = build_parser().parse_args()
    setup_logging("prompt_tactics.tactic")

    try:
        builder = build_prompt_builder(args)
        if args.show_prompt:
            print(builder.get_prompt())
        else:
            print(process(builder, provider=args.provider, model=args.model).model_dump_json())
    except Exception as e:  # noqa: BLE001
        print(render_error(e))
        exit(1)  # noqa: PLR1722
