"""プロンプト作成の戦術ごとにプロンプトを定義する"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from prompt_tactics.domain.tactics.delimiter import Delimiter, fence

# 少数例示 (few-shot) のデフォルト例
DEFAULT_STYLE_EXAMPLES: tuple[tuple[str, str], ...] = (
    (
        "Teach me about patience.",
        "The river that carves the deepest valley flows from a modest spring; "
        "the grandest symphony originates from a single note; "
        "the most intricate tapestry begins with a solitary thread.",
    ),
)

DEFAULT_BOOK_KEYS: tuple[str, ...] = ("book_id", "title", "author", "genre")


class PromptBuilder(ABC):
    """プロンプト文字列を組み立てるクラスの基底クラス"""

    @abstractmethod
    def get_prompt(self) -> str:
        """プロンプトを取得"""
        ...


class SummarizePrompt(PromptBuilder):
    """区切り文字で囲んだテキストを1文に要約させるプロンプト"""

    def __init__(
        self,
        text: str,
        delimiter: Delimiter = Delimiter.TRIPLE_BACKTICKS,
    ) -> None:
        """初期化"""
        self.text = text
        self.delimiter = delimiter

    def get_prompt(self) -> str:
        """プロンプトを取得"""
        return (
            f"Summarize the text delimited by {self.delimiter.description} "
            "into a single sentence.\n"
            f"{fence(self.text, self.delimiter)}"
        )


class BookTitlesPrompt(PromptBuilder):
    """JSON形式での出力を指示するプロンプト"""

    def __init__(
        self,
        count: int = 3,
        keys: Sequence[str] = DEFAULT_BOOK_KEYS,
    ) -> None:
        """初期化"""
        if count < 1:
            msg = f"count must be at least 1, got {count}"
            raise ValueError(msg)
        if not keys:
            msg = "at least one JSON key is required"
            raise ValueError(msg)
        self.count = count
        self.keys = tuple(keys)

    def get_prompt(self) -> str:
        """プロンプトを取得"""
        return (
            f"Generate a list of {self.count} made-up book titles along with "
            "their authors and genres.\n"
            "Provide them in JSON format with the following keys: "
            f"{', '.join(self.keys)}."
        )


class InstructionStepsPrompt(PromptBuilder):
    """条件を満たすかどうかをモデルに確認させるプロンプト

    テキストに手順が含まれていれば Step 形式に書き直させ、
    含まれていなければ決まった文言を返させる。
    """

    NO_STEPS = "No steps provided."

    def __init__(self, text: str) -> None:
        """初期化"""
        self.text = text

    def get_prompt(self) -> str:
        """プロンプトを取得"""
        delimiter = Delimiter.TRIPLE_QUOTES
        return (
            f"You will be provided with text delimited by {delimiter.description}.\n"
            "If it contains a sequence of instructions, "
            "re-write those instructions in the following format:\n"
            "\n"
            "Step 1 - ...\n"
            "Step 2 - ...\n"
            "...\n"
            "Step N - ...\n"
            "\n"
            "If the text does not contain a sequence of instructions, "
            f'then simply write "{self.NO_STEPS}"\n'
            "\n"
            f"{fence(self.text, delimiter)}"
        )


class ConsistentStylePrompt(PromptBuilder):
    """例を示して回答のスタイルを揃えさせるプロンプト (few-shot)"""

    def __init__(
        self,
        query: str,
        examples: Sequence[tuple[str, str]] = DEFAULT_STYLE_EXAMPLES,
        asker: str = "child",
        responder: str = "grandparent",
    ) -> None:
        """初期化"""
        if not examples:
            msg = "at least one example is required"
            raise ValueError(msg)
        self.query = query
        self.examples = tuple(examples)
        self.asker = asker
        self.responder = responder

    def get_prompt(self) -> str:
        """プロンプトを取得"""
        turns: list[str] = []
        for question, answer in self.examples:
            turns.append(f"<{self.asker}>: {question}")
            turns.append(f"<{self.responder}>: {answer}")
        turns.append(f"<{self.asker}>: {self.query}")

        body = "\n\n".join(turns)
        return f"Your task is to answer in a consistent style.\n\n{body}"


class SequentialActionsPrompt(PromptBuilder):
    """実行手順と出力フォーマットを指定するプロンプト"""

    def __init__(self, text: str, language: str = "French") -> None:
        """初期化"""
        if not language.strip():
            msg = "language is required"
            raise ValueError(msg)
        self.text = text
        self.language = language

    def get_prompt(self) -> str:
        """プロンプトを取得"""
        delimiter = Delimiter.ANGLE_BRACKETS
        summary_key = f"{self.language.lower()}_summary"
        return (
            "Your task is to perform the following actions:\n"
            "1 - Summarize the following text delimited by "
            f"{delimiter.opening}{delimiter.closing} with 1 sentence.\n"
            f"2 - Translate the summary into {self.language}.\n"
            f"3 - List each name in the {self.language} summary.\n"
            "4 - Output a json object that contains the following keys: "
            f"{summary_key}, num_names.\n"
            "\n"
            "Use the following format:\n"
            "Text: <text to summarize>\n"
            "Summary: <summary>\n"
            "Translation: <summary translation>\n"
            "Names: <list of names in summary>\n"
            "Output JSON: <json with summary and num_names>\n"
            "\n"
            f"Text: {fence(self.text, delimiter)}"
        )


class SolutionCheckPrompt(PromptBuilder):
    """結論を出す前にモデル自身に解かせるプロンプト"""

    SOLUTION_PLACEHOLDER = "student's solution here"

    def __init__(self, question: str, student_solution: str) -> None:
        """初期化"""
        self.question = question
        self.student_solution = student_solution

    @staticmethod
    def _block(text: str) -> str:
        return fence(f"\n{text}\n")

    def get_prompt(self) -> str:
        """プロンプトを取得"""
        return (
            "Your task is to determine if the student's solution "
            "is correct or not.\n"
            "To solve the problem do the following:\n"
            "- First, work out your own solution to the problem.\n"
            "- Then compare your solution to the student's solution "
            "and evaluate if the student's solution is correct or not.\n"
            "Don't decide if the student's solution is correct until "
            "you have done the problem yourself.\n"
            "\n"
            "Use the following format:\n"
            f"Question:\n{self._block('question here')}\n"
            f"Student's solution:\n{self._block(self.SOLUTION_PLACEHOLDER)}\n"
            "Actual solution:\n"
            f"{self._block('steps to work out the solution and your solution here')}\n"
            "Is the student's solution the same as actual solution "
            f"just calculated:\n{self._block('yes or no')}\n"
            f"Student grade:\n{self._block('correct or incorrect')}\n"
            "\n"
            f"Question:\n{self._block(self.question)}\n"
            f"Student's solution:\n{self._block(self.student_solution)}\n"
            "Actual solution:"
        )
