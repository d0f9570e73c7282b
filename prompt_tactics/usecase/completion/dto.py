"""プロンプトに対する補完を取得するユースケースのDTO"""

from pydantic import BaseModel


class CompletionResponse(BaseModel):
    """プロンプトに対する補完を取得するユースケースのDTO"""

    model: str
    answer: str
