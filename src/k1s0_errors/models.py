"""設定とシリアライズ形式の定義"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, StrictStr


@dataclass(frozen=True)
class ErrorsConfig:
    """スタックトレース取得設定。"""

    capture_stack: bool = True
    stack_limit: int = 32

    def __post_init__(self) -> None:
        if self.stack_limit < 1:
            raise ValueError(f"stack_limit must be >= 1, got {self.stack_limit}")


class CodedErrorPayload(BaseModel):
    """CodedError の JSON 表現。

    wrapped はシリアライズ時点のラップチェーン全体の文字列で、空のときは出力しない。
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    code: StrictStr = ""
    message: StrictStr = ""
    wrapped: StrictStr = ""

    def render(self) -> str:
        """エラー文字列としての表現を返す。"""
        return self.wrapped or self.message

    def to_json(self) -> str:
        exclude = None if self.wrapped else {"wrapped"}
        return self.model_dump_json(exclude=exclude)
