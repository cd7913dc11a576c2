"""errors ライブラリの例外型定義"""

from __future__ import annotations

import traceback
from typing import Any

from .codes import Code
from .stack import capture_stack


class CodedError(Exception):
    """エラーコードを持つエラーの基本型。

    code と message は生成後に変更されない。wrapped はデシリアライズで復元された
    ラップチェーン全体の文字列で、空でなければ表示に優先して使われる。
    """

    def __init__(self, code: Code, message: str, wrapped: str = "") -> None:
        super().__init__(message)
        self._code = code
        self._message = message
        self._wrapped = wrapped

    @property
    def code(self) -> Code:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def wrapped(self) -> str:
        return self._wrapped

    def matches(self, target: Code) -> bool:
        """コードが target と一致するか判定する。message と wrapped は比較しない。"""
        return self._code == target

    def with_wrapped(self, wrapped: str) -> CodedError:
        """wrapped を設定したコピーを返す。"""
        return type(self)(self._code, self._message, wrapped)

    def unwrap(self) -> None:
        # CodedError は常にラップチェーンの末端
        return None

    def __str__(self) -> str:
        return self._wrapped or self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self._code!r}, message={self._message!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._code, self._message, self._wrapped))


class PlainError(Exception):
    """コードを持たない、スタック付きのエラー。"""

    def __init__(self, message: str, stack: traceback.StackSummary | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.stack = stack if stack is not None else capture_stack()

    def unwrap(self) -> None:
        return None

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.message, self.stack))


class WithStackError(Exception):
    """内側のエラーに生成時点のスタックを付加するエンベロープ。"""

    def __init__(
        self,
        err: BaseException,
        stack: traceback.StackSummary | None = None,
    ) -> None:
        super().__init__(str(err))
        self.err = err
        self.stack = stack if stack is not None else capture_stack()

    def unwrap(self) -> BaseException:
        return self.err

    def __str__(self) -> str:
        return str(self.err)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.err!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.err, self.stack))


class WithMessageError(Exception):
    """内側のエラーにメッセージを前置するエンベロープ。"""

    def __init__(self, err: BaseException, message: str) -> None:
        super().__init__(message)
        self.err = err
        self.message = message

    def unwrap(self) -> BaseException:
        return self.err

    def __str__(self) -> str:
        return f"{self.message}: {self.err}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.err!r}, {self.message!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.err, self.message))
