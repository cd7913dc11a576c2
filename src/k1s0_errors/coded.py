"""コード付きエラーの生成と判定"""

from __future__ import annotations

from .codes import UNCODED, Code
from .exceptions import CodedError, WithStackError
from .wrap import walk


def new(message: str) -> WithStackError:
    """UNCODED のコード付きエラーを生成する。"""
    return WithStackError(CodedError(UNCODED, message))


def new_coded(code: Code, message: str) -> WithStackError:
    """コード付きエラーを生成する。

    同じコードを持つエラーはメッセージの文言に関係なく has_code で判別できる。
    code の内容は検証しない。
    """
    return WithStackError(CodedError(code, message))


def has_code(err: BaseException | None, target: Code) -> bool:
    """ラップチェーン上に target のコードを持つ CodedError があるか判定する。"""
    for layer in walk(err):
        if isinstance(layer, CodedError) and layer.matches(target):
            return True
    return False


def is_coded(err: BaseException | None) -> bool:
    """err 自体が CodedError か判定する。チェーンはたどらず、サブクラスも含めない。"""
    return type(err) is CodedError
