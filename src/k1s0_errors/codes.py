"""エラーコード定義"""

from __future__ import annotations

from typing import NewType

Code = NewType("Code", str)
"""エラー分類コード。文字列が等しければ同じコードとして扱う。"""

UNCODED: Code = Code("Uncoded")


class ErrorCodes:
    """予約済みエラーコード定数。"""

    # より具体的なコードを持たないエラー
    UNCODED: Code = UNCODED
    # コード未選定の呼び出し箇所向けの仮コード
    TODO: Code = Code("TODOError")
