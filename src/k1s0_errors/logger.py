"""structlog 連携"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from .exceptions import CodedError
from .wrap import walk

_ERROR_KEYS = ("error", "exc_info")


def get_logger() -> structlog.stdlib.BoundLogger:
    """ライブラリ名を束縛した structlog ロガーを返す。

    出力は標準 logging の "k1s0_errors" ロガーを経由するため、レベルと出力先は
    アプリケーション側の logging 設定に従う。
    """
    return structlog.wrap_logger(
        logging.getLogger("k1s0_errors"),
        wrapper_class=structlog.stdlib.BoundLogger,
        library="k1s0_errors",
    )


def add_error_code(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """イベントに含まれる例外のエラーコードを error_code として追加するプロセッサ。

    exc_info=True (logger.exception など) の場合は処理中の例外を参照する。
    コードが見つからない例外の場合は空文字列を設定する。
    """
    for key in _ERROR_KEYS:
        value = event_dict.get(key)
        if value is True:
            value = sys.exc_info()
        if isinstance(value, tuple) and len(value) == 3:
            value = value[1]
        if isinstance(value, BaseException):
            event_dict.setdefault("error_code", _first_code(value))
            break
    return event_dict


def _first_code(err: BaseException) -> str:
    for layer in walk(err):
        if isinstance(layer, CodedError):
            return layer.code
    return ""
