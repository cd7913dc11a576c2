"""コード付きエラーの JSON シリアライズ"""

from __future__ import annotations

from typing import IO

from pydantic import ValidationError

from .codes import Code
from .exceptions import CodedError, PlainError
from .logger import get_logger
from .models import CodedErrorPayload
from .wrap import cause

logger = get_logger()


def to_payload(err: BaseException) -> CodedErrorPayload:
    """err を CodedErrorPayload に変換する。

    根本原因が CodedError であればそのコードとメッセージを引き継ぎ、wrapped には
    err 全体の文字列を設定する。CodedError でなければ code は空になる。空の code は
    UNCODED とは異なり、コードが選ばれなかったことを表す。
    """
    if err is None:
        raise TypeError("to_payload requires an exception, got None")
    root = cause(err)
    if isinstance(root, CodedError):
        return CodedErrorPayload(code=root.code, message=root.message, wrapped=str(err))
    return CodedErrorPayload(message=str(root), wrapped=str(err))


def marshal_json(err: BaseException) -> str:
    """err を CodedError 形式の JSON 文字列に変換する。

    エンコードに失敗した場合は例外を送出せず、エラー文字列をそのまま返す。
    """
    payload = to_payload(err)
    try:
        return payload.to_json()
    except ValueError as e:
        logger.warning("marshal_json_fallback", code=payload.code, reason=str(e))
        return payload.render()


def unmarshal_json(reader: IO[bytes] | IO[str]) -> BaseException:
    """reader の内容を CodedError に復元する。

    復元できない場合は、読み込んだ内容をそのままメッセージとする PlainError を返す。
    """
    data = reader.read()
    try:
        payload = CodedErrorPayload.model_validate_json(data)
    except ValidationError as e:
        logger.debug("unmarshal_json_fallback", errors=e.error_count())
        if isinstance(data, bytes):
            data = data.decode("utf-8", errors="replace")
        return PlainError(data)
    return CodedError(Code(payload.code), payload.message, payload.wrapped)
