"""structlog 連携のユニットテスト"""

import structlog
from k1s0_errors import Code, add_error_code, get_logger, new_coded, wrap
from structlog.testing import LogCapture


def test_get_logger_returns_bound_logger() -> None:
    logger = get_logger()
    bound = logger.bind(key="value")
    assert bound is not None


def test_add_error_code_from_error() -> None:
    """error キーの例外からコードを取り出すこと。"""
    err = wrap(new_coded(Code("NotFound"), "missing"), "ctx")
    event = add_error_code(None, "error", {"event": "failed", "error": err})
    assert event["error_code"] == "NotFound"


def test_add_error_code_from_exc_info_tuple() -> None:
    err = new_coded(Code("Conflict"), "conflict")
    event = add_error_code(None, "error", {"exc_info": (type(err), err, None)})
    assert event["error_code"] == "Conflict"


def test_add_error_code_foreign_error() -> None:
    """コードを持たない例外なら空文字列を設定すること。"""
    event = add_error_code(None, "error", {"error": ValueError("x")})
    assert event["error_code"] == ""


def test_add_error_code_without_error() -> None:
    event = add_error_code(None, "info", {"event": "ok"})
    assert "error_code" not in event


def test_add_error_code_in_processor_chain() -> None:
    """structlog のプロセッサとして動作すること。"""
    cap = LogCapture()
    logger = structlog.wrap_logger(None, processors=[add_error_code, cap])
    logger.error("failed", error=new_coded(Code("Timeout"), "slow"))
    assert cap.entries[0]["error_code"] == "Timeout"


def test_add_error_code_from_logger_exception() -> None:
    """logger.exception (exc_info=True) では処理中の例外からコードを取り出すこと。"""
    cap = LogCapture()
    logger = structlog.wrap_logger(None, processors=[add_error_code, cap])
    try:
        raise new_coded(Code("Timeout"), "slow")
    except Exception:
        logger.exception("failed")
    assert cap.entries[0]["exc_info"] is True
    assert cap.entries[0]["error_code"] == "Timeout"


def test_add_error_code_exc_info_true_without_exception() -> None:
    """処理中の例外がなければ error_code を追加しないこと。"""
    event = add_error_code(None, "error", {"event": "failed", "exc_info": True})
    assert "error_code" not in event
