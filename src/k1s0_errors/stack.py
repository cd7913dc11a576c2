"""スタックトレース取得"""

from __future__ import annotations

import os
import traceback

from .models import ErrorsConfig

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep

# ライブラリ内部フレームの最大段数
_INTERNAL_DEPTH = 8

_config = ErrorsConfig()


def configure(config: ErrorsConfig) -> None:
    """プロセス全体のスタック取得設定を差し替える。"""
    global _config
    _config = config


def get_config() -> ErrorsConfig:
    """現在のスタック取得設定を返す。"""
    return _config


def _is_internal(frame: traceback.FrameSummary) -> bool:
    return os.path.abspath(frame.filename).startswith(_PACKAGE_DIR)


def capture_stack() -> traceback.StackSummary:
    """呼び出し元のスタックを取得する。

    k1s0_errors 内部のフレームは末尾から取り除く。設定で無効化されている場合は
    空の StackSummary を返す。
    """
    config = _config
    if not config.capture_stack:
        return traceback.StackSummary()
    frames = traceback.extract_stack(limit=config.stack_limit + _INTERNAL_DEPTH)
    end = len(frames)
    while end > 0 and _is_internal(frames[end - 1]):
        end -= 1
    start = max(0, end - config.stack_limit)
    return traceback.StackSummary.from_list(frames[start:end])
