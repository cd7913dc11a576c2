"""エラーのラップとチェーン走査"""

from __future__ import annotations

import traceback
from collections.abc import Iterator
from typing import Any, TypeVar

from .exceptions import PlainError, WithMessageError, WithStackError

E = TypeVar("E", bound=BaseException)


def unwrap(err: BaseException | None) -> BaseException | None:
    """1 段内側のエラーを返す。

    unwrap() を持つエラーはそれに従い、それ以外は __cause__ をたどる。
    """
    if err is None:
        return None
    method = getattr(err, "unwrap", None)
    if callable(method):
        return method()
    return err.__cause__


def walk(err: BaseException | None) -> Iterator[BaseException]:
    """err 自身から根本原因までのチェーンを順に返す。循環は 1 周で打ち切る。"""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = unwrap(err)


def cause(err: BaseException | None) -> BaseException | None:
    """チェーンの最も内側のエラー (根本原因) を返す。"""
    root = None
    for root in walk(err):
        pass
    return root


def as_type(err: BaseException | None, cls: type[E]) -> E | None:
    """チェーン上で最初に cls のインスタンスであるエラーを返す。"""
    if not isinstance(cls, type):
        raise TypeError(f"as_type target must be a class, got {cls!r}")
    for layer in walk(err):
        if isinstance(layer, cls):
            return layer
    return None


def stack_trace(err: BaseException | None) -> traceback.StackSummary | None:
    """チェーン上で最も内側 (発生源に近い) のスタックを返す。"""
    found = None
    for layer in walk(err):
        stack = getattr(layer, "stack", None)
        if isinstance(stack, traceback.StackSummary) and stack:
            found = stack
    return found


def errorf(format: str, *args: Any) -> PlainError:
    """書式化したメッセージでスタック付きのエラーを生成する。"""
    return PlainError(format % args if args else format)


def with_stack(err: BaseException | None) -> WithStackError | None:
    """呼び出し時点のスタックを付加する。表示は err と同じ。"""
    if err is None:
        return None
    return WithStackError(err)


def with_message(err: BaseException | None, message: str) -> WithMessageError | None:
    """メッセージを前置する。スタックは付加しない。"""
    if err is None:
        return None
    return WithMessageError(err, message)


def with_messagef(
    err: BaseException | None, format: str, *args: Any
) -> WithMessageError | None:
    if err is None:
        return None
    return WithMessageError(err, format % args if args else format)


def wrap(err: BaseException | None, message: str) -> WithStackError | None:
    """メッセージを前置し、呼び出し時点のスタックを付加する。

    表示は "message: <err>" になる。err が None の場合は None を返す。
    """
    if err is None:
        return None
    return WithStackError(WithMessageError(err, message))


def wrapf(err: BaseException | None, format: str, *args: Any) -> WithStackError | None:
    if err is None:
        return None
    return WithStackError(WithMessageError(err, format % args if args else format))
