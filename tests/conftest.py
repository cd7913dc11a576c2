"""errors ライブラリのテスト共通設定。"""

import pytest
from k1s0_errors import ErrorsConfig, configure, get_config


@pytest.fixture(autouse=True)
def restore_config():
    original = get_config()
    yield
    configure(original)


@pytest.fixture
def no_stack():
    """スタック取得を無効化する。"""
    configure(ErrorsConfig(capture_stack=False))
