from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from verity.config import DEFAULT_CONFIG, CheckConfig

CHECK_CONFIG: ContextVar[CheckConfig] = ContextVar("check_config", default=DEFAULT_CONFIG)


def current_config() -> CheckConfig:
    return CHECK_CONFIG.get()


@contextmanager
def config_scope(config: CheckConfig) -> Iterator[CheckConfig]:
    token = CHECK_CONFIG.set(config)
    try:
        yield config
    finally:
        CHECK_CONFIG.reset(token)


__all__ = ["CHECK_CONFIG", "config_scope", "current_config"]
