# src/remixconnect/engine/platform.py
# Narrow view of the host platform SDK: persist a state blob, report a score.
# Either capability may be missing; a missing one is a no-op.

from __future__ import annotations

import logging as log
from typing import Any, Optional


class PlatformBridge:
    SAVE_METHOD = "save_game_state"
    GAME_OVER_METHOD = "game_over"

    def __init__(self, sdk: Optional[Any] = None) -> None:
        self.sdk = sdk

    def _method(self, name: str):
        fn = getattr(self.sdk, name, None) if self.sdk is not None else None
        return fn if callable(fn) else None

    @property
    def can_persist(self) -> bool:
        return self._method(self.SAVE_METHOD) is not None

    @property
    def can_report_score(self) -> bool:
        return self._method(self.GAME_OVER_METHOD) is not None

    def persist(self, blob: dict) -> bool:
        fn = self._method(self.SAVE_METHOD)
        if fn is None:
            log.debug("platform: no %s, state not persisted", self.SAVE_METHOD)
            return False
        fn({"gameState": dict(blob)})
        return True

    def report_score(self, score: int) -> bool:
        fn = self._method(self.GAME_OVER_METHOD)
        if fn is None:
            log.debug("platform: no %s, score %d not reported", self.GAME_OVER_METHOD, score)
            return False
        fn({"score": int(score)})
        return True
