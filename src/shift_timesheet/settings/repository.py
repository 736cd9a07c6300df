from __future__ import annotations

from typing import Optional, Protocol

from .model import Settings


class SettingsRepository(Protocol):
    def get(self, user_id: str) -> Optional[Settings]:
        raise NotImplementedError

    def save(self, user_id: str, settings: Settings) -> None:
        raise NotImplementedError
