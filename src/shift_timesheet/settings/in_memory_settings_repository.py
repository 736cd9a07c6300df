from __future__ import annotations

from typing import Optional

from .model import Settings
from .repository import SettingsRepository


class InMemorySettingsRepository(SettingsRepository):
    def __init__(self):
        self._by_user: dict[str, Settings] = {}

    def get(self, user_id: str) -> Optional[Settings]:
        return self._by_user.get(user_id)

    def save(self, user_id: str, settings: Settings) -> None:
        self._by_user[user_id] = settings
