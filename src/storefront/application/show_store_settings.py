"""Application service: Show Store Settings use case (query)."""

from __future__ import annotations

from storefront.domain.model.store_settings import StoreSettings
from storefront.domain.repository.store_settings_repository import StoreSettingsRepository


class ShowStoreSettingsHandler:

    def __init__(self, settings_repo: StoreSettingsRepository) -> None:
        self._settings_repo = settings_repo

    def handle(self) -> StoreSettings:
        return self._settings_repo.get()
