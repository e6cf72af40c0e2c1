"""Abstract repository for the single StoreSettings record."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.store_settings import StoreSettings


class StoreSettingsRepository(ABC):

    @abstractmethod
    def get(self) -> StoreSettings:
        """Return the stored settings, or the defaults if none were saved."""

    @abstractmethod
    def save(self, settings: StoreSettings) -> None:
        """Persist the settings, replacing the previous record."""
