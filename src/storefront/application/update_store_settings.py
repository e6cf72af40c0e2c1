"""Application service: Update Store Settings use case (admin)."""

from __future__ import annotations

import logging

from storefront.domain.model.store_settings import FooterLink, StoreSettings
from storefront.domain.repository.store_settings_repository import StoreSettingsRepository

logger = logging.getLogger(__name__)


class UpdateStoreSettingsHandler:

    def __init__(self, settings_repo: StoreSettingsRepository) -> None:
        self._settings_repo = settings_repo

    def handle(
        self,
        site_title: str | None = None,
        footer_notes: list[str] | None = None,
        footer_links: list[tuple[str, str]] | None = None,
    ) -> StoreSettings:
        """Replace the given parts of the store settings.

        *footer_links* are ``(name, href)`` pairs. Parts left as ``None``
        keep their stored value.
        """
        settings = self._settings_repo.get()
        settings.update(
            site_title=site_title,
            footer_notes=footer_notes,
            footer_links=(
                [FooterLink(name=name.strip(), href=href.strip()) for name, href in footer_links]
                if footer_links is not None
                else None
            ),
        )
        self._settings_repo.save(settings)
        logger.info("Store settings updated (title %r)", settings.site_title)
        return settings
