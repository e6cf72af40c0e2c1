"""SQLAlchemy implementation of StoreSettingsRepository.

Notes and links are stored as JSON arrays; links as ``{"name", "href"}``
objects.
"""

from __future__ import annotations

from storefront.domain.model.store_settings import FooterLink, StoreSettings
from storefront.domain.repository.store_settings_repository import StoreSettingsRepository
from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.tables import StoreSettingsRow

_SETTINGS_ID = 1


class SqlStoreSettingsRepository(StoreSettingsRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    def get(self) -> StoreSettings:
        with self._db.session() as session:
            row = session.get(StoreSettingsRow, _SETTINGS_ID)
            if row is None:
                return StoreSettings()
            return StoreSettings(
                site_title=row.site_title,
                footer_notes=list(row.footer_notes or []),
                footer_links=[
                    FooterLink(name=link["name"], href=link["href"])
                    for link in row.footer_links or []
                ],
            )

    def save(self, settings: StoreSettings) -> None:
        with self._db.session() as session:
            session.merge(
                StoreSettingsRow(
                    id=_SETTINGS_ID,
                    site_title=settings.site_title,
                    footer_notes=list(settings.footer_notes),
                    footer_links=[
                        {"name": link.name, "href": link.href}
                        for link in settings.footer_links
                    ],
                )
            )
