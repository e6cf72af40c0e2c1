"""Store settings: the site title and footer content of the storefront.

There is exactly one settings record. Until an administrator edits it,
the defaults below apply.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError

DEFAULT_SITE_TITLE = "豬豬手做"


@dataclass(frozen=True)
class FooterLink:
    name: str
    href: str

    def __post_init__(self) -> None:
        if not self.name.strip() or not self.href.strip():
            raise ValidationError("Footer link needs both a name and an href")


@dataclass
class StoreSettings:
    site_title: str = DEFAULT_SITE_TITLE
    footer_notes: list[str] = field(default_factory=list)
    footer_links: list[FooterLink] = field(default_factory=list)

    def update(
        self,
        site_title: str | None = None,
        footer_notes: list[str] | None = None,
        footer_links: list[FooterLink] | None = None,
    ) -> None:
        """Replace the parts that are given; ``None`` keeps the current value.

        A blank title falls back to the default and blank notes are dropped.
        """
        if site_title is not None:
            self.site_title = site_title.strip() or DEFAULT_SITE_TITLE
        if footer_notes is not None:
            self.footer_notes = [n.strip() for n in footer_notes if n.strip()]
        if footer_links is not None:
            self.footer_links = list(footer_links)
