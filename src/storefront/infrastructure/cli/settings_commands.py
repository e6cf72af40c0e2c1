"""CLI commands for the storefront settings (site title and footer)."""

from __future__ import annotations

import click

from storefront.application.show_store_settings import ShowStoreSettingsHandler
from storefront.application.update_store_settings import UpdateStoreSettingsHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.store_settings import StoreSettings
from storefront.infrastructure.bootstrap import Container


def _parse_link(raw: str) -> tuple[str, str]:
    """Parse 'Name=https://example.com' into a (name, href) pair."""
    name, sep, href = raw.partition("=")
    if not sep:
        raise click.BadParameter(f"Invalid link '{raw}'. Expected 'Name=URL'.")
    return name, href


def _print_settings(settings: StoreSettings) -> None:
    click.echo(f"Site title: {settings.site_title}")
    click.echo("Footer notes:")
    for note in settings.footer_notes or ["-"]:
        click.echo(f"  {note}")
    click.echo("Footer links:")
    if not settings.footer_links:
        click.echo("  -")
    for link in settings.footer_links:
        click.echo(f"  {link.name}: {link.href}")


@click.command("show")
@click.pass_obj
def settings_show(container: Container) -> None:
    """Show the site title and footer content."""
    handler = ShowStoreSettingsHandler(settings_repo=container.store_settings_repository)

    try:
        settings = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _print_settings(settings)


@click.command("update")
@click.option("--title", default=None, help="Site title (blank restores the default).")
@click.option("--note", "notes", multiple=True, help="Footer note; repeat to set several.")
@click.option("--link", "links", multiple=True, help="Footer link as 'Name=URL'; repeatable.")
@click.option("--clear-notes", is_flag=True, help="Remove all footer notes.")
@click.option("--clear-links", is_flag=True, help="Remove all footer links.")
@click.pass_obj
def settings_update(
    container: Container,
    title: str | None,
    notes: tuple[str, ...],
    links: tuple[str, ...],
    clear_notes: bool,
    clear_links: bool,
) -> None:
    """Change the site title, footer notes or footer links."""
    footer_notes = [] if clear_notes else (list(notes) if notes else None)
    footer_links = [] if clear_links else ([_parse_link(raw) for raw in links] if links else None)

    handler = UpdateStoreSettingsHandler(settings_repo=container.store_settings_repository)

    try:
        settings = handler.handle(
            site_title=title, footer_notes=footer_notes, footer_links=footer_links
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _print_settings(settings)
