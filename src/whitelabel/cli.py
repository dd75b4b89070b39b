"""CLI interface for the white label generator."""

from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.color import Color, ColorParseError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .brands import BrandConfig, BrandStore, load_session, save_session
from .config.logging import get_logger, setup_logging
from .config.settings import Settings, get_settings
from .constants import ASSET_KEYS, DEFAULT_CONFIG_FILE
from .exceptions import BrandNotFoundError, ConfigurationError, WhiteLabelError
from .export import (
    GITHUB_ACTIONS_WORKFLOW,
    LOCAL_BUILD_INSTRUCTIONS,
    export_all,
    export_build_script,
    export_one,
)
from .installer import install_brand
from .runtime import feature_label, initial

app = typer.Typer(
    name="whitelabel",
    help="Create and manage branded app configurations from a single codebase.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

SESSION_OPTION = typer.Option(
    None,
    "--session",
    "-s",
    help="Session file holding the brand list (default from WHITELABEL_SESSION_FILE)",
)


def _fail(message: object, prefix: str = "Error: ") -> NoReturn:
    err_console.print(Text.assemble((prefix, "red"), str(message)))
    raise typer.Exit(1)


def _settings() -> Settings:
    try:
        return get_settings()
    except ConfigurationError as e:
        logger.error("Configuration validation error: %s", e)
        _fail(e)


def _session_path(session: Optional[Path]) -> Path:
    return session if session is not None else _settings().session_file


def _open(session: Optional[Path]) -> tuple[BrandStore, Path]:
    path = _session_path(session)
    try:
        return load_session(path), path
    except WhiteLabelError as e:
        _fail(e)


def _save(store: BrandStore, path: Path) -> None:
    try:
        save_session(store, path)
    except WhiteLabelError as e:
        _fail(e)


def _swatch(color: str) -> Text:
    try:
        Color.parse(color)
    except ColorParseError:
        return Text(color, style="dim")
    return Text.assemble(("██ ", color), (color, "dim"))


def _require_current(store: BrandStore) -> BrandConfig:
    current = store.current
    if current is None:
        _fail("No brand selected. Run whitelabel add or whitelabel select.")
    return current


# =============================================================================
# Installer
# =============================================================================


@app.command()
def install(
    config_file: Optional[Path] = typer.Argument(
        None, help=f"Exported configuration document (default: {DEFAULT_CONFIG_FILE})"
    ),
    brand_id: Optional[str] = typer.Argument(None, help="Brand to install"),
    root: Path = typer.Option(Path("."), "--root", "-r", help="Mobile project root"),
) -> None:
    """Install one brand's configuration into a mobile project.

    Writes .env, the Android strings.xml (if the resource directory exists)
    and the package.json name (if the file exists).

    Examples:
        whitelabel install white-label-configs.json 3f2a9c
    """
    if not brand_id:
        err_console.print("Usage: whitelabel install <config-file> <brand-id>", highlight=False)
        raise typer.Exit(1)
    settings = _settings()
    path = config_file or Path(DEFAULT_CONFIG_FILE)
    try:
        result = install_brand(
            path,
            brand_id,
            root,
            env_file=settings.env_file_path,
            strings_xml=settings.strings_xml_path,
            manifest=settings.manifest_path,
        )
    except BrandNotFoundError as e:
        _fail(e)
    except WhiteLabelError as e:
        logger.error("Install failed: %s", e)
        _fail(e, prefix="Error setting up brand: ")

    console.print(f"Setting up brand: [bold]{escape(result.display_name)}[/bold]")
    console.print("[green]✓[/green] Environment variables configured")
    if result.strings_path:
        console.print("[green]✓[/green] Android strings updated")
    if result.manifest_path:
        console.print("[green]✓[/green] Package manifest updated")
    console.print(
        Panel(
            f"[bold]Package:[/bold] {escape(result.package)}\n"
            f"[bold]Version:[/bold] {escape(result.version)} ({result.version_code})",
            title=f"Brand setup complete for: {escape(result.display_name)}",
            border_style="green",
        )
    )


# =============================================================================
# Brand editing
# =============================================================================


@app.command()
def add(session: Optional[Path] = SESSION_OPTION) -> None:
    """Add a brand with default values and select it."""
    store, path = _open(session)
    brand = store.add_brand()
    _save(store, path)
    console.print(f"[green]Added[/green] {escape(brand.display_name)} [dim]({brand.id})[/dim]")


@app.command(name="list")
def list_brands(session: Optional[Path] = SESSION_OPTION) -> None:
    """List configured brands."""
    store, _ = _open(session)
    if not len(store):
        console.print("[yellow]No brands configured.[/yellow] Run [bold]whitelabel add[/bold].")
        return
    current = store.current
    table = Table(title="Brand Configurations", show_header=True, header_style="bold")
    table.add_column("", width=1)
    table.add_column("ID", style="dim")
    table.add_column("Display Name", style="cyan")
    table.add_column("Package")
    table.add_column("Primary")
    table.add_column("Version")
    for b in store.brands:
        marker = "*" if current and b.id == current.id else ""
        table.add_row(
            marker,
            b.id,
            Text(b.display_name),
            Text(b.package_name),
            _swatch(b.colors.primary),
            Text(f"v{b.version}"),
        )
    console.print(table)


@app.command()
def select(
    brand_id: str = typer.Argument(..., help="Brand id to edit"),
    session: Optional[Path] = SESSION_OPTION,
) -> None:
    """Select the brand to edit."""
    store, path = _open(session)
    brand = store.select_brand(brand_id)
    if brand is None:
        _fail(f"Brand '{brand_id}' not found")
    _save(store, path)
    console.print(f"Selected {escape(brand.display_name)} [dim]({brand.id})[/dim]")


@app.command(name="set")
def set_field(
    field_path: str = typer.Argument(..., help="Field path, e.g. displayName or colors.primary"),
    value: str = typer.Argument(..., help="New value ('true'/'false' for features)"),
    session: Optional[Path] = SESSION_OPTION,
) -> None:
    """Update a field of the selected brand."""
    store, path = _open(session)
    _require_current(store)
    try:
        store.update_field(field_path, value, from_text=True)
    except WhiteLabelError as e:
        _fail(e)
    _save(store, path)
    console.print(f"[green]Updated[/green] {escape(field_path)} = {escape(value)}", highlight=False)


@app.command(name="upload-asset")
def upload_asset(
    asset: str = typer.Argument(..., help=f"One of: {', '.join(ASSET_KEYS)}"),
    image: Path = typer.Argument(..., help="Image file to embed"),
    session: Optional[Path] = SESSION_OPTION,
) -> None:
    """Embed an image (icon, splash or logo) into the selected brand."""
    if asset not in ASSET_KEYS:
        _fail(f"Unknown asset '{asset}'. Expected one of: {', '.join(ASSET_KEYS)}")
    store, path = _open(session)
    _require_current(store)
    try:
        store.set_asset_from_file(asset, image)  # type: ignore[arg-type]
    except WhiteLabelError as e:
        _fail(e)
    _save(store, path)
    console.print(f"[green]Updated[/green] {asset} from {escape(str(image))}")


@app.command()
def delete(
    brand_id: str = typer.Argument(..., help="Brand id to delete"),
    session: Optional[Path] = SESSION_OPTION,
) -> None:
    """Delete a brand."""
    store, path = _open(session)
    if store.get(brand_id) is None:
        _fail(f"Brand '{brand_id}' not found")
    store.delete_brand(brand_id)
    _save(store, path)
    console.print(f"[yellow]Deleted[/yellow] {escape(brand_id)}")


@app.command()
def show(session: Optional[Path] = SESSION_OPTION) -> None:
    """Show the selected brand with a preview of its theme."""
    store, _ = _open(session)
    brand = _require_current(store)

    details = Table(show_header=False, box=None, padding=(0, 2))
    details.add_column("Field", style="cyan")
    details.add_column("Value")
    details.add_row("ID", Text(brand.id))
    details.add_row("App Name", Text(brand.app_name))
    details.add_row("Display Name", Text(brand.display_name))
    details.add_row("Package Name", Text(brand.package_name))
    details.add_row("Bundle ID", Text(brand.bundle_id))
    details.add_row("Version", Text(f"{brand.version} ({brand.version_code})"))
    details.add_row("API Base URL", Text(brand.api_base_url) if brand.api_base_url else "[dim]not set[/dim]")
    for key, color in brand.colors.to_json_dict().items():
        details.add_row(f"colors.{key}", _swatch(color))
    for key, enabled in brand.features.to_json_dict().items():
        details.add_row(feature_label(key), "[green]on[/green]" if enabled else "[red]off[/red]")
    for key, data in brand.assets.to_json_dict().items():
        details.add_row(f"assets.{key}", f"{len(data)} chars" if data else "[dim]none[/dim]")
    console.print(Panel(details, title=f"Brand: {escape(brand.display_name)}", border_style="blue"))

    letter = initial(brand.display_name) or "?"
    preview = Text.assemble(
        (f" {letter} ", "bold white on " + _safe_color(brand.colors.primary)),
        "  ",
        (brand.display_name, "bold " + _safe_color(brand.colors.text)),
        "\nWelcome to your app",
    )
    console.print(Panel(preview, title="Preview", border_style="magenta"))


def _safe_color(color: str) -> str:
    try:
        Color.parse(color)
    except ColorParseError:
        return "default"
    return color


# =============================================================================
# Export
# =============================================================================


@app.command()
def export(
    brand_ids: Optional[List[str]] = typer.Argument(
        None, help="Brands to export individually (default: the selected brand)"
    ),
    all_brands: bool = typer.Option(
        False, "--all", "-a", help="Export every brand into one combined file"
    ),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output directory"),
    session: Optional[Path] = SESSION_OPTION,
) -> None:
    """Export build configuration JSON files."""
    store, _ = _open(session)
    out_dir = out if out is not None else _settings().output_dir
    if all_brands:
        if not len(store):
            _fail("No brands configured")
        artifacts = [export_all(store.brands)]
    elif brand_ids:
        artifacts = []
        for brand_id in brand_ids:
            brand = store.get(brand_id)
            if brand is None:
                _fail(f"Brand '{brand_id}' not found")
            artifacts.append(export_one(brand))
    else:
        artifacts = [export_one(_require_current(store))]
    try:
        for artifact in artifacts:
            target = artifact.write_to(out_dir)
            console.print(f"[green]Exported[/green] {escape(str(target))}")
    except WhiteLabelError as e:
        _fail(e)


@app.command(name="build-script")
def build_script(
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output directory"),
    session: Optional[Path] = SESSION_OPTION,
) -> None:
    """Generate the APK build shell script."""
    store, _ = _open(session)
    out_dir = out if out is not None else _settings().output_dir
    try:
        target = export_build_script(store.brands).write_to(out_dir)
    except WhiteLabelError as e:
        _fail(e)
    console.print(f"[green]Generated[/green] {escape(str(target))}")


@app.command()
def instructions() -> None:
    """Show local and CI build instructions."""
    console.print(Panel(Text(LOCAL_BUILD_INSTRUCTIONS), title="Local Build", border_style="cyan"))
    console.print(Panel(Text(GITHUB_ACTIONS_WORKFLOW), title="GitHub Actions", border_style="cyan"))


@app.command()
def status() -> None:
    """Show configuration status."""
    settings = _settings()
    table = Table(title="Current Settings", show_header=True, header_style="bold")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for name, value in settings.describe().items():
        table.add_row(name, value)
    console.print(table)

    session_file = settings.session_file
    if session_file.exists():
        console.print(f"\n[green]✓[/green] Session file found: {session_file}")
    else:
        console.print(f"\n[yellow]![/yellow] No session file yet: {session_file}")


def main() -> None:
    """Entry point for the CLI."""
    try:
        log_level = get_settings().log_level
    except ConfigurationError:
        # Use default log level if settings fail to load
        log_level = "WARNING"

    setup_logging(level=log_level)
    app()


if __name__ == "__main__":
    main()
