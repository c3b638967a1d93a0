"""
CLI interface for Passwright.
"""

import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Tuple

import click

from .engine.charsets import CharacterClass
from .engine.generator import GenerationConfig, PasswordGenerator
from .engine.strength import describe_strength
from .exceptions import PasswrightException
from .interactive import GeneratorState, interactive_generator
from .theme import ThemeState, ThemeStore, init_theme, reset_theme, toggle_theme
from .utils.clipboard import CLEAR_AFTER_SECONDS, copy_to_clipboard
from .utils.validation import MAX_LENGTH, MIN_LENGTH

CLASS_NAMES = ["lower", "upper", "digits", "symbols"]


class AppContext:
    """Context object for sharing settings across commands."""

    def __init__(self, settings_file: Optional[str] = None):
        self.theme_store = ThemeStore(Path(settings_file) if settings_file else None)
        self._theme: Optional[ThemeState] = None

    @property
    def theme(self) -> ThemeState:
        """Theme resolved once, on first use."""
        if self._theme is None:
            self._theme = init_theme(self.theme_store)
        return self._theme

    @theme.setter
    def theme(self, state: ThemeState) -> None:
        self._theme = state


def generation_options(func: Callable) -> Callable:
    """Attach the length and character set options shared by commands."""
    options = [
        click.option("--length", "-n", default=16, type=click.IntRange(MIN_LENGTH, MAX_LENGTH),
                     help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH}, default: 16)"),
        click.option("--no-lowercase", is_flag=True, help="Exclude lowercase letters"),
        click.option("--no-uppercase", is_flag=True, help="Exclude uppercase letters"),
        click.option("--no-digits", is_flag=True, help="Exclude digits"),
        click.option("--symbols", is_flag=True, help="Include symbol characters"),
        click.option("--allow-ambiguous", is_flag=True,
                     help="Allow ambiguous characters (O 0 o I l 1 | { } [ ] ( ) < >)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_config(length: int, no_lowercase: bool, no_uppercase: bool, no_digits: bool,
                 symbols: bool, allow_ambiguous: bool, require: Tuple[str, ...] = ()) -> GenerationConfig:
    """Translate command line flags into a generation config."""
    required = [CharacterClass.parse(name) for name in require] if require else None
    return GenerationConfig.from_flags(
        length=length,
        lower=not no_lowercase,
        upper=not no_uppercase,
        digits=not no_digits,
        symbols=symbols,
        avoid_ambiguous=not allow_ambiguous,
        required=required,
    )


@click.group()
@click.option(
    "--settings-file",
    default=None,
    help="Path to settings file (default: per-user application directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, settings_file: Optional[str], verbose: bool) -> None:
    """Passwright - Secure random password generator."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj = AppContext(settings_file)


@cli.command()
@generation_options
@click.option("--require", "-r", multiple=True, type=click.Choice(CLASS_NAMES),
              help="Guarantee a character from this set (repeatable; default: all enabled)")
@click.option("--count", default=1, type=click.IntRange(1, 100), help="Number of passwords (1-100)")
@click.option("--copy", "-c", is_flag=True, help="Copy the (last) password to clipboard")
@click.option("--show-strength", is_flag=True, help="Show pool size and estimated entropy")
def generate(length: int, no_lowercase: bool, no_uppercase: bool, no_digits: bool,
             symbols: bool, allow_ambiguous: bool, require: Tuple[str, ...],
             count: int, copy: bool, show_strength: bool) -> None:
    """Generate one or more secure passwords."""
    config = build_config(length, no_lowercase, no_uppercase, no_digits,
                          symbols, allow_ambiguous, require)

    try:
        generator = PasswordGenerator(config)
        passwords = [generator.generate() for _ in range(count)]
    except PasswrightException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for password in passwords:
        click.echo(password)

    if show_strength:
        click.echo(
            f"🔐 {length} characters from {generator.get_charset_info()}: "
            f"pool {generator.pool_size}, ~{generator.entropy_bits()} bits",
            err=True
        )

    if copy:
        if copy_to_clipboard(passwords[-1]):
            click.echo(f"✅ Copied to clipboard (clears in {CLEAR_AFTER_SECONDS}s).", err=True)
        else:
            click.echo("❌ Could not copy to clipboard.", err=True)


@cli.command()
@generation_options
def strength(length: int, no_lowercase: bool, no_uppercase: bool, no_digits: bool,
             symbols: bool, allow_ambiguous: bool) -> None:
    """Show pool size and estimated strength for the given options."""
    config = build_config(length, no_lowercase, no_uppercase, no_digits,
                          symbols, allow_ambiguous)
    report = describe_strength(config)

    click.echo("Strength estimate:")
    click.echo(f"  Length: {length}")
    click.echo(f"  Pool size: {report.pool_size}")
    click.echo(f"  Entropy: {report.bits} bits ({report.label})")
    if report.pool_size == 0:
        click.echo("  Enable at least one character set")


@cli.command()
@click.option("--length", "-n", default=16, type=click.IntRange(8, 64), help="Initial length (8-64)")
@click.option("--symbols", is_flag=True, help="Start with symbols enabled")
@click.pass_obj
def interactive(app_ctx: AppContext, length: int, symbols: bool) -> None:
    """Open the interactive generator."""
    state = GeneratorState(length=length, symbols=symbols)
    interactive_generator(state, app_ctx.theme, app_ctx.theme_store)


@cli.command()
@click.argument("action", type=click.Choice(["status", "toggle", "reset"]))
@click.pass_obj
def theme(app_ctx: AppContext, action: str) -> None:
    """Manage the light/dark theme preference."""
    if action == "status":
        state = app_ctx.theme
        click.echo(f"Theme: {state.name} ({state.source})")
        click.echo(f"   Settings file: {app_ctx.theme_store.path}")

    elif action == "toggle":
        new_theme = toggle_theme(app_ctx.theme, app_ctx.theme_store)
        if new_theme == app_ctx.theme:
            click.echo("❌ Could not save theme preference", err=True)
            sys.exit(1)
        app_ctx.theme = new_theme
        click.echo(f"✅ Theme set to {app_ctx.theme.name}")

    elif action == "reset":
        app_ctx.theme = reset_theme(app_ctx.theme_store)
        click.echo(f"✅ Theme preference cleared, using {app_ctx.theme.name} from system")


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
