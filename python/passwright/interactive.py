"""
Interactive generator screen.

A small prompt_toolkit interface with a length slider, class toggles and a
strength meter. Pool size and entropy are recomputed from the current options
every time the screen is drawn.
"""

import logging
import time
from typing import Callable, Optional

from prompt_toolkit import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from .engine.generator import GenerationConfig, generate
from .engine.strength import StrengthReport, describe_strength
from .exceptions import PasswrightException
from .theme import ThemeState, ThemeStore, toggle_theme
from .utils.clipboard import copy_to_clipboard
from .utils.random_source import RandomSource

logger = logging.getLogger(__name__)

SLIDER_MIN = 8
SLIDER_MAX = 64
METER_WIDTH = 32
FLASH_SECONDS = 1.2
REFRESH_INTERVAL = 0.5

TOGGLES = [
    ("lower", "l", "Lowercase"),
    ("upper", "u", "Uppercase"),
    ("digits", "d", "Digits"),
    ("symbols", "s", "Symbols"),
    ("avoid_ambiguous", "a", "Avoid ambiguous"),
]

STYLES = {
    "dark": Style.from_dict({
        "title": "bold #ffffff",
        "password": "bold #7ee787",
        "label": "#c9d1d9",
        "on": "#7ee787",
        "off": "#6e7681",
        "meter": "#3fb950",
        "meter-empty": "#30363d",
        "message": "italic #d2a8ff",
        "instructions": "#8b949e",
    }),
    "light": Style.from_dict({
        "title": "bold #000000",
        "password": "bold #1a7f37",
        "label": "#24292f",
        "on": "#1a7f37",
        "off": "#8c959f",
        "meter": "#2da44e",
        "meter-empty": "#d0d7de",
        "message": "italic #8250df",
        "instructions": "#57606a",
    }),
}


class GeneratorState:
    """Options and output shown by the interactive screen."""

    def __init__(self, length: int = 16, lower: bool = True, upper: bool = True,
                 digits: bool = True, symbols: bool = False, avoid_ambiguous: bool = True,
                 clock: Callable[[], float] = time.monotonic):
        self.length = max(SLIDER_MIN, min(length, SLIDER_MAX))
        self.lower = lower
        self.upper = upper
        self.digits = digits
        self.symbols = symbols
        self.avoid_ambiguous = avoid_ambiguous
        self.password = ""
        self.message = ""
        self._clock = clock
        self._message_until = 0.0

    @property
    def config(self) -> GenerationConfig:
        return GenerationConfig.from_flags(
            length=self.length,
            lower=self.lower,
            upper=self.upper,
            digits=self.digits,
            symbols=self.symbols,
            avoid_ambiguous=self.avoid_ambiguous,
        )

    def flash(self, text: str) -> None:
        """Show a short status message for FLASH_SECONDS."""
        self.message = text
        self._message_until = self._clock() + FLASH_SECONDS

    @property
    def visible_message(self) -> str:
        if self.message and self._clock() < self._message_until:
            return self.message
        return ""

    @property
    def strength(self) -> StrengthReport:
        return describe_strength(self.config)

    def adjust_length(self, delta: int) -> None:
        self.length = max(SLIDER_MIN, min(self.length + delta, SLIDER_MAX))

    def toggle(self, option: str) -> None:
        """Flip one of the boolean options by attribute name."""
        if option not in {name for name, _, _ in TOGGLES}:
            raise ValueError(f"Unknown option: {option}")
        setattr(self, option, not getattr(self, option))

    def regenerate(self, random_source: Optional[RandomSource] = None) -> bool:
        """
        Generate a new password for the current options.

        Returns:
            True on success; on failure the error is shown as the message
        """
        try:
            self.password = generate(self.config, random_source)
        except PasswrightException as e:
            self.flash(str(e))
            return False
        self.flash("Generated")
        return True

    def copy(self) -> bool:
        if not self.password:
            return False
        if copy_to_clipboard(self.password):
            self.flash("Copied")
            return True
        self.flash("Clipboard unavailable")
        return False


class GeneratorApp:
    """Full-screen-less prompt_toolkit generator interface."""

    def __init__(self, state: GeneratorState, theme: ThemeState, theme_store: ThemeStore,
                 input=None, output=None):
        """
        Initialize the generator screen.

        Args:
            state: Options and output to display
            theme: Theme resolved at startup
            theme_store: Where theme toggles are persisted
            input: prompt_toolkit input (terminal by default)
            output: prompt_toolkit output (terminal by default)
        """
        self.state = state
        self.theme = theme
        self.theme_store = theme_store

        self.bindings = self._create_key_bindings()
        self.layout = self._create_layout()

        self.app = Application(
            layout=self.layout,
            key_bindings=self.bindings,
            style=STYLES[self.theme.name],
            full_screen=False,
            mouse_support=False,
            refresh_interval=REFRESH_INTERVAL,
            input=input,
            output=output
        )

    def _create_key_bindings(self) -> KeyBindings:
        """Create key bindings for the interface."""
        bindings = KeyBindings()

        @bindings.add('c-c')
        @bindings.add('escape')
        @bindings.add('q')
        def _(event):
            """Quit."""
            event.app.exit()

        @bindings.add('enter')
        @bindings.add('g')
        def _(event):
            """Generate a new password."""
            self.state.regenerate()

        @bindings.add('c')
        def _(event):
            """Copy the current password."""
            self.state.copy()

        @bindings.add('left')
        def _(event):
            self.state.adjust_length(-1)

        @bindings.add('right')
        def _(event):
            self.state.adjust_length(1)

        @bindings.add('t')
        def _(event):
            """Toggle light/dark theme."""
            new_theme = toggle_theme(self.theme, self.theme_store)
            if new_theme == self.theme:
                self.state.flash("Could not save theme preference")
                return
            self.theme = new_theme
            event.app.style = STYLES[self.theme.name]

        for option, key, _label in TOGGLES:
            bindings.add(key)(self._make_toggle_handler(option))

        return bindings

    def _make_toggle_handler(self, option: str):
        def handler(event):
            self.state.toggle(option)
        return handler

    def _create_layout(self) -> Layout:
        """Create the application layout."""
        body_control = FormattedTextControl(text=self._get_body_text, focusable=True, show_cursor=False)
        body_window = Window(content=body_control, wrap_lines=False)

        root_container = HSplit([
            Window(
                content=FormattedTextControl(text="Secure Password Generator"),
                height=1,
                style="class:title"
            ),
            body_window,
            Window(
                content=FormattedTextControl(text=self._get_status_text),
                height=1,
            ),
        ])

        return Layout(root_container, focused_element=body_window)

    def _get_body_text(self) -> FormattedText:
        state = self.state
        report = state.strength

        lines = [
            ("class:password", f"{state.password or '(press Enter to generate)'}\n\n"),
            ("class:label", f"Length: {state.length}  [{SLIDER_MIN}..{SLIDER_MAX}]\n"),
        ]

        for option, key, label in TOGGLES:
            enabled = getattr(state, option)
            mark = "[x]" if enabled else "[ ]"
            lines.append(("class:on" if enabled else "class:off", f"  {mark} {label} ({key})\n"))

        filled = round(report.fraction * METER_WIDTH)
        lines.append(("class:meter", "█" * filled))
        lines.append(("class:meter-empty", "░" * (METER_WIDTH - filled)))
        suffix = " - enable at least one set" if report.pool_size == 0 else ""
        lines.append(("class:label", f"  {report.bits} bits ({report.label}){suffix}\n"))
        lines.append(("class:message", f"{state.visible_message}\n"))

        return FormattedText(lines)

    def _get_status_text(self) -> FormattedText:
        return FormattedText([
            ("class:instructions",
             "Enter: generate • c: copy • ←/→: length • l/u/d/s/a: toggle • t: theme • q: quit")
        ])

    def run(self) -> None:
        """Run the generator interface."""
        self.app.run()


def interactive_generator(state: GeneratorState, theme: ThemeState, theme_store: ThemeStore) -> GeneratorState:
    """
    Show the interactive generator until the user quits.

    Returns:
        The final state, including the last generated password
    """
    app = GeneratorApp(state, theme, theme_store)
    app.run()
    return state
