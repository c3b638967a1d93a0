"""
Clipboard helpers with automatic clearing.
"""

import logging
import threading
import time

import pyperclip

logger = logging.getLogger(__name__)

CLEAR_AFTER_SECONDS = 60


def _clear_later(delay: float) -> None:
    time.sleep(delay)
    try:
        pyperclip.copy("")
    except pyperclip.PyperclipException as e:
        # Nobody is waiting on the result any more
        logger.debug(f"Could not clear clipboard: {e}")


def copy_to_clipboard(value: str, clear_after: float = CLEAR_AFTER_SECONDS) -> bool:
    """
    Copy a value to the system clipboard.

    Args:
        value: Text to copy
        clear_after: Seconds before the clipboard is wiped (0 disables)

    Returns:
        True if the value was copied, False otherwise
    """
    try:
        pyperclip.copy(value)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Clipboard unavailable: {e}")
        return False

    if clear_after > 0:
        clear_thread = threading.Thread(target=_clear_later, args=(clear_after,), daemon=True)
        clear_thread.start()

    return True
