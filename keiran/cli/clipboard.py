### stdlib imports
import logging

### vendor imports
import pyperclip

### local imports
from .exceptions import ClipboardError


logger = logging.getLogger(__name__)


def copyToClipboard(text: str) -> None:
    """Put `text` on the system clipboard, raising `ClipboardError` on failure."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.debug("Clipboard copy failed: %s", e)
        raise ClipboardError(e) from e
