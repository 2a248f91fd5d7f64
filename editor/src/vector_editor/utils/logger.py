"""Global logging and error handling utilities"""
import sys
import logging
import traceback

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('vector_editor')
_error_handler = None


def set_error_handler(handler):
    """Install a callback used to report errors to the user in release mode.

    Args:
        handler: Callable(title, message) supplied by the host UI, or None
    """
    global _error_handler
    _error_handler = handler


def set_debug_mode(enabled: bool):
    """Switch between debug (raise only) and release (report, then raise)"""
    global DEBUG_MODE
    DEBUG_MODE = enabled


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional user report in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message for the report (optional)
        title: Title for the report

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Reports the user message (or exception string) to the error handler
        - Then raises the exception
    """
    if DEBUG_MODE:
        # Dev mode: just raise to see full traceback
        raise e

    tb = traceback.format_exc()
    message = user_message if user_message else str(e)
    _logger.error(f"{title}: {message}\n{tb}")

    if _error_handler:
        _error_handler(title, message)
    else:
        _logger.error(f"ERROR POPUP (no handler): {title} - {message}")

    # Re-raise so the caller can handle it appropriately
    raise e
