"""
Logging for clrsKit.

- `configure_logging` routes the standard `logging` tree through Rich and,
  optionally, a plain log file.
- `TuiLoggerAdapter` offers a `logging.Logger`-compatible API whose messages
  go straight to the TUI print functions, for CLI code that talks to the user.
"""

# --- Imports ---
import logging
import traceback
from typing import Any, Callable, Dict, Optional, Tuple, Union

from rich.logging import RichHandler

from . import tui

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_level(level: Union[int, str]) -> Optional[int]:
    if isinstance(level, int):
        return level
    lvl = logging.getLevelName(str(level).upper())
    return lvl if isinstance(lvl, int) else None


def configure_logging(level: Union[int, str] = "INFO", log_path: Optional[str] = None) -> None:
    """
    Configure the `clrsKit` logger hierarchy.

    Args:
        level: Level name or number. Unknown names fall back to INFO.
        log_path: Optional file that receives the same records, unstyled.
    """
    numeric_level = _resolve_level(level)
    if numeric_level is None:
        numeric_level = logging.INFO

    root = logging.getLogger("clrsKit")
    root.setLevel(numeric_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(console=tui.console, show_path=False, rich_tracebacks=True)
    rich_handler.setLevel(numeric_level)
    root.addHandler(rich_handler)

    if log_path:
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(numeric_level)
        root.addHandler(file_handler)
    root.propagate = False


# --- TuiLoggerAdapter Class ---
class TuiLoggerAdapter:
    """
    A logger adapter that directs logging messages to TUI print functions.

    This class provides a subset of the standard `logging.Logger` interface,
    routing calls to appropriate `tui.tui_print_*` methods based on log level.
    It is not a full `logging.Handler` but mimics a `Logger`'s API.
    """

    def __init__(self, tui_module: Any = tui, level: Union[int, str] = logging.INFO) -> None:
        """
        Initializes the TuiLoggerAdapter.

        Args:
            tui_module: Module providing `tui_print_*` functions
                        (defaults to `clrsKit.utils.tui`).
            level: Initial level.
        """
        self.tui: Any = tui_module
        self._level_to_func: Dict[int, Callable[..., None]] = {
            logging.DEBUG: self.tui.tui_print_debug,
            logging.INFO: self.tui.tui_print_info,
            logging.WARNING: self.tui.tui_print_warning,
            logging.ERROR: self.tui.tui_print_error,
            logging.CRITICAL: self.tui.tui_print_error,  # Map critical to error for TUI
        }
        self.current_level: int = logging.INFO
        self.setLevel(level)

    def _log(
        self,
        level: int,
        msg: Any,
        args: Tuple[Any, ...],
        exc_info: Optional[Union[bool, Any]] = None,
        **kwargs: Any
    ) -> None:
        if level < self.current_level:
            return

        func: Callable[..., None] = self._level_to_func.get(level, self.tui.tui_print_info)
        log_msg: str
        if args:
            try:
                log_msg = str(msg) % args
            except TypeError:
                # msg was not a format string
                log_msg = f"{str(msg)} {' '.join(map(str, args))}"
        else:
            log_msg = str(msg)

        func(log_msg)

        if exc_info:
            exc_text: str = ""
            if isinstance(exc_info, bool):
                exc_text = traceback.format_exc()
            elif isinstance(exc_info, tuple):
                exc_text = ''.join(traceback.format_exception(*exc_info))
            elif isinstance(exc_info, BaseException):
                exc_text = ''.join(traceback.format_exception(
                    type(exc_info), exc_info, exc_info.__traceback__
                ))

            if exc_text.strip() and exc_text.strip() != "NoneType: None":
                self.tui.tui_print_error(f"\n--- Traceback ---:\n{exc_text.strip()}\n-------------------")

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Logs a message with level DEBUG on this logger."""
        self._log(logging.DEBUG, msg, args, **kwargs)

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Logs a message with level INFO on this logger."""
        self._log(logging.INFO, msg, args, **kwargs)

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Logs a message with level WARNING on this logger."""
        self._log(logging.WARNING, msg, args, **kwargs)

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Logs a message with level ERROR on this logger."""
        self._log(logging.ERROR, msg, args, **kwargs)

    def critical(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Logs a message with level CRITICAL on this logger."""
        self._log(logging.CRITICAL, msg, args, **kwargs)

    def success(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Non-standard level convenience: prints a success-styled message."""
        if logging.INFO < self.current_level:
            return
        try:
            text = (str(msg) % args) if args else str(msg)
        except TypeError:
            text = f"{msg} {' '.join(map(str, args))}"
        self.tui.tui_print_success(text)

    def exception(self, msg: Any, *args: Any, exc_info: bool = True, **kwargs: Any) -> None:
        """Convenience method for logging an ERROR with exception information."""
        kwargs['exc_info'] = exc_info
        self._log(logging.ERROR, msg, args, **kwargs)

    def isEnabledFor(self, level: int) -> bool:
        """Checks if a message of 'level' would be processed by this logger."""
        return level >= self.current_level

    def setLevel(self, level: Union[int, str]) -> None:
        """
        Sets the logging level of this logger.
        Level must be an int or a str (e.g., "INFO").
        """
        numeric_level = _resolve_level(level)
        if numeric_level is None:
            self.tui.tui_print_warning(
                f"(TuiLoggerAdapter: Invalid log level '{level}'. Keeping current level.)"
            )
            return
        self.current_level = numeric_level
