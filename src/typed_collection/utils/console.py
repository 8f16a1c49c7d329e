"""
Logging and Console Utilities.

Command-line output goes through the standard `logging` library, rendered by
`rich`. Library modules only ever call ``logging.getLogger(__name__)``; this
module is what attaches a handler, and only the CLI imports it.

The console is held behind a proxy so that the destination can be swapped at
runtime (e.g. a recording console in tests) without re-importing modules that
captured the `console` reference.

Attributes:
    console (_ConsoleProxy): Stable reference to the active Rich Console.
"""

import logging
from typing import Any, Union

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Between INFO (20) and WARNING (30)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "type": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  Forwards printing to a swappable `rich.console.Console` backend.

  Swapping the backend also moves the root `RichHandler` to it, so
  ``logging.info(...)`` follows the console.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._level: int = logging.INFO
    self._configure_logging()

  @property
  def backend(self) -> Console:
    return self._backend

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console and re-targets logging to it.

    Args:
        new_console (Console): The console to write to from now on.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Back to a fresh stdout console at INFO level."""
    self._backend = Console(theme=_THEME)
    self._level = logging.INFO
    self._configure_logging()

  def set_level(self, level: Union[int, str]) -> None:
    """Sets the root logger level (``"DEBUG"``, ``logging.WARNING``...)."""
    self._level = logging.getLevelName(level) if isinstance(level, str) else level
    logging.getLogger().setLevel(self._level)

  def _configure_logging(self) -> None:
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    root_logger.addHandler(
      RichHandler(
        console=self._backend,
        show_time=False,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
      )
    )
    root_logger.setLevel(self._level)

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """Routes console output and logging to `new_console`."""
  console.set_backend(new_console)


def reset_console() -> None:
  """Routes console output and logging back to stdout."""
  console.reset()


def get_console() -> Console:
  """Returns the active Rich Console."""
  return console.backend


def set_log_level(level: Union[int, str]) -> None:
  console.set_level(level)


def log_info(msg: str) -> None:
  """
  Logs an informational message.

  Args:
      msg (str): Message text. May contain rich markup such as ``[type]``.
  """
  logging.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  logging.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  logging.error(f"❌ {msg}", extra={"markup": True})
