"""
Tests for Logging Utilities and Console Injection.

Verifies:
1. The proxy forwards to a real Rich console.
2. `set_console` captures log output.
3. `set_log_level` filters messages.
"""

import io
import logging

from rich.console import Console

from typed_collection.utils.console import (
  console,
  get_console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
  set_log_level,
)


def test_console_proxy_forwards():
  assert callable(console.print)
  assert isinstance(get_console(), Console)
  # Unknown attributes fall through to the backend
  assert console.width == get_console().width


def test_injected_console_captures_logs(recorded_console):
  log_info("Loaded collection")
  log_success("Merged")
  log_warning("Odd declaration")
  log_error("Rejected")

  output = recorded_console.export_text()
  assert "Loaded collection" in output
  assert "✅ Merged" in output
  assert "Odd declaration" in output
  assert "❌ Rejected" in output


def test_console_print_goes_to_backend(recorded_console):
  console.print("plain output")
  assert "plain output" in recorded_console.export_text()


def test_log_level_filters(recorded_console):
  set_log_level("WARNING")
  log_info("hidden message")
  log_warning("visible message")

  output = recorded_console.export_text()
  assert "hidden message" not in output
  assert "visible message" in output


def test_reset_restores_stdout_console():
  temp = Console(file=io.StringIO())
  set_console(temp)
  assert get_console() is temp

  reset_console()
  assert get_console() is not temp
  assert logging.getLogger().level == logging.INFO
