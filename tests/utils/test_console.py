"""
Tests for the console proxy and logging helpers.
"""

import io

from rich.console import Console

from vue_i18n_codemod.utils.console import (
  get_console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
)


def test_logs_are_captured_by_injected_console():
  buffer = io.StringIO()
  capture = Console(file=buffer, width=200, color_system=None)
  set_console(capture)
  try:
    assert get_console() is capture
    log_info("parsing [bold]App.vue[/bold]")
    log_success("Rewrote 2 literal(s)")
    log_warning("Skipping TypeScript block")
    log_error("Parse Error")
  finally:
    reset_console()

  output = buffer.getvalue()
  assert "parsing App.vue" in output
  assert "SUCCESS" in output
  assert "Rewrote 2 literal(s)" in output
  assert "Skipping TypeScript block" in output
  assert "Parse Error" in output


def test_reset_restores_fresh_console():
  capture = Console(file=io.StringIO())
  set_console(capture)
  reset_console()
  assert get_console() is not capture
