"""
Utility helpers (console and logging).
"""

from vue_i18n_codemod.utils.console import (
  get_console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
)

__all__ = [
  "get_console",
  "log_error",
  "log_info",
  "log_success",
  "log_warning",
  "reset_console",
  "set_console",
]
