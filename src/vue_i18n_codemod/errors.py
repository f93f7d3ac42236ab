"""
Exception hierarchy for vue-i18n-codemod.

All errors raised by the package derive from :class:`LocalizationError`, so
callers can catch a single type around a transformation job.
"""

from typing import Optional


class LocalizationError(Exception):
  """Base class for all errors raised by the codemod."""


class ScriptSyntaxError(LocalizationError, SyntaxError):
  """
  Raised when the tokenizer or parser cannot read a script block.

  Attributes:
      line (int): 1-based line of the offending token.
      column (int): 0-based column of the offending token.
  """

  def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
    super().__init__(f"{message} (line {line}, column {column})")
    self.line = line
    self.column = column


class UnsupportedImportError(LocalizationError):
  """
  Raised when a governed module is imported in a form that cannot be extended.

  A namespace import (``import * as vue from 'vue'``) has no named specifier
  list, so required members cannot be appended to it.
  """

  def __init__(self, module: str, detail: Optional[str] = None) -> None:
    message = f"Cannot add named imports to the '{module}' import declaration"
    if detail:
      message = f"{message}: {detail}"
    super().__init__(message)
    self.module = module
