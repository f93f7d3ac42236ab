"""
Single-File Component support.

Localizes every ``<script>`` / ``<script setup>`` block of a ``.vue`` file
and splices the printed result back in place. Text outside the script blocks,
the ``<template>`` included, is preserved byte for byte.
"""

import re
from typing import Optional

from rich.markup import escape

from vue_i18n_codemod.config import LocalizerConfig
from vue_i18n_codemod.core.engine import LocalizationEngine
from vue_i18n_codemod.core.literals import KeyResolver
from vue_i18n_codemod.utils.console import log_warning

SCRIPT_BLOCK_RE = re.compile(r"(<script(?=[\s>])[^>]*>)([\s\S]*?)(</script>)", re.IGNORECASE)
TYPESCRIPT_LANG_RE = re.compile(r"""\blang\s*=\s*["']?tsx?["'\s>]""", re.IGNORECASE)


def localize_sfc(source: str, resolve: KeyResolver, config: Optional[LocalizerConfig] = None) -> str:
  """
  Localizes the script blocks of a single-file component.

  TypeScript blocks (``lang="ts"`` / ``lang="tsx"``) are skipped with a
  warning.

  Args:
      source (str): Full ``.vue`` file content.
      resolve (KeyResolver): Display text to translation key.
      config (LocalizerConfig, optional): Canonical names.

  Returns:
      str: The file with its script blocks rewritten.

  Raises:
      ValueError: If a script block fails to localize.
  """
  engine = LocalizationEngine(config)

  def _replace(match: re.Match) -> str:
    open_tag, content, close_tag = match.groups()
    if TYPESCRIPT_LANG_RE.search(open_tag):
      log_warning(f"Skipping TypeScript block [code]{escape(open_tag)}[/code]")
      return match.group(0)

    result = engine.run(content, resolve)
    if result.has_errors:
      raise ValueError("; ".join(result.errors))
    return f"{open_tag}\n{result.code}{close_tag}"

  return SCRIPT_BLOCK_RE.sub(_replace, source)
