"""
Orchestration Engine for the localization codemod.

The `LocalizationEngine` drives one script block through the pipeline:

1.  **Ingestion**: Tokenize and parse the script into a `Program` tree.
2.  **Declaration Injection**: Ensure ``ref``/``computed`` and ``useI18n``
    are imported exactly once (an empty script is only seeded with them).
3.  **Scope Processing**: For each reactive scope (the top level, or each
    ``setup()`` method of the default export) bind ``t`` and rewrite the
    translatable string literals.
4.  **Emission**: Print the mutated tree back to source.

`transform` covers steps 2-3 on an already parsed tree; `run` wraps the whole
pipeline and reports failures through a `ConversionResult`.
"""

from typing import List, Optional

from rich.markup import escape

from vue_i18n_codemod.config import LocalizerConfig
from vue_i18n_codemod.core.conversion_result import ConversionResult, RewriteRecord
from vue_i18n_codemod.core.literals import KeyResolver
from vue_i18n_codemod.core.scope import ScopeLocator
from vue_i18n_codemod.core.script.emitter import ScriptEmitter
from vue_i18n_codemod.core.script.nodes import Program
from vue_i18n_codemod.core.script.parser import ScriptParser
from vue_i18n_codemod.core.tracer import get_tracer, reset_tracer
from vue_i18n_codemod.errors import LocalizationError, ScriptSyntaxError
from vue_i18n_codemod.utils.console import log_error, log_success


class LocalizationEngine:
  """
  Main entry point for localizing component scripts.
  """

  def __init__(self, config: Optional[LocalizerConfig] = None):
    """
    Initializes the Engine.

    Args:
        config (LocalizerConfig, optional): Canonical names. Defaults to the
            vue / vue-i18n conventions.
    """
    self.config = config or LocalizerConfig()
    self.locator = ScopeLocator(self.config)

  def parse(self, code: str) -> Program:
    """
    Parses script source into a tree.

    Raises:
        ScriptSyntaxError: If the script cannot be parsed.
    """
    return ScriptParser(code).parse()

  def to_source(self, program: Program) -> str:
    return ScriptEmitter(quote=self.config.quote).emit(program)

  def transform(self, program: Program, resolve: KeyResolver) -> List[RewriteRecord]:
    """
    Localizes a parsed tree in place.

    Args:
        program (Program): The parsed module, mutated in place.
        resolve (KeyResolver): Returns the translation key for a display
            string, or a falsy value when there is none.

    Returns:
        List[RewriteRecord]: The literals that were rewritten.

    Raises:
        UnsupportedImportError: If a governed module is namespace-imported.
        TypeError: If the resolver returns a non-string key.
    """
    tracer = get_tracer()
    tracer.start_phase("Localization", "Declarations & Literal Rewrite")
    try:
      return self.locator.locate_and_process(program, resolve)
    finally:
      tracer.end_phase()

  def run(self, code: str, resolve: KeyResolver) -> ConversionResult:
    """
    Executes the full pipeline on script source.

    Args:
        code (str): The script source (content of a ``<script>`` block).
        resolve (KeyResolver): Display text to translation key.

    Returns:
        ConversionResult: The generated code, rewrite records and trace. On
        failure the input code is returned unchanged with `success=False`.
    """
    reset_tracer()
    tracer = get_tracer()

    tracer.start_phase("Ingestion", "Script Text -> Tree")
    try:
      program = self.parse(code)
    except ScriptSyntaxError as e:
      log_error(f"Parse Error: {escape(str(e))}")
      return ConversionResult(
        code=code,
        errors=[f"Parse Error: {e}"],
        success=False,
        trace_events=tracer.export(),
      )
    tracer.end_phase()

    try:
      records = self.transform(program, resolve)
    except LocalizationError as e:
      log_error(f"Localization Error: {escape(str(e))}")
      return ConversionResult(
        code=code,
        errors=[f"Localization Error: {e}"],
        success=False,
        trace_events=tracer.export(),
      )

    tracer.start_phase("Emission", "Tree -> Script Text")
    final_code = self.to_source(program)
    tracer.end_phase()

    log_success(f"Rewrote {len(records)} literal(s)")
    return ConversionResult(
      code=final_code,
      rewrites=records,
      success=True,
      trace_events=tracer.export(),
    )
