"""
Scope Locator.

Decides which statement lists are reactive scopes, i.e. where the accessor
binding lives and whose literals are rewritten:

- ``<script setup>`` style modules (no default export): the top-level body.
- Options-object components: the body of every ``setup() { ... }`` method
  found inside the default export.
"""

from typing import List, Optional, Tuple

from vue_i18n_codemod.config import LocalizerConfig
from vue_i18n_codemod.core.conversion_result import RewriteRecord
from vue_i18n_codemod.core.injector import DeclarationInjector
from vue_i18n_codemod.core.literals import KeyResolver, LiteralRewriter
from vue_i18n_codemod.core.script.nodes import (
  ExportDefaultDeclaration,
  Identifier,
  ObjectMethod,
  Program,
  Statement,
)
from vue_i18n_codemod.core.script.visitor import walk
from vue_i18n_codemod.core.tracer import get_tracer
from vue_i18n_codemod.enums import ScopeKind


def find_default_export(program: Program) -> Optional[ExportDefaultDeclaration]:
  for stmt in program.body:
    if isinstance(stmt, ExportDefaultDeclaration):
      return stmt
  return None


def find_setup_methods(program: Program, setup_name: str = "setup") -> List[ObjectMethod]:
  """
  Collects the ``setup`` methods declared anywhere inside the default export.

  Only method shorthand counts (``setup() {}``, ``async setup() {}``). A
  ``setup`` property holding a function or arrow is not a match, nor is a
  computed ``['setup']`` key.

  Args:
      program (Program): The parsed module.
      setup_name (str): Method name to look for.

  Returns:
      List[ObjectMethod]: Matches in document order; empty when the module
      has no default export.
  """
  export = find_default_export(program)
  if export is None:
    return []
  found: List[ObjectMethod] = []
  for node, _ in walk(export):
    if (
      isinstance(node, ObjectMethod)
      and node.kind == "method"
      and not node.computed
      and isinstance(node.key, Identifier)
      and node.key.name == setup_name
    ):
      found.append(node)
  return found


class ScopeLocator:
  """
  Drives declaration injection and literal rewriting across reactive scopes.
  """

  def __init__(self, config: Optional[LocalizerConfig] = None):
    self.config = config or LocalizerConfig()
    self.injector = DeclarationInjector(self.config)

  def reactive_scopes(self, program: Program) -> List[Tuple[ScopeKind, List[Statement]]]:
    """
    Lists the statement lists to process.

    Args:
        program (Program): The parsed module.

    Returns:
        List[Tuple[ScopeKind, List[Statement]]]: Each scope's kind and its
        live statement list.
    """
    if find_default_export(program) is None:
      return [(ScopeKind.TOP_LEVEL, program.body)]
    return [(ScopeKind.SETUP_METHOD, m.body.body) for m in find_setup_methods(program, self.config.setup_name)]

  def locate_and_process(self, program: Program, resolve: KeyResolver) -> List[RewriteRecord]:
    """
    Injects imports at the top level, then binds and rewrites each scope.

    An empty module is seeded with the imports only. A default export with no
    ``setup`` method leaves a warning in the trace.

    Args:
        program (Program): The parsed module, mutated in place.
        resolve (KeyResolver): Display text to translation key.

    Returns:
        List[RewriteRecord]: All rewrites, in scope order.
    """
    tracer = get_tracer()
    if self.injector.ensure_declarations(program.body):
      return []

    scopes = self.reactive_scopes(program)
    if not scopes:
      tracer.log_warning(f"Default export has no {self.config.setup_name}() method; literals left unchanged")

    rewriter = LiteralRewriter(resolve, self.config)
    records: List[RewriteRecord] = []
    for kind, statements in scopes:
      tracer.start_phase("Reactive Scope", kind.value)
      self.injector.ensure_accessor_binding(statements)
      records.extend(rewriter.rewrite(statements))
      tracer.end_phase()
    return records
