"""
Literal Rewriter.

Walks a statement list depth-first in document order and replaces every
string literal the resolver recognizes with a translation lookup. The shape of
the replacement depends only on the literal's immediate parent:

- Argument of ``ref(...)``: ``ref('x')`` becomes ``ref(t('key'))``.
- Anything else: ``'x'`` becomes ``computed(() => t('key'))``.

Replacement subtrees are returned to the parent slot without being visited,
so a synthesized key literal is never offered to the resolver again.
"""

from typing import Callable, List, Optional

from vue_i18n_codemod.config import LocalizerConfig
from vue_i18n_codemod.core.conversion_result import RewriteRecord
from vue_i18n_codemod.core.script.builders import derived_translation, translate_call
from vue_i18n_codemod.core.script.nodes import (
  CallExpression,
  ExportAllDeclaration,
  ExportNamedDeclaration,
  Identifier,
  ImportDeclaration,
  Node,
  ObjectMethod,
  ObjectProperty,
  Statement,
  StringLiteral,
)
from vue_i18n_codemod.core.script.visitor import NodeTransformer
from vue_i18n_codemod.core.tracer import get_tracer
from vue_i18n_codemod.enums import RewriteCategory

KeyResolver = Callable[[str], Optional[str]]


class LiteralRewriter(NodeTransformer):
  """
  Rewrites translatable string literals inside a statement list.

  Attributes:
      resolve (KeyResolver): Maps display text to a key; falsy means no match.
      config (LocalizerConfig): Names of ``ref``, ``computed`` and ``t``.
      records (List[RewriteRecord]): Rewrites performed so far.
  """

  def __init__(self, resolve: KeyResolver, config: Optional[LocalizerConfig] = None):
    self.resolve = resolve
    self.config = config or LocalizerConfig()
    self.records: List[RewriteRecord] = []

  def rewrite(self, statements: List[Statement]) -> List[RewriteRecord]:
    """
    Rewrites literals in every statement of the list, in place.

    Args:
        statements (List[Statement]): The statement list of a reactive scope.

    Returns:
        List[RewriteRecord]: Rewrites made by this call, in document order.
    """
    start = len(self.records)
    for idx, stmt in enumerate(statements):
      statements[idx] = self.visit(stmt, None)
    return self.records[start:]

  # --- Non-expression string slots ---

  def visit_ImportDeclaration(self, node: ImportDeclaration, parent: Optional[Node]) -> Node:
    return node

  def visit_ExportAllDeclaration(self, node: ExportAllDeclaration, parent: Optional[Node]) -> Node:
    return node

  def visit_ExportNamedDeclaration(self, node: ExportNamedDeclaration, parent: Optional[Node]) -> Node:
    if node.declaration is not None:
      node.declaration = self.visit(node.declaration, node)
    return node

  def visit_ObjectProperty(self, node: ObjectProperty, parent: Optional[Node]) -> Node:
    if node.computed:
      node.key = self.visit(node.key, node)
    # Shorthand properties alias key and value; the key is an identifier anyway.
    node.value = self.visit(node.value, node)
    return node

  def visit_ObjectMethod(self, node: ObjectMethod, parent: Optional[Node]) -> Node:
    if node.computed:
      node.key = self.visit(node.key, node)
    for idx, param in enumerate(node.params):
      node.params[idx] = self.visit(param, node)
    node.body = self.visit(node.body, node)
    return node

  # --- Literals ---

  def classify(self, parent: Optional[Node]) -> RewriteCategory:
    """
    Picks the rewrite strategy from the literal's immediate parent.

    Only the callee's identifier name is compared; a local variable that
    shadows ``ref`` is treated the same as the import.

    Args:
        parent (Node, optional): The node owning the literal's slot.

    Returns:
        RewriteCategory: REACTIVE_ARGUMENT for ``ref(...)`` arguments,
        DERIVED_VALUE otherwise.
    """
    if (
      isinstance(parent, CallExpression)
      and isinstance(parent.callee, Identifier)
      and parent.callee.name == self.config.ref_name
    ):
      return RewriteCategory.REACTIVE_ARGUMENT
    return RewriteCategory.DERIVED_VALUE

  def visit_StringLiteral(self, node: StringLiteral, parent: Optional[Node]) -> Node:
    key = self.resolve(node.value)
    if not key:
      get_tracer().log_inspection(node.value, "Skipped", "No translation key")
      return node
    if not isinstance(key, str):
      raise TypeError(f"Key resolver must return a string or None, got {type(key).__name__}")

    cfg = self.config
    category = self.classify(parent)
    if category is RewriteCategory.REACTIVE_ARGUMENT:
      replacement = translate_call(cfg.translate_name, key, cfg.quote)
    else:
      replacement = derived_translation(cfg.computed_name, cfg.translate_name, key, cfg.quote)

    self.records.append(RewriteRecord(value=node.value, key=key, category=category))
    get_tracer().log_mutation("StringLiteral", node.value, key)
    return replacement
