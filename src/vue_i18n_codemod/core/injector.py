"""
Declaration Injector.

Guarantees that the supporting declarations of a localized component exist
exactly once in a statement list:

1.  ``import { ref, computed } from 'vue'``
2.  ``import { useI18n } from 'vue-i18n'``
3.  ``const { t } = useI18n()``

Existing import declarations are extended in place rather than duplicated.
Missing ones are prepended. The accessor binding goes right after the leading
import block.
"""

from typing import List, Optional

from vue_i18n_codemod.config import LocalizerConfig
from vue_i18n_codemod.core.members import find_import, has_imported_member, has_namespace_import
from vue_i18n_codemod.core.script.builders import accessor_binding, import_declaration, import_specifier
from vue_i18n_codemod.core.script.nodes import (
  CallExpression,
  Identifier,
  ImportDeclaration,
  ObjectPattern,
  ObjectProperty,
  Statement,
  VariableDeclaration,
)
from vue_i18n_codemod.core.tracer import get_tracer
from vue_i18n_codemod.errors import UnsupportedImportError


class DeclarationInjector:
  """
  Adds missing imports and the accessor binding to statement lists.

  Attributes:
      config (LocalizerConfig): Canonical module and member names.
  """

  def __init__(self, config: Optional[LocalizerConfig] = None):
    self.config = config or LocalizerConfig()

  @property
  def reactive_members(self) -> List[str]:
    return [self.config.ref_name, self.config.computed_name]

  def ensure_declarations(self, body: List[Statement]) -> bool:
    """
    Ensures both governed modules are imported with the required members.

    An empty body is seeded with the two canonical imports. Otherwise each
    module is looked up among the import declarations present on entry: a
    missing declaration is prepended, an existing one gains the members it
    lacks. The accessor module is handled first, so after two prepends the
    reactive module ends up on top.

    Args:
        body (List[Statement]): The statement list, mutated in place.

    Returns:
        bool: True if the body was empty and has been seeded.

    Raises:
        UnsupportedImportError: If a governed module is only imported as a
            namespace and members are missing.
    """
    cfg = self.config
    if not body:
      body.append(import_declaration(cfg.reactive_module, self.reactive_members, cfg.quote))
      body.append(import_declaration(cfg.i18n_module, [cfg.hook_name], cfg.quote))
      get_tracer().log_import("Seeded", cfg.reactive_module, self.reactive_members)
      get_tracer().log_import("Seeded", cfg.i18n_module, [cfg.hook_name])
      return True

    existing = [stmt for stmt in body if isinstance(stmt, ImportDeclaration)]
    self._ensure_import(body, existing, cfg.i18n_module, [cfg.hook_name])
    self._ensure_import(body, existing, cfg.reactive_module, self.reactive_members)
    return False

  def _ensure_import(
    self,
    body: List[Statement],
    existing: List[ImportDeclaration],
    module: str,
    members: List[str],
  ) -> None:
    decl = find_import(existing, module)
    if decl is None:
      body.insert(0, import_declaration(module, members, self.config.quote))
      get_tracer().log_import("Prepended", module, members)
      return

    missing = [m for m in members if not has_imported_member(decl, m)]
    if not missing:
      return
    if has_namespace_import(decl):
      raise UnsupportedImportError(module, "namespace imports have no named specifier list")
    for member in missing:
      decl.specifiers.append(import_specifier(member))
    get_tracer().log_import("Extended", module, missing)

  def has_accessor_binding(self, body: List[Statement]) -> bool:
    """
    Detects ``const { t } = useI18n()`` (any declaration kind) in a statement list.

    Args:
        body (List[Statement]): Statements to scan (not recursive).

    Returns:
        bool: True if a matching binding is present.
    """
    for stmt in body:
      if not isinstance(stmt, VariableDeclaration):
        continue
      for declarator in stmt.declarations:
        if self._is_accessor_declarator(declarator.id, declarator.init):
          return True
    return False

  def _is_accessor_declarator(self, target, init) -> bool:
    if not isinstance(init, CallExpression):
      return False
    if not (isinstance(init.callee, Identifier) and init.callee.name == self.config.hook_name):
      return False
    if not isinstance(target, ObjectPattern):
      return False
    for prop in target.properties:
      if (
        isinstance(prop, ObjectProperty)
        and not prop.computed
        and isinstance(prop.key, Identifier)
        and prop.key.name == self.config.translate_name
      ):
        return True
    return False

  def ensure_accessor_binding(self, body: List[Statement]) -> bool:
    """
    Inserts the accessor binding after the leading imports if it is absent.

    Args:
        body (List[Statement]): The statement list, mutated in place.

    Returns:
        bool: True if a binding was inserted.
    """
    if self.has_accessor_binding(body):
      return False

    index = len(body)
    for idx, stmt in enumerate(body):
      if not isinstance(stmt, ImportDeclaration):
        index = idx
        break

    body.insert(index, accessor_binding(self.config.hook_name, self.config.translate_name))
    get_tracer().log_import("Bound", self.config.i18n_module, [self.config.translate_name])
    return True
