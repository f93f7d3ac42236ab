"""
Import membership queries.
"""

from typing import List, Optional

from vue_i18n_codemod.core.script.nodes import (
  ImportDeclaration,
  ImportNamespaceSpecifier,
  ImportSpecifier,
  Statement,
)


def has_imported_member(decl: ImportDeclaration, member: str) -> bool:
  """
  Checks whether a declaration imports `member` by name.

  The imported (exported-side) name is compared, so ``import { ref as r }``
  counts as importing ``ref``. Default and namespace specifiers never match.

  Args:
      decl (ImportDeclaration): The declaration to inspect.
      member (str): The exported member name.

  Returns:
      bool: True if a named specifier imports `member`.
  """
  for spec in decl.specifiers:
    if isinstance(spec, ImportSpecifier) and spec.imported.name == member:
      return True
  return False


def find_import(statements: List[Statement], module: str) -> Optional[ImportDeclaration]:
  """Returns the first import declaration whose source is `module`."""
  for stmt in statements:
    if isinstance(stmt, ImportDeclaration) and stmt.source.value == module:
      return stmt
  return None


def has_namespace_import(decl: ImportDeclaration) -> bool:
  return any(isinstance(spec, ImportNamespaceSpecifier) for spec in decl.specifiers)
