"""
Node factories for the statements and expressions the codemod synthesizes.

Each helper returns a fresh subtree, so callers can insert the result without
aliasing nodes that already live in a tree.
"""

from typing import List

from vue_i18n_codemod.core.script.nodes import (
  ArrowFunctionExpression,
  CallExpression,
  Identifier,
  ImportDeclaration,
  ImportSpecifier,
  ObjectPattern,
  ObjectProperty,
  StringLiteral,
  VariableDeclaration,
  VariableDeclarator,
)
from vue_i18n_codemod.core.script.strings import encode_string_literal


def string_literal(value: str, quote: str = "'") -> StringLiteral:
  """
  Creates a string literal with its source text pre-rendered.

  Args:
      value (str): The string value.
      quote (str): Quote character for the raw text.

  Returns:
      StringLiteral: The literal node.
  """
  return StringLiteral(value=value, raw=encode_string_literal(value, quote))


def import_specifier(name: str) -> ImportSpecifier:
  """Creates ``name`` (imported and local names are equal)."""
  return ImportSpecifier(imported=Identifier(name), local=Identifier(name))


def import_declaration(module: str, members: List[str], quote: str = "'") -> ImportDeclaration:
  """
  Creates ``import { a, b } from 'module'``.

  Args:
      module (str): Module specifier.
      members (List[str]): Named members, in order.
      quote (str): Quote character for the module specifier.

  Returns:
      ImportDeclaration: The declaration node.
  """
  return ImportDeclaration(
    specifiers=[import_specifier(m) for m in members],
    source=string_literal(module, quote),
  )


def accessor_binding(hook_name: str, translate_name: str) -> VariableDeclaration:
  """
  Creates ``const { t } = useI18n()``.

  Args:
      hook_name (str): The translation hook (``useI18n``).
      translate_name (str): The destructured accessor (``t``).

  Returns:
      VariableDeclaration: The binding statement.
  """
  pattern = ObjectPattern(
    properties=[ObjectProperty(key=Identifier(translate_name), value=Identifier(translate_name), shorthand=True)]
  )
  return VariableDeclaration(
    kind="const",
    declarations=[VariableDeclarator(id=pattern, init=CallExpression(callee=Identifier(hook_name)))],
  )


def translate_call(translate_name: str, key: str, quote: str = "'") -> CallExpression:
  """Creates ``t('key')``."""
  return CallExpression(callee=Identifier(translate_name), arguments=[string_literal(key, quote)])


def derived_translation(computed_name: str, translate_name: str, key: str, quote: str = "'") -> CallExpression:
  """
  Creates ``computed(() => t('key'))``.

  Args:
      computed_name (str): The derived-value wrapper.
      translate_name (str): The accessor function.
      key (str): Translation key path.
      quote (str): Quote character for the key literal.

  Returns:
      CallExpression: The wrapper call.
  """
  getter = ArrowFunctionExpression(params=[], body=translate_call(translate_name, key, quote))
  return CallExpression(callee=Identifier(computed_name), arguments=[getter])
