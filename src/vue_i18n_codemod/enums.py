"""
Enumerations for vue-i18n-codemod.

This module defines the categories used to describe where the engine works and
how it rewrote each matched literal.
"""

from enum import Enum


class RewriteCategory(str, Enum):
  """
  Rewrite strategy applied to a translatable string literal.

  Chosen purely from the literal's immediate syntactic parent.
  """

  REACTIVE_ARGUMENT = "reactive_argument"  # ref('x') -> ref(t('key'))
  DERIVED_VALUE = "derived_value"  # 'x' -> computed(() => t('key'))


class ScopeKind(str, Enum):
  """
  Shape of the statement list treated as the reactive scope.
  """

  TOP_LEVEL = "top_level"  # <script setup> body
  SETUP_METHOD = "setup_method"  # export default { setup() { ... } }
