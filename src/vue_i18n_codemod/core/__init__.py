"""
Core transformation logic: the script tree, declaration injection, scope
location, literal rewriting and the orchestrating engine.
"""

from vue_i18n_codemod.core.conversion_result import ConversionResult, RewriteRecord
from vue_i18n_codemod.core.engine import LocalizationEngine
from vue_i18n_codemod.core.injector import DeclarationInjector
from vue_i18n_codemod.core.literals import LiteralRewriter
from vue_i18n_codemod.core.members import has_imported_member
from vue_i18n_codemod.core.scope import ScopeLocator, find_setup_methods
from vue_i18n_codemod.core.sfc import localize_sfc

__all__ = [
  "ConversionResult",
  "DeclarationInjector",
  "LiteralRewriter",
  "LocalizationEngine",
  "RewriteRecord",
  "ScopeLocator",
  "find_setup_methods",
  "has_imported_member",
  "localize_sfc",
]
