"""
Component Script Syntax Tree.

This package provides a pure Python representation of component script blocks:
a tokenizer and recursive descent parser, the node model, a generic traversal,
and an emitter that prints the tree back to source.
"""

from vue_i18n_codemod.core.script.emitter import ScriptEmitter, emit_module
from vue_i18n_codemod.core.script.parser import ScriptParser, parse_module

__all__ = [
  "ScriptEmitter",
  "ScriptParser",
  "emit_module",
  "parse_module",
]
