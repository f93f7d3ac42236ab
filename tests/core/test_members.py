"""
Tests for import membership queries.
"""

from vue_i18n_codemod.core.members import find_import, has_imported_member, has_namespace_import
from vue_i18n_codemod.core.script.parser import parse_module


def decl(code):
  return parse_module(code).body[0]


def test_direct_member():
  assert has_imported_member(decl("import { ref, computed } from 'vue'"), "computed")


def test_missing_member():
  assert not has_imported_member(decl("import { ref } from 'vue'"), "computed")


def test_alias_does_not_matter():
  """The imported name is compared, not the local alias."""
  node = decl("import { ref as r } from 'vue'")
  assert has_imported_member(node, "ref")
  assert not has_imported_member(node, "r")


def test_default_and_namespace_never_match():
  assert not has_imported_member(decl("import ref from 'vue'"), "ref")
  assert not has_imported_member(decl("import * as ref from 'vue'"), "ref")


def test_find_import_by_source():
  body = parse_module("import a from 'x'\nconst b = 1\nimport { c } from 'vue'").body
  assert find_import(body, "vue") is body[2]
  assert find_import(body, "vue-i18n") is None


def test_namespace_detection():
  assert has_namespace_import(decl("import * as vue from 'vue'"))
  assert not has_namespace_import(decl("import Vue, { ref } from 'vue'"))
