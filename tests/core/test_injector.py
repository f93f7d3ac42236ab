"""
Tests for the Declaration Injector.

Verifies:
1.  Seeding of an empty scope.
2.  The four presence combinations of the two governed modules.
3.  Idempotence of import and binding injection.
4.  Binding placement after the leading imports.
5.  Rejection of namespace imports and extension of default imports.
"""

import pytest

from vue_i18n_codemod.config import LocalizerConfig
from vue_i18n_codemod.core.injector import DeclarationInjector
from vue_i18n_codemod.core.members import find_import
from vue_i18n_codemod.core.script.emitter import emit_module
from vue_i18n_codemod.core.script.nodes import ImportSpecifier, Program, VariableDeclaration
from vue_i18n_codemod.core.script.parser import parse_module
from vue_i18n_codemod.errors import UnsupportedImportError


@pytest.fixture
def injector():
  return DeclarationInjector()


def imported_names(body, module):
  decl = find_import(body, module)
  return [s.imported.name for s in decl.specifiers if isinstance(s, ImportSpecifier)]


def test_empty_body_is_seeded(injector):
  body = []
  assert injector.ensure_declarations(body) is True
  assert emit_module(Program(body=body)) == ("import { ref, computed } from 'vue';\nimport { useI18n } from 'vue-i18n';\n")


def test_both_absent_prepends_in_order(injector):
  program = parse_module("import { a } from 'b'")
  assert injector.ensure_declarations(program.body) is False
  assert emit_module(program) == (
    "import { ref, computed } from 'vue';\nimport { useI18n } from 'vue-i18n';\nimport { a } from 'b';\n"
  )


def test_reactive_present_accessor_absent(injector):
  program = parse_module("import { computed } from 'vue'")
  injector.ensure_declarations(program.body)
  assert emit_module(program) == "import { useI18n } from 'vue-i18n';\nimport { computed, ref } from 'vue';\n"


def test_reactive_absent_accessor_present(injector):
  program = parse_module("import { useI18n } from 'vue-i18n'")
  injector.ensure_declarations(program.body)
  assert emit_module(program) == "import { ref, computed } from 'vue';\nimport { useI18n } from 'vue-i18n';\n"


def test_accessor_module_without_hook_is_extended(injector):
  program = parse_module("import { ref, computed } from 'vue'\nimport { createI18n } from 'vue-i18n'")
  injector.ensure_declarations(program.body)
  assert len(program.body) == 2
  assert imported_names(program.body, "vue-i18n") == ["createI18n", "useI18n"]
  assert imported_names(program.body, "vue") == ["ref", "computed"]


@pytest.mark.parametrize(
  "code",
  [
    "",
    "const x = 1",
    "import { ref } from 'vue'",
    "import { computed } from 'vue'\nimport { useI18n } from 'vue-i18n'",
    "import { ref, computed } from 'vue'\nimport { useI18n } from 'vue-i18n'",
    "import { useI18n as use } from 'vue-i18n'\nimport { ref as r } from 'vue'",
  ],
)
def test_each_member_appears_exactly_once(injector, code):
  program = parse_module(code)
  injector.ensure_declarations(program.body)
  vue_names = imported_names(program.body, "vue")
  i18n_names = imported_names(program.body, "vue-i18n")
  assert vue_names.count("ref") == 1
  assert vue_names.count("computed") == 1
  assert i18n_names.count("useI18n") == 1


def test_ensure_declarations_is_idempotent(injector):
  program = parse_module("import { computed } from 'vue'\nconst a = 1")
  injector.ensure_declarations(program.body)
  once = emit_module(program)
  injector.ensure_declarations(program.body)
  assert emit_module(program) == once


def test_binding_inserted_after_imports(injector):
  program = parse_module("import { a } from 'b'\nimport { c } from 'd'\nconst x = 1")
  assert injector.ensure_accessor_binding(program.body) is True
  assert emit_module(program) == (
    "import { a } from 'b';\nimport { c } from 'd';\nconst { t } = useI18n();\nconst x = 1;\n"
  )


def test_binding_appended_when_only_imports(injector):
  program = parse_module("import { a } from 'b'")
  injector.ensure_accessor_binding(program.body)
  assert isinstance(program.body[-1], VariableDeclaration)


def test_binding_is_idempotent(injector):
  program = parse_module("const a = 1")
  assert injector.ensure_accessor_binding(program.body) is True
  assert injector.ensure_accessor_binding(program.body) is False
  assert emit_module(program) == "const { t } = useI18n();\nconst a = 1;\n"


@pytest.mark.parametrize(
  "existing",
  [
    "const { t } = useI18n()",
    "let { locale, t } = useI18n()",
    "const { t: translate } = useI18n({ useScope: 'global' })",
  ],
)
def test_existing_binding_is_detected(injector, existing):
  program = parse_module(existing)
  assert injector.ensure_accessor_binding(program.body) is False
  assert len(program.body) == 1


def test_multiple_existing_bindings_are_left_alone(injector):
  program = parse_module("const { t } = useI18n()\nconst { t: t2 } = useI18n()")
  assert injector.ensure_accessor_binding(program.body) is False
  assert len(program.body) == 2


@pytest.mark.parametrize(
  "code",
  [
    "const { locale } = useI18n()",
    "const t = useI18n()",
    "const { t } = other()",
  ],
)
def test_lookalike_bindings_do_not_count(injector, code):
  program = parse_module(code)
  assert injector.ensure_accessor_binding(program.body) is True


def test_namespace_import_is_rejected(injector):
  program = parse_module("import * as vue from 'vue'")
  with pytest.raises(UnsupportedImportError, match="'vue'"):
    injector.ensure_declarations(program.body)


def test_default_import_is_extended(injector):
  program = parse_module("import Vue from 'vue'\nimport { useI18n } from 'vue-i18n'")
  injector.ensure_declarations(program.body)
  assert emit_module(program) == "import Vue, { ref, computed } from 'vue';\nimport { useI18n } from 'vue-i18n';\n"


def test_side_effect_import_is_extended(injector):
  program = parse_module("import 'vue-i18n'\nimport { ref, computed } from 'vue'")
  injector.ensure_declarations(program.body)
  assert imported_names(program.body, "vue-i18n") == ["useI18n"]


def test_custom_names():
  config = LocalizerConfig(reactive_module="@vue/runtime-core", i18n_module="petite-vue-i18n", quote='"')
  body = []
  DeclarationInjector(config).ensure_declarations(body)
  assert emit_module(Program(body=body)) == (
    'import { ref, computed } from "@vue/runtime-core";\nimport { useI18n } from "petite-vue-i18n";\n'
  )
