"""
Tests for the Scope Locator.
"""

from vue_i18n_codemod.config import LocalizerConfig
from vue_i18n_codemod.core.scope import ScopeLocator, find_setup_methods
from vue_i18n_codemod.core.script.emitter import emit_module
from vue_i18n_codemod.core.script.parser import parse_module
from vue_i18n_codemod.core.tracer import TraceEventType, get_tracer
from vue_i18n_codemod.enums import ScopeKind


def test_no_default_export_uses_top_level():
  program = parse_module("const a = 1")
  scopes = ScopeLocator().reactive_scopes(program)
  assert len(scopes) == 1
  kind, statements = scopes[0]
  assert kind == ScopeKind.TOP_LEVEL
  assert statements is program.body


def test_setup_methods_are_found():
  program = parse_module("export default { data() { return {} }, setup() { const a = 1 } }")
  methods = find_setup_methods(program)
  assert len(methods) == 1
  assert methods[0].key.name == "setup"


def test_nested_setup_methods_are_all_found():
  program = parse_module(
    """
    export default defineComponent({
      components: { Child: { setup() {} } },
      async setup() {},
    })
    """
  )
  assert len(find_setup_methods(program)) == 2


def test_property_style_setup_is_ignored():
  program = parse_module("export default { setup: function () {}, other: { setup: () => {} } }")
  assert find_setup_methods(program) == []


def test_computed_setup_key_is_ignored():
  program = parse_module("export default { ['setup']() {} }")
  assert find_setup_methods(program) == []


def test_setup_outside_default_export_is_ignored():
  program = parse_module("const c = { setup() {} }\nexport default c")
  assert find_setup_methods(program) == []


def test_default_export_without_setup_has_no_scope(resolve):
  program = parse_module("export default { name: 'hi' }")
  records = ScopeLocator().locate_and_process(program, resolve)
  assert records == []
  # Imports are still ensured at the top level, the literal is left alone.
  assert emit_module(program) == (
    "import { ref, computed } from 'vue';\n"
    "import { useI18n } from 'vue-i18n';\n"
    "export default {\n"
    "  name: 'hi'\n"
    "};\n"
  )
  warnings = [e for e in get_tracer().export() if e["type"] == TraceEventType.WARNING]
  assert [e["description"] for e in warnings] == ["Default export has no setup() method; literals left unchanged"]


def test_empty_program_is_only_seeded(resolve):
  program = parse_module("")
  assert ScopeLocator().locate_and_process(program, resolve) == []
  assert len(program.body) == 2


def test_setup_scope_gets_binding_and_rewrites(resolve):
  program = parse_module("export default { setup() { const a = 'hi' } }")
  records = ScopeLocator().locate_and_process(program, resolve)
  assert [r.key for r in records] == ["message.hi"]
  setup = find_setup_methods(program)[0]
  assert len(setup.body.body) == 2
  # Top level holds imports and the export only.
  assert len(program.body) == 3


def test_custom_setup_name(resolve):
  program = parse_module("export default { init() { const a = 'hi' } }")
  locator = ScopeLocator(LocalizerConfig(setup_name="init"))
  assert len(locator.locate_and_process(program, resolve)) == 1
