"""
Tests for the Literal Rewriter.

Verifies:
1.  Category A: arguments of `ref(...)` become `t(key)`.
2.  Category B: other literals become `computed(() => t(key))`.
3.  Synthesized keys are never re-matched.
4.  Module specifiers and property keys are never offered to the resolver.
5.  Resolver contract violations propagate.
"""

import pytest

from vue_i18n_codemod.config import LocalizerConfig
from vue_i18n_codemod.core.literals import LiteralRewriter
from vue_i18n_codemod.core.script.emitter import emit_module
from vue_i18n_codemod.core.script.nodes import CallExpression, Identifier, StringLiteral
from vue_i18n_codemod.core.script.parser import parse_module
from vue_i18n_codemod.enums import RewriteCategory


def rewrite(code, resolve, config=None):
  program = parse_module(code)
  records = LiteralRewriter(resolve, config).rewrite(program.body)
  return emit_module(program), records


def test_ref_argument_becomes_translate_call(resolve):
  code, records = rewrite("const str = ref('hello world')", resolve)
  assert code == "const str = ref(t('message.hello'));\n"
  assert records[0].category == RewriteCategory.REACTIVE_ARGUMENT
  assert (records[0].value, records[0].key) == ("hello world", "message.hello")


def test_plain_literal_becomes_computed(resolve):
  code, records = rewrite("const str = 'hi'", resolve)
  assert code == "const str = computed(() => t('message.hi'));\n"
  assert records[0].category == RewriteCategory.DERIVED_VALUE


def test_other_call_is_category_b(resolve):
  code, _ = rewrite("const a = reactive('hi')\nconst b = vue.ref('hi')", resolve)
  assert code == (
    "const a = reactive(computed(() => t('message.hi')));\nconst b = vue.ref(computed(() => t('message.hi')));\n"
  )


def test_shadowed_ref_still_counts_as_category_a(resolve):
  code, _ = rewrite("function ref(x) { return x }\nconst a = ref('hi')", resolve)
  assert "const a = ref(t('message.hi'));" in code


def test_unmatched_literals_are_untouched(resolve):
  code, records = rewrite("const a = 'nope'\nconst b = ref(\"also no\")", resolve)
  assert code == "const a = 'nope';\nconst b = ref(\"also no\");\n"
  assert records == []


def test_document_order(resolve):
  _, records = rewrite("f('hi', { a: ref('hello world') }, ['hi'])", resolve)
  assert [r.key for r in records] == ["message.hi", "message.hello", "message.hi"]
  assert [r.category for r in records] == [
    RewriteCategory.DERIVED_VALUE,
    RewriteCategory.REACTIVE_ARGUMENT,
    RewriteCategory.DERIVED_VALUE,
  ]


def test_key_is_not_rematched():
  """A resolver that matches its own keys must not loop or double-wrap."""
  seen = []

  def greedy(text):
    seen.append(text)
    return "k" if text in ("hi", "k") else None

  code, records = rewrite("const a = 'hi'\nconst b = ref('hi')", greedy)
  assert code == "const a = computed(() => t('k'));\nconst b = ref(t('k'));\n"
  assert len(records) == 2
  assert seen == ["hi", "hi"]


def test_non_expression_strings_are_skipped():
  offered = []

  def spy(text):
    offered.append(text)
    return None

  rewrite(
    "import a from 'hi'\n"
    "export { a } from 'hi'\n"
    "export * from 'hi'\n"
    "const o = { 'hi': 1, 'x'() {}, ['y']: 2 }",
    spy,
  )
  assert offered == ["y"]


def test_export_declarations_are_rewritten(resolve):
  code, _ = rewrite("export const a = 'hi'", resolve)
  assert code == "export const a = computed(() => t('message.hi'));\n"


def test_property_value_and_default_value(resolve):
  code, _ = rewrite("const o = { label: 'hi' }\nfunction f(x = 'hi') {}", resolve)
  assert "label: computed(() => t('message.hi'))" in code
  assert "function f(x = computed(() => t('message.hi'))) {}" in code


def test_nested_functions_are_traversed(resolve):
  code, records = rewrite("watch(src, () => { msg.value = 'hello world' })", resolve)
  assert len(records) == 1
  assert "msg.value = computed(() => t('message.hello'));" in code


def test_replacement_nodes_are_fresh(resolve):
  program = parse_module("const a = ref('hi')")
  LiteralRewriter(resolve).rewrite(program.body)
  call = program.body[0].declarations[0].init
  inner = call.arguments[0]
  assert isinstance(inner, CallExpression)
  assert inner.callee == Identifier("t")
  assert inner.arguments == [StringLiteral(value="message.hi", raw="'message.hi'")]


def test_custom_names_and_quote(resolve):
  config = LocalizerConfig(ref_name="shallowRef", computed_name="derived", translate_name="$t", quote='"')
  code, _ = rewrite("const a = shallowRef('hi')\nconst b = 'hi'", resolve, config)
  assert code == 'const a = shallowRef($t("message.hi"));\nconst b = derived(() => $t("message.hi"));\n'


def test_resolver_exceptions_propagate():
  def broken(text):
    raise RuntimeError("boom")

  with pytest.raises(RuntimeError, match="boom"):
    rewrite("const a = 'x'", broken)


def test_non_string_key_is_rejected():
  with pytest.raises(TypeError, match="int"):
    rewrite("const a = 'x'", lambda text: 42)


def test_empty_key_means_no_match():
  code, records = rewrite("const a = 'x'", lambda text: "")
  assert records == []
  assert code == "const a = 'x';\n"
