"""
Tests for the Script Parser.

Verifies:
1.  Import / export forms.
2.  Declarations with destructuring.
3.  Object literals with methods, accessors and computed keys.
4.  Expression precedence, arrows and optional chaining.
5.  Switch, do-while and labeled statements.
6.  Comment attachment and error reporting.
"""

import pytest

from vue_i18n_codemod.core.script.nodes import (
  ArrowFunctionExpression,
  BinaryExpression,
  BreakStatement,
  CallExpression,
  ContinueStatement,
  DoWhileStatement,
  ExportDefaultDeclaration,
  ExportNamedDeclaration,
  ExpressionStatement,
  ForOfStatement,
  Identifier,
  ImportDeclaration,
  ImportDefaultSpecifier,
  ImportNamespaceSpecifier,
  ImportSpecifier,
  LabeledStatement,
  LogicalExpression,
  MemberExpression,
  ObjectExpression,
  ObjectMethod,
  ObjectPattern,
  ObjectProperty,
  ReturnStatement,
  StringLiteral,
  SwitchStatement,
  VariableDeclaration,
)
from vue_i18n_codemod.core.script.parser import ScriptParser, parse_module
from vue_i18n_codemod.errors import LocalizationError, ScriptSyntaxError


def first_expression(code):
  stmt = parse_module(code).body[0]
  assert isinstance(stmt, ExpressionStatement)
  return stmt.expression


def test_empty_source():
  assert parse_module("").body == []
  assert parse_module("  \n // only a comment\n").body == []


def test_named_imports_with_alias():
  decl = parse_module("import { ref, computed as c } from 'vue'").body[0]
  assert isinstance(decl, ImportDeclaration)
  assert decl.source.value == "vue"
  assert decl.source.raw == "'vue'"
  first, second = decl.specifiers
  assert isinstance(first, ImportSpecifier)
  assert (first.imported.name, first.local.name) == ("ref", "ref")
  assert (second.imported.name, second.local.name) == ("computed", "c")


def test_default_namespace_and_bare_imports():
  program = parse_module(
    """
    import Vue, { ref } from "vue"
    import * as i18n from 'vue-i18n'
    import './style.css'
    """
  )
  default_decl, ns_decl, bare = program.body
  assert isinstance(default_decl.specifiers[0], ImportDefaultSpecifier)
  assert isinstance(default_decl.specifiers[1], ImportSpecifier)
  assert isinstance(ns_decl.specifiers[0], ImportNamespaceSpecifier)
  assert ns_decl.specifiers[0].local.name == "i18n"
  assert bare.specifiers == []
  assert bare.source.value == "./style.css"


def test_destructuring_declaration():
  decl = parse_module("const { t, locale: lang = 'en' } = useI18n()").body[0]
  assert isinstance(decl, VariableDeclaration)
  assert decl.kind == "const"
  pattern = decl.declarations[0].id
  assert isinstance(pattern, ObjectPattern)
  t_prop, locale_prop = pattern.properties
  assert t_prop.shorthand and t_prop.key.name == "t"
  assert locale_prop.key.name == "locale"
  assert isinstance(decl.declarations[0].init, CallExpression)


def test_default_export_object_with_setup():
  program = parse_module(
    """
    export default {
      name: 'Hello',
      props: ['msg'],
      async setup(props) {
        return {}
      },
      get label() { return 'x' },
    }
    """
  )
  export = program.body[0]
  assert isinstance(export, ExportDefaultDeclaration)
  obj = export.declaration
  assert isinstance(obj, ObjectExpression)
  name, props, setup, label = obj.properties
  assert isinstance(name, ObjectProperty) and isinstance(name.value, StringLiteral)
  assert isinstance(setup, ObjectMethod)
  assert setup.kind == "method" and setup.is_async
  assert setup.key.name == "setup"
  assert isinstance(setup.body.body[0], ReturnStatement)
  assert label.kind == "get"


def test_setup_as_property_function_is_not_a_method():
  obj = parse_module("export default { setup: function () {} }").body[0].declaration
  prop = obj.properties[0]
  assert isinstance(prop, ObjectProperty)


def test_export_named_forms():
  program = parse_module("export const a = 1\nexport { a as b }\nexport * from 'x'")
  assert isinstance(program.body[0], ExportNamedDeclaration)
  assert isinstance(program.body[0].declaration, VariableDeclaration)
  assert program.body[1].specifiers[0].exported.name == "b"
  assert program.body[2].source.value == "x"


def test_binary_precedence():
  expr = first_expression("a + b * c")
  assert isinstance(expr, BinaryExpression)
  assert expr.operator == "+"
  assert isinstance(expr.right, BinaryExpression)
  assert expr.right.operator == "*"


def test_logical_expression_kind():
  expr = first_expression("a ?? b || c")
  assert isinstance(expr, LogicalExpression)


def test_arrow_functions():
  program = parse_module("const f = (a, { b }) => a\nconst g = x => { return x }\nconst h = async () => 1")
  f = program.body[0].declarations[0].init
  g = program.body[1].declarations[0].init
  h = program.body[2].declarations[0].init
  assert isinstance(f, ArrowFunctionExpression) and len(f.params) == 2
  assert isinstance(g.params[0], Identifier)
  assert h.is_async


def test_parenthesized_expression_is_not_an_arrow():
  expr = first_expression("(a + b) * c")
  assert isinstance(expr, BinaryExpression)
  assert expr.operator == "*"


def test_optional_chaining():
  expr = first_expression("a?.b?.(c)")
  assert isinstance(expr, CallExpression) and expr.optional
  assert isinstance(expr.callee, MemberExpression) and expr.callee.optional


def test_for_of_loop():
  stmt = parse_module("for (const item of items) { use(item) }").body[0]
  assert isinstance(stmt, ForOfStatement)
  assert isinstance(stmt.left, VariableDeclaration)


def test_asi_on_newline():
  program = parse_module("const a = 1\nconst b = 2")
  assert len(program.body) == 2


def test_return_line_terminator():
  body = parse_module("function f() {\n  return\n  1\n}").body[0].body.body
  assert isinstance(body[0], ReturnStatement)
  assert body[0].argument is None
  assert len(body) == 2


def test_leading_comments_attach_to_statements():
  program = parse_module("// greeting\nconst a = 'hi'\n/* tail */")
  assert program.body[0].leading_comments == ["// greeting"]


def test_switch_cases_and_default():
  stmt = parse_module("switch (kind) {\n  case 'a':\n  case 'b':\n    go()\n    break\n  default:\n    stop()\n}").body[0]
  assert isinstance(stmt, SwitchStatement)
  assert [c.test.value if c.test else None for c in stmt.cases] == ["a", "b", None]
  assert stmt.cases[0].consequent == []
  assert isinstance(stmt.cases[1].consequent[1], BreakStatement)
  assert len(stmt.cases[2].consequent) == 1


def test_do_while_without_semicolon():
  do_while, nxt = parse_module("do { x++ } while (x < 3) next()").body
  assert isinstance(do_while, DoWhileStatement)
  assert isinstance(do_while.test, BinaryExpression)
  assert isinstance(nxt, ExpressionStatement)


def test_labeled_loop_with_labeled_continue():
  stmt = parse_module("outer: for (const k of ks) { continue outer }").body[0]
  assert isinstance(stmt, LabeledStatement)
  assert stmt.label.name == "outer"
  assert isinstance(stmt.body, ForOfStatement)
  cont = stmt.body.body.body[0]
  assert isinstance(cont, ContinueStatement)
  assert cont.label.name == "outer"


def test_break_label_must_share_the_line():
  body = parse_module("while (a) {\n  break\n  done()\n}").body[0].body.body
  assert body[0].label is None
  assert len(body) == 2


def test_same_line_comment_trails_its_statement():
  first, second = parse_module("const a = 'hi' // trailing\nconst b = 2").body
  assert first.trailing_comments == ["// trailing"]
  assert second.leading_comments == []


def test_comments_left_at_the_end_of_block_and_program():
  program = parse_module("function f() {\n  go()\n  // end of body\n}\n// tail comment")
  assert program.body[0].body.inner_comments == ["// end of body"]
  assert program.inner_comments == ["// tail comment"]


def test_object_member_comments():
  code = "const o = {\n  // explain a\n  a: 1, // after a\n  b: 2\n  // closing\n}"
  obj = parse_module(code).body[0].declarations[0].init
  a, b = obj.properties
  assert a.leading_comments == ["// explain a"]
  assert a.trailing_comments == ["// after a"]
  assert b.leading_comments == []
  assert obj.inner_comments == ["// closing"]


def test_comment_inside_an_expression_moves_before_its_statement():
  stmt = parse_module("// lead\ngo(a, /* why */ b)").body[0]
  assert stmt.leading_comments == ["// lead", "/* why */"]


def test_switch_comments():
  stmt = parse_module("switch (a) {\n  // first\n  case 1:\n    go()\n  // nothing follows\n}").body[0]
  assert stmt.cases[0].leading_comments == ["// first"]
  assert stmt.inner_comments == ["// nothing follows"]


def test_string_value_is_decoded():
  lit = first_expression(r"'it\'s'")
  assert lit.value == "it's"
  assert lit.raw == r"'it\'s'"


@pytest.mark.parametrize(
  "code",
  [
    "class A {}",
    "const r = /abc/",
    "function* gen() {}",
    "const a = (1",
    "import { a from 'b'",
  ],
)
def test_unsupported_or_invalid_syntax(code):
  with pytest.raises(ScriptSyntaxError):
    ScriptParser(code).parse()


def test_syntax_error_is_a_localization_error():
  with pytest.raises(LocalizationError) as excinfo:
    parse_module("const = 1")
  assert "line 1" in str(excinfo.value)
