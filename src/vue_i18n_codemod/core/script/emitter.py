"""
Script Emitter.

Serializes a script node tree back to JavaScript source. Output layout is
canonical: two-space indentation, one statement per line, semicolons, and
parentheses inserted only where operator precedence requires them. The raw
text of parsed string and numeric literals is reproduced verbatim, so quote
style survives a round trip. Comments kept by the parser are printed on their
own lines, except same-line trailing comments, which stay at the end of their
line.
"""

import re
from typing import Dict, List, Optional

from vue_i18n_codemod.core.script.nodes import (
  ArrowFunctionExpression,
  BlockStatement,
  CallExpression,
  Identifier,
  IfStatement,
  LogicalExpression,
  Node,
  NumericLiteral,
  ObjectExpression,
  ObjectMethod,
  ObjectProperty,
  Program,
  SpreadElement,
  Statement,
  SwitchCase,
  VariableDeclaration,
)
from vue_i18n_codemod.core.script.strings import encode_string_literal

# Binding strength used when deciding on parentheses (higher binds tighter).
PREC_SEQUENCE = 1
PREC_ASSIGNMENT = 2
PREC_CONDITIONAL = 3
PREC_UNARY = 15
PREC_POSTFIX = 16
PREC_CALL = 17
PREC_PRIMARY = 18

OPERATOR_PRECEDENCE: Dict[str, int] = {
  "??": 4,
  "||": 4,
  "&&": 5,
  "|": 6,
  "^": 7,
  "&": 8,
  "==": 9,
  "!=": 9,
  "===": 9,
  "!==": 9,
  "<": 10,
  ">": 10,
  "<=": 10,
  ">=": 10,
  "in": 10,
  "instanceof": 10,
  "<<": 11,
  ">>": 11,
  ">>>": 11,
  "+": 12,
  "-": 12,
  "*": 13,
  "/": 13,
  "%": 13,
  "**": 14,
}

_PRECEDENCE_BY_KIND: Dict[str, int] = {
  "SequenceExpression": PREC_SEQUENCE,
  "AssignmentExpression": PREC_ASSIGNMENT,
  "ArrowFunctionExpression": PREC_ASSIGNMENT,
  "ConditionalExpression": PREC_CONDITIONAL,
  "UnaryExpression": PREC_UNARY,
  "AwaitExpression": PREC_UNARY,
  "UpdateExpression": PREC_POSTFIX,
  "CallExpression": PREC_CALL,
  "NewExpression": PREC_CALL,
  "MemberExpression": PREC_CALL,
}

# Statement text starting with these would be read as a declaration or block.
_AMBIGUOUS_STATEMENT_START = re.compile(r"^(?:\{|function\b|async\s+function\b|class\b|let\s*\[)")


class ScriptEmitter:
  """
  Converts script nodes into source text.

  Attributes:
      indent (str): One indentation unit.
      quote (str): Quote used for string literals that have no raw text.
  """

  def __init__(self, indent: str = "  ", quote: str = "'"):
    self.indent = indent
    self.quote = quote

  def emit(self, node: Node) -> str:
    """
    Renders a node.

    Args:
        node (Node): A `Program`, a statement, or an expression.

    Returns:
        str: Source text. Programs end with a newline unless empty.

    Raises:
        TypeError: If the tree contains a node kind the emitter does not know.
    """
    if isinstance(node, Program):
      lines = [self._statement(stmt, 0) for stmt in node.body]
      lines.extend(self._comment_lines(node.inner_comments, 0))
      return "".join(line + "\n" for line in lines)
    if isinstance(node, Statement):
      return self._statement(node, 0)
    return self._expression(node, 0)

  def _dispatch(self, node: Node, level: int) -> str:
    handler = getattr(self, f"_emit_{type(node).__name__}", None)
    if handler is None:
      raise TypeError(f"Cannot emit node of kind {type(node).__name__}")
    return handler(node, level)

  def _pad(self, level: int) -> str:
    return self.indent * level

  # --- Statements ---

  def _comment_lines(self, comments: List[str], level: int) -> List[str]:
    pad = self._pad(level)
    return [pad + comment for comment in comments]

  @staticmethod
  def _with_trailing(text: str, comments: List[str]) -> str:
    if not comments:
      return text
    return text + " " + " ".join(comments)

  def _statement(self, node: Statement, level: int) -> str:
    lines = self._comment_lines(node.leading_comments, level)
    lines.append(self._with_trailing(self._pad(level) + self._dispatch(node, level), node.trailing_comments))
    return "\n".join(lines)

  def _body(self, node: Statement, level: int) -> str:
    """
    Renders the body of a control statement on the same line as its header.

    A single-statement body that carries comments is printed as a block so
    the comments keep their own lines.
    """
    if isinstance(node, BlockStatement):
      return self._block(node, level, node.leading_comments)
    if node.leading_comments or node.trailing_comments:
      return "{\n" + self._statement(node, level + 1) + "\n" + self._pad(level) + "}"
    return self._dispatch(node, level)

  def _block(self, node: BlockStatement, level: int, head_comments: List[str]) -> str:
    lines = self._comment_lines(head_comments, level + 1)
    lines.extend(self._statement(stmt, level + 1) for stmt in node.body)
    lines.extend(self._comment_lines(node.inner_comments, level + 1))
    if not lines:
      return "{}"
    return "{\n" + "\n".join(lines) + "\n" + self._pad(level) + "}"

  def _emit_BlockStatement(self, node, level):
    return self._block(node, level, [])

  def _emit_ImportDeclaration(self, node, level):
    source = self._expression(node.source, level)
    if not node.specifiers:
      return f"import {source};"
    parts: List[str] = []
    named: List[str] = []
    for spec in node.specifiers:
      kind = type(spec).__name__
      if kind == "ImportDefaultSpecifier":
        parts.append(spec.local.name)
      elif kind == "ImportNamespaceSpecifier":
        parts.append(f"* as {spec.local.name}")
      else:
        named.append(self._emit_ImportSpecifier(spec, level))
    if named:
      parts.append("{ " + ", ".join(named) + " }")
    return f"import {', '.join(parts)} from {source};"

  def _emit_ImportSpecifier(self, node, level):
    if node.imported.name == node.local.name:
      return node.imported.name
    return f"{node.imported.name} as {node.local.name}"

  def _emit_ExportDefaultDeclaration(self, node, level):
    decl = node.declaration
    if isinstance(decl, Statement):
      return "export default " + self._dispatch(decl, level)
    return f"export default {self._expression(decl, level, PREC_ASSIGNMENT)};"

  def _emit_ExportNamedDeclaration(self, node, level):
    if node.declaration is not None:
      return "export " + self._dispatch(node.declaration, level)
    specs = ", ".join(self._emit_ExportSpecifier(s, level) for s in node.specifiers)
    text = "export { " + specs + " }" if specs else "export {}"
    if node.source is not None:
      text += f" from {self._expression(node.source, level)}"
    return text + ";"

  def _emit_ExportSpecifier(self, node, level):
    if node.local.name == node.exported.name:
      return node.local.name
    return f"{node.local.name} as {node.exported.name}"

  def _emit_ExportAllDeclaration(self, node, level):
    exported = f" as {node.exported.name}" if node.exported is not None else ""
    return f"export *{exported} from {self._expression(node.source, level)};"

  def _variable_declaration(self, node: VariableDeclaration, level: int) -> str:
    decls = ", ".join(self._emit_VariableDeclarator(d, level) for d in node.declarations)
    return f"{node.kind} {decls}"

  def _emit_VariableDeclaration(self, node, level):
    return self._variable_declaration(node, level) + ";"

  def _emit_VariableDeclarator(self, node, level):
    target = self._expression(node.id, level)
    if node.init is None:
      return target
    return f"{target} = {self._expression(node.init, level, PREC_ASSIGNMENT)}"

  def _emit_FunctionDeclaration(self, node, level):
    prefix = "async function" if node.is_async else "function"
    name = f" {node.id.name}" if node.id is not None else ""
    return f"{prefix}{name}({self._params(node.params, level)}) {self._emit_BlockStatement(node.body, level)}"

  def _emit_ExpressionStatement(self, node, level):
    text = self._expression(node.expression, level)
    if _AMBIGUOUS_STATEMENT_START.match(text):
      text = f"({text})"
    return text + ";"

  def _emit_ReturnStatement(self, node, level):
    if node.argument is None:
      return "return;"
    return f"return {self._expression(node.argument, level)};"

  def _emit_ThrowStatement(self, node, level):
    return f"throw {self._expression(node.argument, level)};"

  def _emit_IfStatement(self, node, level):
    text = f"if ({self._expression(node.test, level)}) {self._body(node.consequent, level)}"
    if node.alternate is not None:
      alternate = node.alternate
      if isinstance(alternate, IfStatement) and not (alternate.leading_comments or alternate.trailing_comments):
        text += " else " + self._emit_IfStatement(alternate, level)
      else:
        text += " else " + self._body(node.alternate, level)
    return text

  def _for_head(self, node: Optional[Node], level: int) -> str:
    if node is None:
      return ""
    if isinstance(node, VariableDeclaration):
      return self._variable_declaration(node, level)
    return self._expression(node, level)

  def _emit_ForStatement(self, node, level):
    init = self._for_head(node.init, level)
    test = self._expression(node.test, level) if node.test is not None else ""
    update = self._expression(node.update, level) if node.update is not None else ""
    head = f"{init}; {test}; {update}".rstrip()
    return f"for ({head}) {self._body(node.body, level)}"

  def _emit_ForInStatement(self, node, level):
    left = self._for_head(node.left, level)
    return f"for ({left} in {self._expression(node.right, level)}) {self._body(node.body, level)}"

  def _emit_ForOfStatement(self, node, level):
    keyword = "for await" if node.is_await else "for"
    left = self._for_head(node.left, level)
    right = self._expression(node.right, level, PREC_ASSIGNMENT)
    return f"{keyword} ({left} of {right}) {self._body(node.body, level)}"

  def _emit_WhileStatement(self, node, level):
    return f"while ({self._expression(node.test, level)}) {self._body(node.body, level)}"

  def _emit_TryStatement(self, node, level):
    text = "try " + self._emit_BlockStatement(node.block, level)
    if node.handler is not None:
      text += " " + self._emit_CatchClause(node.handler, level)
    if node.finalizer is not None:
      text += " finally " + self._emit_BlockStatement(node.finalizer, level)
    return text

  def _emit_CatchClause(self, node, level):
    param = f"({self._expression(node.param, level)}) " if node.param is not None else ""
    return f"catch {param}{self._emit_BlockStatement(node.body, level)}"

  def _emit_DoWhileStatement(self, node, level):
    return f"do {self._body(node.body, level)} while ({self._expression(node.test, level)});"

  def _emit_SwitchStatement(self, node, level):
    lines = [self._switch_case(case, level + 1) for case in node.cases]
    lines.extend(self._comment_lines(node.inner_comments, level + 1))
    head = f"switch ({self._expression(node.discriminant, level)})"
    if not lines:
      return head + " {}"
    return head + " {\n" + "\n".join(lines) + "\n" + self._pad(level) + "}"

  def _switch_case(self, node: SwitchCase, level: int) -> str:
    lines = self._comment_lines(node.leading_comments, level)
    if node.test is None:
      lines.append(self._pad(level) + "default:")
    else:
      lines.append(f"{self._pad(level)}case {self._expression(node.test, level)}:")
    lines.extend(self._statement(stmt, level + 1) for stmt in node.consequent)
    return "\n".join(lines)

  def _emit_LabeledStatement(self, node, level):
    return f"{node.label.name}: {self._dispatch(node.body, level)}"

  def _emit_BreakStatement(self, node, level):
    return "break;" if node.label is None else f"break {node.label.name};"

  def _emit_ContinueStatement(self, node, level):
    return "continue;" if node.label is None else f"continue {node.label.name};"

  def _emit_EmptyStatement(self, node, level):
    return ";"

  # --- Expressions ---

  def _precedence(self, node: Node) -> int:
    kind = type(node).__name__
    if kind in ("BinaryExpression", "LogicalExpression"):
      return OPERATOR_PRECEDENCE[node.operator]
    return _PRECEDENCE_BY_KIND.get(kind, PREC_PRIMARY)

  def _expression(self, node: Node, level: int, min_prec: int = 0) -> str:
    text = self._dispatch(node, level)
    if self._precedence(node) < min_prec:
      return f"({text})"
    return text

  def _params(self, params: List[Node], level: int) -> str:
    return ", ".join(self._expression(p, level) for p in params)

  def _arguments(self, args: List[Node], level: int) -> str:
    return ", ".join(self._expression(a, level, PREC_ASSIGNMENT) for a in args)

  def _emit_Identifier(self, node, level):
    return node.name

  def _emit_StringLiteral(self, node, level):
    if node.raw is not None:
      return node.raw
    return encode_string_literal(node.value, self.quote)

  def _emit_NumericLiteral(self, node, level):
    return node.raw

  def _emit_BooleanLiteral(self, node, level):
    return "true" if node.value else "false"

  def _emit_NullLiteral(self, node, level):
    return "null"

  def _emit_TemplateLiteral(self, node, level):
    return node.raw

  def _emit_ThisExpression(self, node, level):
    return "this"

  def _emit_SpreadElement(self, node, level):
    return "..." + self._expression(node.argument, level, PREC_ASSIGNMENT)

  def _emit_ArrayExpression(self, node, level):
    items = ["" if e is None else self._expression(e, level, PREC_ASSIGNMENT) for e in node.elements]
    # A trailing hole needs its own comma to survive.
    if node.elements and node.elements[-1] is None:
      items.append("")
    return "[" + ", ".join(items) + "]"

  def _property_key(self, key: Node, computed: bool, level: int) -> str:
    if computed:
      return f"[{self._expression(key, level, PREC_ASSIGNMENT)}]"
    return self._dispatch(key, level)

  def _emit_ObjectExpression(self, node, level):
    lines: List[str] = []
    last = len(node.properties) - 1
    for idx, member in enumerate(node.properties):
      lines.extend(self._comment_lines(member.leading_comments, level + 1))
      text = self._pad(level + 1) + self._object_member(member, level + 1)
      if idx < last:
        text += ","
      lines.append(self._with_trailing(text, member.trailing_comments))
    lines.extend(self._comment_lines(node.inner_comments, level + 1))
    if not lines:
      return "{}"
    return "{\n" + "\n".join(lines) + "\n" + self._pad(level) + "}"

  def _object_member(self, node: Node, level: int) -> str:
    if isinstance(node, ObjectProperty):
      return self._emit_ObjectProperty(node, level)
    if isinstance(node, ObjectMethod):
      return self._emit_ObjectMethod(node, level)
    if isinstance(node, SpreadElement):
      return self._emit_SpreadElement(node, level)
    raise TypeError(f"Cannot emit object member of kind {type(node).__name__}")

  def _emit_ObjectProperty(self, node, level):
    key = self._property_key(node.key, node.computed, level)
    if node.shorthand:
      value = node.value
      if isinstance(value, Identifier):
        return value.name
      # `{ key = default }` in a pattern
      return self._expression(value, level)
    return f"{key}: {self._expression(node.value, level, PREC_ASSIGNMENT)}"

  def _emit_ObjectMethod(self, node, level):
    prefix = ""
    if node.is_async:
      prefix = "async "
    elif node.kind in ("get", "set"):
      prefix = node.kind + " "
    key = self._property_key(node.key, node.computed, level)
    return f"{prefix}{key}({self._params(node.params, level)}) {self._emit_BlockStatement(node.body, level)}"

  def _emit_CallExpression(self, node, level):
    callee = self._expression(node.callee, level, PREC_CALL)
    opt = "?." if node.optional else ""
    return f"{callee}{opt}({self._arguments(node.arguments, level)})"

  def _emit_NewExpression(self, node, level):
    if isinstance(node.callee, CallExpression):
      callee = f"({self._dispatch(node.callee, level)})"
    else:
      callee = self._expression(node.callee, level, PREC_CALL)
    return f"new {callee}({self._arguments(node.arguments, level)})"

  def _emit_MemberExpression(self, node, level):
    obj = self._expression(node.object, level, PREC_CALL)
    if isinstance(node.object, NumericLiteral) and obj.isdigit():
      obj = f"({obj})"
    if node.computed:
      opt = "?." if node.optional else ""
      return f"{obj}{opt}[{self._expression(node.property, level)}]"
    dot = "?." if node.optional else "."
    return f"{obj}{dot}{self._dispatch(node.property, level)}"

  def _emit_ArrowFunctionExpression(self, node, level):
    prefix = "async " if node.is_async else ""
    head = f"{prefix}({self._params(node.params, level)}) =>"
    if isinstance(node.body, BlockStatement):
      return f"{head} {self._emit_BlockStatement(node.body, level)}"
    body = self._expression(node.body, level, PREC_ASSIGNMENT)
    if isinstance(node.body, ObjectExpression):
      body = f"({body})"
    return f"{head} {body}"

  def _emit_FunctionExpression(self, node, level):
    prefix = "async function" if node.is_async else "function"
    name = f" {node.id.name}" if node.id is not None else " "
    return f"{prefix}{name}({self._params(node.params, level)}) {self._emit_BlockStatement(node.body, level)}"

  def _emit_UnaryExpression(self, node, level):
    argument = self._expression(node.argument, level, PREC_UNARY)
    if node.operator.isalpha():
      return f"{node.operator} {argument}"
    # Keep `- -x` and `+ +x` from fusing into `--x` / `++x`.
    if node.operator in "+-" and argument.startswith(node.operator):
      return f"{node.operator} {argument}"
    return node.operator + argument

  def _emit_UpdateExpression(self, node, level):
    argument = self._expression(node.argument, level, PREC_POSTFIX)
    if node.prefix:
      return node.operator + argument
    return argument + node.operator

  def _emit_AwaitExpression(self, node, level):
    return "await " + self._expression(node.argument, level, PREC_UNARY)

  def _binary(self, node: Node, level: int) -> str:
    prec = OPERATOR_PRECEDENCE[node.operator]
    if node.operator == "**":
      # Right-associative, and a unary operand on the left is a syntax error.
      left_prec, right_prec = PREC_POSTFIX, prec
    else:
      left_prec, right_prec = prec, prec + 1
    if self._mixes_nullish(node, node.left):
      left_prec = PREC_PRIMARY
    if self._mixes_nullish(node, node.right):
      right_prec = PREC_PRIMARY
    left = self._expression(node.left, level, left_prec)
    right = self._expression(node.right, level, right_prec)
    return f"{left} {node.operator} {right}"

  @staticmethod
  def _mixes_nullish(parent: Node, child: Node) -> bool:
    """`??` cannot be mixed with `||`/`&&` without parentheses."""
    if not (isinstance(parent, LogicalExpression) and isinstance(child, LogicalExpression)):
      return False
    return (parent.operator == "??") != (child.operator == "??")

  def _emit_BinaryExpression(self, node, level):
    return self._binary(node, level)

  def _emit_LogicalExpression(self, node, level):
    return self._binary(node, level)

  def _emit_AssignmentExpression(self, node, level):
    left = self._expression(node.left, level)
    return f"{left} {node.operator} {self._expression(node.right, level, PREC_ASSIGNMENT)}"

  def _emit_ConditionalExpression(self, node, level):
    test = self._expression(node.test, level, PREC_CONDITIONAL + 1)
    consequent = self._expression(node.consequent, level, PREC_ASSIGNMENT)
    alternate = self._expression(node.alternate, level, PREC_ASSIGNMENT)
    return f"{test} ? {consequent} : {alternate}"

  def _emit_SequenceExpression(self, node, level):
    return ", ".join(self._expression(e, level, PREC_ASSIGNMENT) for e in node.expressions)

  # --- Patterns ---

  def _emit_ObjectPattern(self, node, level):
    if not node.properties:
      return "{}"
    return "{ " + ", ".join(self._expression(p, level) for p in node.properties) + " }"

  def _emit_ArrayPattern(self, node, level):
    items = ["" if e is None else self._expression(e, level) for e in node.elements]
    if node.elements and node.elements[-1] is None:
      items.append("")
    return "[" + ", ".join(items) + "]"

  def _emit_AssignmentPattern(self, node, level):
    return f"{self._expression(node.left, level)} = {self._expression(node.right, level, PREC_ASSIGNMENT)}"

  def _emit_RestElement(self, node, level):
    return "..." + self._expression(node.argument, level)


def emit_module(program: Program, quote: str = "'") -> str:
  """
  Convenience wrapper around `ScriptEmitter`.

  Args:
      program (Program): The tree to print.
      quote (str): Quote for synthesized string literals.

  Returns:
      str: Source text.
  """
  return ScriptEmitter(quote=quote).emit(program)
