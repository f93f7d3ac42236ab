"""
Script Syntax Tree Nodes.

This module defines the closed set of node kinds used to represent a component
script block. Names and field layouts follow the ESTree/Babel conventions so the
tree reads like the one produced by JavaScript tooling:

- Statements (``ImportDeclaration``, ``VariableDeclaration`` ...) carry the
  comments that preceded them in ``leading_comments`` and the comments that
  follow them on the same line in ``trailing_comments``. Object literal
  members carry the same two slots.
- Blocks, object literals, switch bodies and the program keep comments that
  follow their last member in ``inner_comments``.
- Expressions and binding patterns are plain dataclasses whose fields are
  declared in source order, which makes a generic field walk a document-order
  traversal (see ``visitor.py``).

Nodes are mutable: passes rewrite a tree by assigning into child slots.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass
class Node:
  """Base class for all script nodes."""


def _comment_slot():
  return field(default_factory=list, init=False, repr=False, compare=False)


@dataclass
class Statement(Node):
  """Base class for statements and module declarations."""

  leading_comments: List[str] = _comment_slot()
  trailing_comments: List[str] = _comment_slot()


@dataclass
class Expression(Node):
  """Base class for expressions."""


@dataclass
class Pattern(Node):
  """Base class for destructuring binding targets."""


# --- Leaves ---


@dataclass
class Identifier(Expression):
  name: str


@dataclass
class StringLiteral(Expression):
  """
  A quoted string.

  Attributes:
      value (str): The decoded string value.
      raw (Optional[str]): Source text including quotes; None for synthesized nodes.
  """

  value: str
  raw: Optional[str] = None


@dataclass
class NumericLiteral(Expression):
  raw: str


@dataclass
class BooleanLiteral(Expression):
  value: bool


@dataclass
class NullLiteral(Expression):
  pass


@dataclass
class TemplateLiteral(Expression):
  """A template string, kept verbatim (interpolations are not parsed)."""

  raw: str


@dataclass
class ThisExpression(Expression):
  pass


# --- Compound Expressions ---


@dataclass
class SpreadElement(Node):
  argument: Expression
  leading_comments: List[str] = _comment_slot()
  trailing_comments: List[str] = _comment_slot()


@dataclass
class ArrayExpression(Expression):
  elements: List[Optional[Node]] = field(default_factory=list)


@dataclass
class ObjectProperty(Node):
  """
  A ``key: value`` member of an object literal or object pattern.

  Attributes:
      key (Expression): Identifier, string/numeric literal, or any expression when computed.
      value (Node): Expression (object literal) or binding target (object pattern).
      computed (bool): True for ``[key]: value``.
      shorthand (bool): True for ``{ key }`` and ``{ key = default }``.
  """

  key: Expression
  value: Node
  computed: bool = False
  shorthand: bool = False
  leading_comments: List[str] = _comment_slot()
  trailing_comments: List[str] = _comment_slot()


@dataclass
class ObjectMethod(Node):
  """
  A method member of an object literal: ``setup() {}``, ``get x() {}``.

  Attributes:
      kind (str): ``"method"``, ``"get"`` or ``"set"``.
  """

  kind: str
  key: Expression
  params: List[Node]
  body: "BlockStatement"
  computed: bool = False
  is_async: bool = False
  leading_comments: List[str] = _comment_slot()
  trailing_comments: List[str] = _comment_slot()


@dataclass
class ObjectExpression(Expression):
  properties: List[Node] = field(default_factory=list)
  inner_comments: List[str] = _comment_slot()


@dataclass
class CallExpression(Expression):
  callee: Expression
  arguments: List[Node] = field(default_factory=list)
  optional: bool = False


@dataclass
class NewExpression(Expression):
  callee: Expression
  arguments: List[Node] = field(default_factory=list)


@dataclass
class MemberExpression(Expression):
  object: Expression
  property: Expression
  computed: bool = False
  optional: bool = False


@dataclass
class ArrowFunctionExpression(Expression):
  params: List[Node]
  body: Node
  is_async: bool = False


@dataclass
class FunctionExpression(Expression):
  id: Optional[Identifier]
  params: List[Node]
  body: "BlockStatement"
  is_async: bool = False


@dataclass
class UnaryExpression(Expression):
  operator: str
  argument: Expression


@dataclass
class UpdateExpression(Expression):
  operator: str
  argument: Expression
  prefix: bool = True


@dataclass
class BinaryExpression(Expression):
  operator: str
  left: Expression
  right: Expression


@dataclass
class LogicalExpression(Expression):
  operator: str
  left: Expression
  right: Expression


@dataclass
class AssignmentExpression(Expression):
  operator: str
  left: Node
  right: Expression


@dataclass
class ConditionalExpression(Expression):
  test: Expression
  consequent: Expression
  alternate: Expression


@dataclass
class AwaitExpression(Expression):
  argument: Expression


@dataclass
class SequenceExpression(Expression):
  expressions: List[Expression] = field(default_factory=list)


# --- Patterns ---


@dataclass
class ObjectPattern(Pattern):
  properties: List[Node] = field(default_factory=list)


@dataclass
class ArrayPattern(Pattern):
  elements: List[Optional[Node]] = field(default_factory=list)


@dataclass
class AssignmentPattern(Pattern):
  left: Node
  right: Expression


@dataclass
class RestElement(Pattern):
  argument: Node


# --- Module Declarations ---


@dataclass
class ImportSpecifier(Node):
  """``imported as local`` inside the braces of an import."""

  imported: Identifier
  local: Identifier


@dataclass
class ImportDefaultSpecifier(Node):
  local: Identifier


@dataclass
class ImportNamespaceSpecifier(Node):
  local: Identifier


ImportSpecifierLike = Union[ImportSpecifier, ImportDefaultSpecifier, ImportNamespaceSpecifier]


@dataclass
class ImportDeclaration(Statement):
  specifiers: List[ImportSpecifierLike]
  source: StringLiteral


@dataclass
class ExportSpecifier(Node):
  local: Identifier
  exported: Identifier


@dataclass
class ExportNamedDeclaration(Statement):
  declaration: Optional[Statement] = None
  specifiers: List[ExportSpecifier] = field(default_factory=list)
  source: Optional[StringLiteral] = None


@dataclass
class ExportAllDeclaration(Statement):
  source: StringLiteral
  exported: Optional[Identifier] = None


@dataclass
class ExportDefaultDeclaration(Statement):
  declaration: Node


# --- Statements ---


@dataclass
class VariableDeclarator(Node):
  id: Node
  init: Optional[Expression] = None


@dataclass
class VariableDeclaration(Statement):
  kind: str
  declarations: List[VariableDeclarator]


@dataclass
class BlockStatement(Statement):
  body: List[Statement] = field(default_factory=list)
  inner_comments: List[str] = _comment_slot()


@dataclass
class FunctionDeclaration(Statement):
  id: Optional[Identifier]
  params: List[Node]
  body: BlockStatement
  is_async: bool = False


@dataclass
class ExpressionStatement(Statement):
  expression: Expression


@dataclass
class ReturnStatement(Statement):
  argument: Optional[Expression] = None


@dataclass
class ThrowStatement(Statement):
  argument: Expression


@dataclass
class IfStatement(Statement):
  test: Expression
  consequent: Statement
  alternate: Optional[Statement] = None


@dataclass
class ForStatement(Statement):
  init: Optional[Node]
  test: Optional[Expression]
  update: Optional[Expression]
  body: Statement


@dataclass
class ForInStatement(Statement):
  left: Node
  right: Expression
  body: Statement


@dataclass
class ForOfStatement(Statement):
  left: Node
  right: Expression
  body: Statement
  is_await: bool = False


@dataclass
class WhileStatement(Statement):
  test: Expression
  body: Statement


@dataclass
class DoWhileStatement(Statement):
  body: Statement
  test: Expression


@dataclass
class SwitchCase(Node):
  """
  One ``case test:`` or ``default:`` clause.

  Attributes:
      test (Optional[Expression]): None for the ``default`` clause.
      consequent (List[Statement]): Statements up to the next clause.
  """

  test: Optional[Expression]
  consequent: List[Statement] = field(default_factory=list)
  leading_comments: List[str] = _comment_slot()


@dataclass
class SwitchStatement(Statement):
  discriminant: Expression
  cases: List[SwitchCase] = field(default_factory=list)
  inner_comments: List[str] = _comment_slot()


@dataclass
class LabeledStatement(Statement):
  label: Identifier
  body: Statement


@dataclass
class CatchClause(Node):
  param: Optional[Node]
  body: BlockStatement


@dataclass
class TryStatement(Statement):
  block: BlockStatement
  handler: Optional[CatchClause] = None
  finalizer: Optional[BlockStatement] = None


@dataclass
class BreakStatement(Statement):
  label: Optional[Identifier] = None


@dataclass
class ContinueStatement(Statement):
  label: Optional[Identifier] = None


@dataclass
class EmptyStatement(Statement):
  pass


@dataclass
class Program(Node):
  """Root of a script block: the ordered top-level statements."""

  body: List[Statement] = field(default_factory=list)
  inner_comments: List[str] = _comment_slot()
