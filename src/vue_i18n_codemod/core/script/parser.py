"""
Script Recursive Descent Parser.

This module parses the text of a component script block into the node model
defined in `nodes.py`. It covers the ES module subset found in component
scripts: imports and exports, ``const``/``let``/``var`` with destructuring,
function declarations and expressions, arrow functions, object literals with
methods and accessors, the usual control flow statements (including
``switch``, ``do ... while`` and labels), and the complete operator set
including optional chaining.

Comments are kept on the tree:

- A comment on its own line goes to the statement or object member that
  follows it (``leading_comments``), or to the enclosing block, object,
  switch or program when nothing follows (``inner_comments``).
- A comment after a statement or member on the same line stays with it
  (``trailing_comments``).
- A comment inside any other expression is moved in front of its statement.

Regex literals, classes, generators and TypeScript syntax are rejected with
`ScriptSyntaxError`.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Tuple

from vue_i18n_codemod.core.script.nodes import (
  ArrayExpression,
  ArrayPattern,
  ArrowFunctionExpression,
  AssignmentExpression,
  AssignmentPattern,
  AwaitExpression,
  BinaryExpression,
  BlockStatement,
  BooleanLiteral,
  BreakStatement,
  CallExpression,
  CatchClause,
  ConditionalExpression,
  ContinueStatement,
  DoWhileStatement,
  EmptyStatement,
  ExportAllDeclaration,
  ExportDefaultDeclaration,
  ExportNamedDeclaration,
  ExportSpecifier,
  Expression,
  ExpressionStatement,
  ForInStatement,
  ForOfStatement,
  ForStatement,
  FunctionDeclaration,
  FunctionExpression,
  Identifier,
  IfStatement,
  ImportDeclaration,
  ImportDefaultSpecifier,
  ImportNamespaceSpecifier,
  ImportSpecifier,
  LabeledStatement,
  LogicalExpression,
  MemberExpression,
  NewExpression,
  Node,
  NullLiteral,
  NumericLiteral,
  ObjectExpression,
  ObjectMethod,
  ObjectPattern,
  ObjectProperty,
  Program,
  RestElement,
  ReturnStatement,
  SequenceExpression,
  SpreadElement,
  Statement,
  StringLiteral,
  SwitchCase,
  SwitchStatement,
  TemplateLiteral,
  ThisExpression,
  ThrowStatement,
  TryStatement,
  UnaryExpression,
  UpdateExpression,
  VariableDeclaration,
  VariableDeclarator,
  WhileStatement,
)
from vue_i18n_codemod.core.script.strings import decode_string_literal
from vue_i18n_codemod.core.script.tokens import RESERVED_WORDS, Token, TokenKind, Tokenizer
from vue_i18n_codemod.errors import ScriptSyntaxError

ASSIGNMENT_OPERATORS = frozenset(
  {"=", "+=", "-=", "*=", "/=", "%=", "**=", "<<=", ">>=", ">>>=", "&=", "|=", "^=", "&&=", "||=", "??="}
)

LOGICAL_OPERATORS = frozenset({"||", "&&", "??"})

BINARY_PRECEDENCE: Dict[str, int] = {
  "??": 1,
  "||": 2,
  "&&": 3,
  "|": 4,
  "^": 5,
  "&": 6,
  "==": 7,
  "!=": 7,
  "===": 7,
  "!==": 7,
  "<": 8,
  ">": 8,
  "<=": 8,
  ">=": 8,
  "in": 8,
  "instanceof": 8,
  "<<": 9,
  ">>": 9,
  ">>>": 9,
  "+": 10,
  "-": 10,
  "*": 11,
  "/": 11,
  "%": 11,
  "**": 12,
}

UNARY_OPERATORS = frozenset({"!", "-", "+", "~"})
UNARY_KEYWORDS = frozenset({"typeof", "void", "delete"})


class ScriptParser:
  """
  Parses one script block into a `Program`.

  Usage::

      program = ScriptParser("const a = ref('x')").parse()
  """

  def __init__(self, text: str):
    self.tokens: List[Token] = []
    # Comment tokens keyed by the index of the token they precede.
    self._comments: Dict[int, List[Token]] = {}
    self._allow_in = True

    pending: List[Token] = []
    pending_newline = False
    for tok in Tokenizer(text).tokenize():
      if tok.kind == TokenKind.COMMENT:
        pending.append(tok)
        pending_newline = pending_newline or tok.newline_before
        continue
      if pending:
        self._comments[len(self.tokens)] = pending
        tok.newline_before = tok.newline_before or pending_newline or pending[-1].text.startswith("//")
        pending = []
        pending_newline = False
      self.tokens.append(tok)
    self.pos = 0

  # --- Token helpers ---

  def peek(self, offset: int = 0) -> Token:
    idx = self.pos + offset
    if idx >= len(self.tokens):
      return self.tokens[-1]
    return self.tokens[idx]

  def consume(self) -> Token:
    token = self.peek()
    if token.kind != TokenKind.EOF:
      self.pos += 1
    return token

  def at(self, text: str, offset: int = 0) -> bool:
    tk = self.peek(offset)
    return tk.kind in (TokenKind.PUNCTUATOR, TokenKind.IDENTIFIER) and tk.text == text

  def eat(self, text: str) -> bool:
    if self.at(text):
      self.consume()
      return True
    return False

  def expect(self, text: str) -> Token:
    if not self.at(text):
      self._fail(f"Expected '{text}'")
    return self.consume()

  def at_eof(self) -> bool:
    return self.peek().kind == TokenKind.EOF

  def _fail(self, message: str, token: Optional[Token] = None) -> None:
    tk = token or self.peek()
    found = "end of input" if tk.kind == TokenKind.EOF else f"'{tk.text}'"
    raise ScriptSyntaxError(f"{message}, got {found}", tk.line, tk.col)

  def _consume_semicolon(self) -> None:
    if self.eat(";"):
      return
    tk = self.peek()
    if tk.kind == TokenKind.EOF or self.at("}") or tk.newline_before:
      return
    self._fail("Expected ';'")

  @contextmanager
  def _in_operator(self, allowed: bool) -> Iterator[None]:
    saved = self._allow_in
    self._allow_in = allowed
    try:
      yield
    finally:
      self._allow_in = saved

  # --- Comments ---

  def _take_comments(self) -> List[str]:
    """Pops every comment in front of the current token."""
    return [c.text for c in self._comments.pop(self.pos, [])]

  def _take_trailing_comments(self) -> List[str]:
    """Pops the comments in front of the current token that share a line with the previous token."""
    group = self._comments.get(self.pos)
    if not group or self.pos == 0:
      return []
    count = 0
    while count < len(group) and not group[count].newline_before:
      count += 1
    if count == len(group):
      del self._comments[self.pos]
    else:
      self._comments[self.pos] = group[count:]
    return [c.text for c in group[:count]]

  def _take_comments_between(self, start: int, end: int) -> List[str]:
    found: List[str] = []
    for idx in sorted(k for k in self._comments if start < k < end):
      found.extend(c.text for c in self._comments.pop(idx))
    return found

  # --- Program & Statements ---

  def parse(self) -> Program:
    """
    Parses the whole token stream.

    Returns:
        Program: The root node.

    Raises:
        ScriptSyntaxError: If the source is outside the supported grammar.
    """
    body = []
    while not self.at_eof():
      body.append(self.parse_statement_list_item())
    program = Program(body=body)
    program.inner_comments = self._take_comments()
    return program

  def parse_statement_list_item(self) -> Statement:
    """Parses a statement of a program, block or case body, with its same-line comments."""
    stmt = self.parse_statement()
    stmt.trailing_comments = self._take_trailing_comments()
    return stmt

  def parse_statement(self) -> Statement:
    start = self.pos
    comments = self._take_comments()
    stmt = self._parse_statement_inner()
    stmt.leading_comments = comments + stmt.leading_comments + self._take_comments_between(start, self.pos)
    return stmt

  def _parse_statement_inner(self) -> Statement:
    tok = self.peek()
    if tok.kind == TokenKind.IDENTIFIER:
      word = tok.text
      if word not in RESERVED_WORDS and self.at(":", 1):
        return self.parse_labeled()
      if word == "import" and not (self.at("(", 1) or self.at(".", 1)):
        return self.parse_import()
      if word == "export":
        return self.parse_export()
      if word in ("const", "let", "var"):
        decl = self.parse_variable_declaration()
        self._consume_semicolon()
        return decl
      if word == "function" or self._at_async_function():
        return self.parse_function_declaration()
      if word == "return":
        self.consume()
        argument = None
        nxt = self.peek()
        if not (nxt.kind == TokenKind.EOF or self.at(";") or self.at("}") or nxt.newline_before):
          argument = self.parse_expression()
        self._consume_semicolon()
        return ReturnStatement(argument=argument)
      if word == "if":
        return self.parse_if()
      if word == "for":
        return self.parse_for()
      if word == "while":
        self.consume()
        self.expect("(")
        test = self.parse_expression()
        self.expect(")")
        return WhileStatement(test=test, body=self.parse_statement())
      if word == "do":
        return self.parse_do_while()
      if word == "switch":
        return self.parse_switch()
      if word == "throw":
        self.consume()
        argument = self.parse_expression()
        self._consume_semicolon()
        return ThrowStatement(argument=argument)
      if word == "try":
        return self.parse_try()
      if word in ("break", "continue"):
        self.consume()
        label = None
        nxt = self.peek()
        if nxt.kind == TokenKind.IDENTIFIER and nxt.text not in RESERVED_WORDS and not nxt.newline_before:
          label = self.parse_identifier()
        self._consume_semicolon()
        return BreakStatement(label=label) if word == "break" else ContinueStatement(label=label)
      if word == "class":
        self._fail("Class declarations are not supported")

    if self.at("{"):
      return self.parse_block()
    if self.eat(";"):
      return EmptyStatement()

    expr = self.parse_expression()
    self._consume_semicolon()
    return ExpressionStatement(expression=expr)

  def parse_block(self) -> BlockStatement:
    self.expect("{")
    body = []
    with self._in_operator(True):
      while not self.at("}"):
        if self.at_eof():
          self._fail("Expected '}'")
        body.append(self.parse_statement_list_item())
    block = BlockStatement(body=body)
    block.inner_comments = self._take_comments()
    self.expect("}")
    return block

  def parse_labeled(self) -> LabeledStatement:
    label = self.parse_identifier()
    self.expect(":")
    body = self.parse_statement()
    stmt = LabeledStatement(label=label, body=body)
    # The label prints directly in front of its body.
    stmt.leading_comments, body.leading_comments = body.leading_comments, []
    return stmt

  def parse_do_while(self) -> DoWhileStatement:
    self.expect("do")
    body = self.parse_statement()
    self.expect("while")
    self.expect("(")
    test = self.parse_expression()
    self.expect(")")
    # A semicolon is inserted after `do ... while (...)` even without a line break.
    self.eat(";")
    return DoWhileStatement(body=body, test=test)

  def parse_switch(self) -> SwitchStatement:
    """
    Parses ``switch (x) { case a: ... default: ... }``.

    Comments in front of a ``case`` belong to that clause; comments after the
    last clause are kept on the statement.
    """
    self.expect("switch")
    self.expect("(")
    discriminant = self.parse_expression()
    self.expect(")")
    self.expect("{")
    cases: List[SwitchCase] = []
    with self._in_operator(True):
      while not self.at("}"):
        if self.at_eof():
          self._fail("Expected '}'")
        comments = self._take_comments()
        if self.eat("case"):
          test: Optional[Expression] = self.parse_expression()
        elif self.eat("default"):
          test = None
        else:
          self._fail("Expected 'case' or 'default'")
        self.expect(":")
        clause = SwitchCase(test=test)
        clause.leading_comments = comments
        while not (self.at("case") or self.at("default") or self.at("}")):
          if self.at_eof():
            self._fail("Expected '}'")
          clause.consequent.append(self.parse_statement_list_item())
        cases.append(clause)
    stmt = SwitchStatement(discriminant=discriminant, cases=cases)
    stmt.inner_comments = self._take_comments()
    self.expect("}")
    return stmt

  def parse_import(self) -> ImportDeclaration:
    self.expect("import")
    if self.peek().kind == TokenKind.STRING:
      source = self.parse_string()
      self._consume_semicolon()
      return ImportDeclaration(specifiers=[], source=source)

    specifiers = []
    if self.peek().kind == TokenKind.IDENTIFIER:
      specifiers.append(ImportDefaultSpecifier(local=self.parse_identifier()))
      if not self.eat(","):
        return self._finish_import(specifiers)

    if self.eat("*"):
      self.expect("as")
      specifiers.append(ImportNamespaceSpecifier(local=self.parse_identifier()))
    elif self.eat("{"):
      while not self.at("}"):
        imported = self.parse_identifier_name()
        local = self.parse_identifier() if self.eat("as") else Identifier(imported.name)
        specifiers.append(ImportSpecifier(imported=imported, local=local))
        if not self.eat(","):
          break
      self.expect("}")
    else:
      self._fail("Expected import specifiers")
    return self._finish_import(specifiers)

  def _finish_import(self, specifiers: List[Node]) -> ImportDeclaration:
    self.expect("from")
    source = self.parse_string()
    self._consume_semicolon()
    return ImportDeclaration(specifiers=specifiers, source=source)

  def parse_export(self) -> Statement:
    self.expect("export")
    if self.eat("default"):
      if self.at("function") or self._at_async_function():
        return ExportDefaultDeclaration(declaration=self.parse_function_declaration(allow_anonymous=True))
      expr = self.parse_assignment()
      self._consume_semicolon()
      return ExportDefaultDeclaration(declaration=expr)

    if self.eat("*"):
      exported = self.parse_identifier_name() if self.eat("as") else None
      self.expect("from")
      source = self.parse_string()
      self._consume_semicolon()
      return ExportAllDeclaration(source=source, exported=exported)

    if self.eat("{"):
      specifiers = []
      while not self.at("}"):
        local = self.parse_identifier_name()
        exported = self.parse_identifier_name() if self.eat("as") else Identifier(local.name)
        specifiers.append(ExportSpecifier(local=local, exported=exported))
        if not self.eat(","):
          break
      self.expect("}")
      source = self.parse_string() if self.eat("from") else None
      self._consume_semicolon()
      return ExportNamedDeclaration(specifiers=specifiers, source=source)

    if self.at("const") or self.at("let") or self.at("var"):
      decl = self.parse_variable_declaration()
      self._consume_semicolon()
      return ExportNamedDeclaration(declaration=decl)
    if self.at("function") or self._at_async_function():
      return ExportNamedDeclaration(declaration=self.parse_function_declaration())
    self._fail("Unsupported export form")

  def parse_variable_declaration(self) -> VariableDeclaration:
    kind = self.consume().text
    declarations = []
    while True:
      target = self.parse_binding_target()
      init = self.parse_assignment() if self.eat("=") else None
      declarations.append(VariableDeclarator(id=target, init=init))
      if not self.eat(","):
        break
    return VariableDeclaration(kind=kind, declarations=declarations)

  def parse_function_declaration(self, allow_anonymous: bool = False) -> FunctionDeclaration:
    is_async = self.eat("async")
    self.expect("function")
    if self.at("*"):
      self._fail("Generator functions are not supported")
    name = None
    if not self.at("("):
      name = self.parse_identifier()
    elif not allow_anonymous:
      self._fail("Expected function name")
    params = self.parse_params()
    body = self.parse_block()
    return FunctionDeclaration(id=name, params=params, body=body, is_async=is_async)

  def parse_if(self) -> IfStatement:
    self.expect("if")
    self.expect("(")
    test = self.parse_expression()
    self.expect(")")
    consequent = self.parse_statement()
    alternate = self.parse_statement() if self.eat("else") else None
    return IfStatement(test=test, consequent=consequent, alternate=alternate)

  def parse_for(self) -> Statement:
    self.expect("for")
    is_await = self.eat("await")
    self.expect("(")

    init: Optional[Node] = None
    if not self.at(";"):
      with self._in_operator(False):
        if self.at("const") or self.at("let") or self.at("var"):
          init = self.parse_variable_declaration()
        else:
          init = self.parse_expression()

      if self.eat("of"):
        right = self.parse_assignment()
        self.expect(")")
        return ForOfStatement(left=init, right=right, body=self.parse_statement(), is_await=is_await)
      if self.eat("in"):
        right = self.parse_expression()
        self.expect(")")
        return ForInStatement(left=init, right=right, body=self.parse_statement())

    self.expect(";")
    test = None if self.at(";") else self.parse_expression()
    self.expect(";")
    update = None if self.at(")") else self.parse_expression()
    self.expect(")")
    return ForStatement(init=init, test=test, update=update, body=self.parse_statement())

  def parse_try(self) -> TryStatement:
    self.expect("try")
    block = self.parse_block()
    handler = None
    finalizer = None
    if self.eat("catch"):
      param = None
      if self.eat("("):
        param = self.parse_binding_target()
        self.expect(")")
      handler = CatchClause(param=param, body=self.parse_block())
    if self.eat("finally"):
      finalizer = self.parse_block()
    if handler is None and finalizer is None:
      self._fail("Expected 'catch' or 'finally'")
    return TryStatement(block=block, handler=handler, finalizer=finalizer)

  # --- Binding Patterns ---

  def parse_binding_target(self) -> Node:
    if self.at("{"):
      return self.parse_object_pattern()
    if self.at("["):
      return self.parse_array_pattern()
    return self.parse_identifier()

  def parse_binding_element(self) -> Node:
    target = self.parse_binding_target()
    if self.eat("="):
      return AssignmentPattern(left=target, right=self.parse_assignment())
    return target

  def parse_object_pattern(self) -> ObjectPattern:
    self.expect("{")
    properties: List[Node] = []
    while not self.at("}"):
      if self.eat("..."):
        properties.append(RestElement(argument=self.parse_binding_target()))
      else:
        key, computed = self.parse_property_name()
        if self.eat(":"):
          properties.append(ObjectProperty(key=key, value=self.parse_binding_element(), computed=computed))
        else:
          if computed or not isinstance(key, Identifier):
            self._fail("Expected ':' in object pattern")
          value: Node = Identifier(key.name)
          if self.eat("="):
            value = AssignmentPattern(left=value, right=self.parse_assignment())
          properties.append(ObjectProperty(key=key, value=value, shorthand=True))
      if not self.at("}"):
        self.expect(",")
    self.expect("}")
    return ObjectPattern(properties=properties)

  def parse_array_pattern(self) -> ArrayPattern:
    self.expect("[")
    elements: List[Optional[Node]] = []
    while not self.at("]"):
      if self.eat(","):
        elements.append(None)
        continue
      if self.eat("..."):
        elements.append(RestElement(argument=self.parse_binding_target()))
      else:
        elements.append(self.parse_binding_element())
      if not self.at("]"):
        self.expect(",")
    self.expect("]")
    return ArrayPattern(elements=elements)

  def parse_params(self) -> List[Node]:
    self.expect("(")
    params: List[Node] = []
    with self._in_operator(True):
      while not self.at(")"):
        if self.eat("..."):
          params.append(RestElement(argument=self.parse_binding_target()))
        else:
          params.append(self.parse_binding_element())
        if not self.at(")"):
          self.expect(",")
    self.expect(")")
    return params

  # --- Expressions ---

  def parse_expression(self) -> Expression:
    expr = self.parse_assignment()
    if not self.at(","):
      return expr
    expressions = [expr]
    while self.eat(","):
      expressions.append(self.parse_assignment())
    return SequenceExpression(expressions=expressions)

  def parse_assignment(self) -> Expression:
    if self._is_arrow_start():
      return self.parse_arrow()
    left = self.parse_conditional()
    tok = self.peek()
    if tok.kind == TokenKind.PUNCTUATOR and tok.text in ASSIGNMENT_OPERATORS:
      operator = self.consume().text
      return AssignmentExpression(operator=operator, left=left, right=self.parse_assignment())
    return left

  def _at_async_function(self) -> bool:
    return self.at("async") and self.at("function", 1) and not self.peek(1).newline_before

  def _is_arrow_start(self) -> bool:
    offset = 0
    if self.at("async") and not self.peek(1).newline_before:
      if self.peek(1).kind == TokenKind.IDENTIFIER and self.at("=>", 2):
        return True
      if self.at("(", 1):
        offset = 1

    tok = self.peek(offset)
    if tok.kind == TokenKind.IDENTIFIER and tok.text not in RESERVED_WORDS and self.at("=>", offset + 1):
      return True
    if not self.at("(", offset):
      return False

    depth = 0
    idx = self.pos + offset
    while idx < len(self.tokens):
      tk = self.tokens[idx]
      if tk.kind == TokenKind.EOF:
        return False
      if tk.kind == TokenKind.PUNCTUATOR:
        if tk.text == "(":
          depth += 1
        elif tk.text == ")":
          depth -= 1
          if depth == 0:
            nxt = self.tokens[idx + 1] if idx + 1 < len(self.tokens) else tk
            return nxt.kind == TokenKind.PUNCTUATOR and nxt.text == "=>"
      idx += 1
    return False

  def parse_arrow(self) -> ArrowFunctionExpression:
    is_async = False
    if self.at("async") and not self.at("=>", 1):
      self.consume()
      is_async = True
    if self.at("("):
      params = self.parse_params()
    else:
      params = [self.parse_identifier()]
    self.expect("=>")
    if self.at("{"):
      body: Node = self.parse_block()
    else:
      body = self.parse_assignment()
    return ArrowFunctionExpression(params=params, body=body, is_async=is_async)

  def parse_conditional(self) -> Expression:
    test = self.parse_binary(1)
    if not self.eat("?"):
      return test
    with self._in_operator(True):
      consequent = self.parse_assignment()
    self.expect(":")
    alternate = self.parse_assignment()
    return ConditionalExpression(test=test, consequent=consequent, alternate=alternate)

  def parse_binary(self, min_prec: int) -> Expression:
    left = self.parse_unary()
    while True:
      tok = self.peek()
      op = tok.text
      if tok.kind not in (TokenKind.PUNCTUATOR, TokenKind.IDENTIFIER) or op not in BINARY_PRECEDENCE:
        break
      if op == "in" and not self._allow_in:
        break
      prec = BINARY_PRECEDENCE[op]
      if prec < min_prec:
        break
      self.consume()
      # Exponentiation is right-associative
      right = self.parse_binary(prec if op == "**" else prec + 1)
      if op in LOGICAL_OPERATORS:
        left = LogicalExpression(operator=op, left=left, right=right)
      else:
        left = BinaryExpression(operator=op, left=left, right=right)
    return left

  def parse_unary(self) -> Expression:
    tok = self.peek()
    if tok.kind == TokenKind.PUNCTUATOR and tok.text in UNARY_OPERATORS:
      self.consume()
      return UnaryExpression(operator=tok.text, argument=self.parse_unary())
    if tok.kind == TokenKind.IDENTIFIER and tok.text in UNARY_KEYWORDS:
      self.consume()
      return UnaryExpression(operator=tok.text, argument=self.parse_unary())
    if tok.kind == TokenKind.IDENTIFIER and tok.text == "await" and not self._at_arrow_param_named("await"):
      self.consume()
      return AwaitExpression(argument=self.parse_unary())
    if tok.kind == TokenKind.PUNCTUATOR and tok.text in ("++", "--"):
      self.consume()
      return UpdateExpression(operator=tok.text, argument=self.parse_unary(), prefix=True)

    expr = self.parse_call_member()
    nxt = self.peek()
    if nxt.kind == TokenKind.PUNCTUATOR and nxt.text in ("++", "--") and not nxt.newline_before:
      self.consume()
      return UpdateExpression(operator=nxt.text, argument=expr, prefix=False)
    return expr

  def _at_arrow_param_named(self, name: str) -> bool:
    return self.at(name) and self.at("=>", 1)

  def parse_call_member(self) -> Expression:
    if self.at("new"):
      expr = self.parse_new()
    else:
      expr = self.parse_primary()

    while True:
      if self.eat("."):
        expr = MemberExpression(object=expr, property=self.parse_identifier_name())
      elif self.eat("?."):
        if self.at("("):
          expr = CallExpression(callee=expr, arguments=self.parse_arguments(), optional=True)
        elif self.eat("["):
          with self._in_operator(True):
            prop = self.parse_expression()
          self.expect("]")
          expr = MemberExpression(object=expr, property=prop, computed=True, optional=True)
        else:
          expr = MemberExpression(object=expr, property=self.parse_identifier_name(), optional=True)
      elif self.eat("["):
        with self._in_operator(True):
          prop = self.parse_expression()
        self.expect("]")
        expr = MemberExpression(object=expr, property=prop, computed=True)
      elif self.at("("):
        expr = CallExpression(callee=expr, arguments=self.parse_arguments())
      elif self.peek().kind == TokenKind.TEMPLATE:
        self._fail("Tagged templates are not supported")
      else:
        return expr

  def parse_new(self) -> NewExpression:
    self.expect("new")
    if self.at("."):
      self._fail("'new.target' is not supported")
    callee = self.parse_new() if self.at("new") else self.parse_primary()
    while True:
      if self.eat("."):
        callee = MemberExpression(object=callee, property=self.parse_identifier_name())
      elif self.eat("["):
        with self._in_operator(True):
          prop = self.parse_expression()
        self.expect("]")
        callee = MemberExpression(object=callee, property=prop, computed=True)
      else:
        break
    arguments = self.parse_arguments() if self.at("(") else []
    return NewExpression(callee=callee, arguments=arguments)

  def parse_arguments(self) -> List[Node]:
    self.expect("(")
    arguments: List[Node] = []
    with self._in_operator(True):
      while not self.at(")"):
        if self.eat("..."):
          arguments.append(SpreadElement(argument=self.parse_assignment()))
        else:
          arguments.append(self.parse_assignment())
        if not self.at(")"):
          self.expect(",")
    self.expect(")")
    return arguments

  def parse_primary(self) -> Expression:
    tok = self.peek()
    if tok.kind == TokenKind.STRING:
      return self.parse_string()
    if tok.kind == TokenKind.NUMBER:
      self.consume()
      return NumericLiteral(raw=tok.text)
    if tok.kind == TokenKind.TEMPLATE:
      self.consume()
      return TemplateLiteral(raw=tok.text)

    if tok.kind == TokenKind.PUNCTUATOR:
      if tok.text == "(":
        self.consume()
        with self._in_operator(True):
          expr = self.parse_expression()
        self.expect(")")
        return expr
      if tok.text == "[":
        return self.parse_array()
      if tok.text == "{":
        return self.parse_object()
      if tok.text == "/":
        self._fail("Regular expression literals are not supported")
      self._fail("Unexpected token")

    if tok.kind == TokenKind.IDENTIFIER:
      word = tok.text
      if word == "function" or self._at_async_function():
        return self.parse_function_expression()
      if word == "this":
        self.consume()
        return ThisExpression()
      if word == "null":
        self.consume()
        return NullLiteral()
      if word in ("true", "false"):
        self.consume()
        return BooleanLiteral(value=word == "true")
      if word == "class":
        self._fail("Class expressions are not supported")
      return self.parse_identifier()

    self._fail("Unexpected token")

  def parse_function_expression(self) -> FunctionExpression:
    is_async = self.eat("async")
    self.expect("function")
    if self.at("*"):
      self._fail("Generator functions are not supported")
    name = None if self.at("(") else self.parse_identifier()
    params = self.parse_params()
    return FunctionExpression(id=name, params=params, body=self.parse_block(), is_async=is_async)

  def parse_array(self) -> ArrayExpression:
    self.expect("[")
    elements: List[Optional[Node]] = []
    with self._in_operator(True):
      while not self.at("]"):
        if self.eat(","):
          elements.append(None)
          continue
        if self.eat("..."):
          elements.append(SpreadElement(argument=self.parse_assignment()))
        else:
          elements.append(self.parse_assignment())
        if not self.at("]"):
          self.expect(",")
    self.expect("]")
    return ArrayExpression(elements=elements)

  def parse_object(self) -> ObjectExpression:
    self.expect("{")
    properties: List[Node] = []
    with self._in_operator(True):
      while not self.at("}"):
        comments = self._take_comments()
        member = self.parse_object_member()
        member.leading_comments = comments
        properties.append(member)
        if not self.at("}"):
          self.expect(",")
        member.trailing_comments = self._take_trailing_comments()
    obj = ObjectExpression(properties=properties)
    obj.inner_comments = self._take_comments()
    self.expect("}")
    return obj

  def _starts_property_key(self, offset: int) -> bool:
    tk = self.peek(offset)
    if tk.kind in (TokenKind.IDENTIFIER, TokenKind.STRING, TokenKind.NUMBER):
      return True
    return tk.kind == TokenKind.PUNCTUATOR and tk.text == "["

  def parse_object_member(self) -> Node:
    if self.eat("..."):
      return SpreadElement(argument=self.parse_assignment())

    kind = "method"
    is_async = False
    if self.at("async") and self._starts_property_key(1) and not self.peek(1).newline_before:
      self.consume()
      is_async = True
    elif (self.at("get") or self.at("set")) and self._starts_property_key(1):
      kind = self.consume().text
    if self.at("*"):
      self._fail("Generator methods are not supported")

    key, computed = self.parse_property_name()
    if self.at("("):
      params = self.parse_params()
      body = self.parse_block()
      return ObjectMethod(kind=kind, key=key, params=params, body=body, computed=computed, is_async=is_async)
    if kind != "method" or is_async:
      self._fail("Expected '('")

    if self.eat(":"):
      return ObjectProperty(key=key, value=self.parse_assignment(), computed=computed)
    if computed or not isinstance(key, Identifier):
      self._fail("Expected ':'")
    return ObjectProperty(key=key, value=Identifier(key.name), shorthand=True)

  def parse_property_name(self) -> Tuple[Expression, bool]:
    if self.eat("["):
      with self._in_operator(True):
        key = self.parse_assignment()
      self.expect("]")
      return key, True
    tok = self.peek()
    if tok.kind == TokenKind.STRING:
      return self.parse_string(), False
    if tok.kind == TokenKind.NUMBER:
      self.consume()
      return NumericLiteral(raw=tok.text), False
    return self.parse_identifier_name(), False

  # --- Terminals ---

  def parse_string(self) -> StringLiteral:
    tok = self.peek()
    if tok.kind != TokenKind.STRING:
      self._fail("Expected string literal")
    self.consume()
    return StringLiteral(value=decode_string_literal(tok.text), raw=tok.text)

  def parse_identifier(self) -> Identifier:
    tok = self.peek()
    if tok.kind != TokenKind.IDENTIFIER or tok.text in RESERVED_WORDS:
      self._fail("Expected identifier")
    self.consume()
    return Identifier(name=tok.text)

  def parse_identifier_name(self) -> Identifier:
    """Parses an IdentifierName, where reserved words are allowed (``obj.default``)."""
    tok = self.peek()
    if tok.kind != TokenKind.IDENTIFIER:
      self._fail("Expected identifier")
    self.consume()
    return Identifier(name=tok.text)


def parse_module(code: str) -> Program:
  """
  Convenience wrapper around `ScriptParser`.

  Args:
      code (str): Script block source.

  Returns:
      Program: The parsed tree.
  """
  return ScriptParser(code).parse()
