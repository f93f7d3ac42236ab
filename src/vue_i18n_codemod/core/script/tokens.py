"""
Script Tokenizer.

Defines the token kinds of the ES module subset understood by the parser and a
regex-based `Tokenizer` that turns source text into a stream of `Token` objects.
Whitespace is dropped, but each token remembers whether a line break preceded
it so the parser can apply the `return` line-terminator rule.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Generator, List, Tuple

from vue_i18n_codemod.errors import ScriptSyntaxError


class TokenKind(str, Enum):
  """Enumeration of Lexer Token Types."""

  COMMENT = "COMMENT"
  STRING = "STRING"
  TEMPLATE = "TEMPLATE"
  NUMBER = "NUMBER"
  IDENTIFIER = "IDENTIFIER"
  PUNCTUATOR = "PUNCTUATOR"
  NEWLINE = "NEWLINE"
  WHITESPACE = "WHITESPACE"
  MISMATCH = "MISMATCH"
  EOF = "EOF"


# Longest operators first so the alternation prefers them.
PUNCTUATORS = [
  ">>>=",
  "...",
  "===",
  "!==",
  "**=",
  "<<=",
  ">>=",
  ">>>",
  "&&=",
  "||=",
  "??=",
  "=>",
  "==",
  "!=",
  "<=",
  ">=",
  "&&",
  "||",
  "??",
  "?.",
  "++",
  "--",
  "+=",
  "-=",
  "*=",
  "/=",
  "%=",
  "&=",
  "|=",
  "^=",
  "<<",
  ">>",
  "**",
  "{",
  "}",
  "(",
  ")",
  "[",
  "]",
  ";",
  ",",
  "<",
  ">",
  "+",
  "-",
  "*",
  "/",
  "%",
  "&",
  "|",
  "^",
  "!",
  "~",
  "?",
  ":",
  "=",
  ".",
]

# Words that can never be an identifier reference. Contextual words such as
# `async`, `of` and `await` are deliberately absent.
RESERVED_WORDS = frozenset(
  {
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "export",
    "extends",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "let",
    "new",
    "return",
    "super",
    "switch",
    "throw",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
    "yield",
  }
)


@dataclass
class Token:
  """
  Represents a lexical unit.

  Attributes:
      kind (TokenKind): The type of token.
      text (str): The raw source text.
      line (int): Line number in source (1-based).
      col (int): Column number in source (0-based).
      newline_before (bool): True if a line break separates this token from the previous one.
  """

  kind: TokenKind
  text: str
  line: int
  col: int
  newline_before: bool = False


class Tokenizer:
  """Regex-based lexer for component script blocks."""

  PATTERN_DEFS: List[Tuple[TokenKind, str]] = [
    (TokenKind.COMMENT, r"//[^\n]*|/\*[\s\S]*?\*/"),
    (TokenKind.STRING, r"'(?:[^'\\\n]|\\.)*'|\"(?:[^\"\\\n]|\\.)*\""),
    (TokenKind.TEMPLATE, r"`(?:[^`\\]|\\[\s\S])*`"),
    (
      TokenKind.NUMBER,
      r"0[xX][0-9a-fA-F_]+n?|0[bB][01_]+n?|0[oO][0-7_]+n?"
      r"|(?:\d[\d_]*(?:\.[\d_]*)?|\.\d[\d_]*)(?:[eE][+-]?\d+)?n?",
    ),
    (TokenKind.IDENTIFIER, r"[A-Za-z_$][\w$]*"),
    (TokenKind.PUNCTUATOR, "|".join(re.escape(p) for p in PUNCTUATORS)),
    (TokenKind.NEWLINE, r"\r?\n"),
    (TokenKind.WHITESPACE, r"[ \t\r\f\v\ufeff\u00a0]+"),
    (TokenKind.MISMATCH, r"."),
  ]

  _REGEX = re.compile("|".join(f"(?P<{kind.value}>{pattern})" for kind, pattern in PATTERN_DEFS))

  def __init__(self, text: str):
    self.text = text

  def tokenize(self) -> Generator[Token, None, None]:
    """
    Yields the significant tokens of the source, ending with an EOF token.

    Comments are yielded (the parser attaches them to statements); whitespace and
    newlines are folded into the `newline_before` flag of the next token.

    Raises:
        ScriptSyntaxError: On a character that starts no known token.
    """
    line_num = 1
    line_start = 0
    pending_newline = False
    for mo in self._REGEX.finditer(self.text):
      kind = TokenKind(mo.lastgroup)
      value = mo.group()
      col = mo.start() - line_start

      if kind == TokenKind.NEWLINE:
        line_num += 1
        line_start = mo.end()
        pending_newline = True
        continue
      if kind == TokenKind.WHITESPACE:
        continue
      if kind == TokenKind.MISMATCH:
        raise ScriptSyntaxError(f"Unexpected character {value!r}", line_num, col)

      yield Token(kind, value, line_num, col, pending_newline)
      pending_newline = False

      # Block comments and templates may span lines.
      breaks = value.count("\n")
      if breaks:
        line_num += breaks
        line_start = mo.start() + value.rfind("\n") + 1
        if kind == TokenKind.COMMENT:
          pending_newline = True

    yield Token(TokenKind.EOF, "", line_num, 0, pending_newline)
