"""
String literal encoding helpers.

Converts between the quoted source form of a JavaScript string literal and its
decoded Python value.
"""

import re

_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])")

_SIMPLE_ESCAPES = {
  "n": "\n",
  "t": "\t",
  "r": "\r",
  "b": "\b",
  "f": "\f",
  "v": "\v",
  "0": "\0",
}

_ENCODE_MAP = {
  "\\": "\\\\",
  "\n": "\\n",
  "\r": "\\r",
  "\t": "\\t",
  "\b": "\\b",
  "\f": "\\f",
  "\v": "\\v",
  "\0": "\\0",
  "\u2028": "\\u2028",
  "\u2029": "\\u2029",
}


def _unescape(match: re.Match) -> str:
  seq = match.group(1)
  if seq.startswith("u{"):
    return chr(int(seq[2:-1], 16))
  if seq[0] in "ux" and len(seq) > 1:
    return chr(int(seq[1:], 16))
  if seq in ("\n", "\r", "\r\n", "\u2028", "\u2029"):
    # Line continuation
    return ""
  return _SIMPLE_ESCAPES.get(seq, seq)


def decode_string_literal(raw: str) -> str:
  """
  Decodes the source text of a string literal (quotes included).

  Args:
      raw (str): e.g. ``'it\\'s'``.

  Returns:
      str: The runtime value, e.g. ``it's``.
  """
  return _ESCAPE_RE.sub(_unescape, raw[1:-1])


def encode_string_literal(value: str, quote: str = "'") -> str:
  """
  Produces source text for a string value using the given quote character.

  Args:
      value (str): The runtime string.
      quote (str): Either ``'`` or ``"``.

  Returns:
      str: A quoted literal that decodes back to `value`.
  """
  out = []
  for ch in value:
    if ch == quote:
      out.append("\\" + ch)
    elif ch in _ENCODE_MAP:
      out.append(_ENCODE_MAP[ch])
    elif ord(ch) < 0x20:
      out.append(f"\\x{ord(ch):02x}")
    else:
      out.append(ch)
  return quote + "".join(out) + quote
