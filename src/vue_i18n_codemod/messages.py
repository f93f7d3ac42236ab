"""
Message Catalog.

A ready-made key resolver built from vue-i18n style messages::

    {
      "en": {"message": {"hello": "hello world"}},
      "ch": {"message": {"hello": "你好，世界"}},
    }

Every locale is flattened into dotted key paths (``message.hello``). A display
string resolves to the first path, in locale order then document order, whose
value equals it. The locale name is not part of the path.
"""

from typing import Any, Dict, Iterator, Mapping, Optional, Tuple


def flatten_messages(tree: Mapping[str, Any], prefix: str = "") -> Iterator[Tuple[str, str]]:
  """
  Yields ``(path, text)`` for every string leaf of a nested mapping.

  Non-string leaves (numbers, lists, None) are skipped.

  Args:
      tree (Mapping[str, Any]): Nested message mapping of one locale.
      prefix (str): Path of `tree` itself.

  Returns:
      Iterator[Tuple[str, str]]: Dotted paths and their texts.
  """
  for name, value in tree.items():
    path = f"{prefix}.{name}" if prefix else str(name)
    if isinstance(value, Mapping):
      yield from flatten_messages(value, path)
    elif isinstance(value, str):
      yield path, value


class MessageCatalog:
  """
  Reverse index from display text to message key.

  Instances are callable, so they can be passed directly as the resolver of
  `LocalizationEngine.run` or `localize`.
  """

  def __init__(self, messages: Mapping[str, Mapping[str, Any]]):
    self._index: Dict[str, str] = {}
    for _locale, tree in messages.items():
      for path, text in flatten_messages(tree):
        self._index.setdefault(text, path)

  def resolve(self, text: str) -> Optional[str]:
    """
    Looks up the key path for a display string.

    Args:
        text (str): The literal's value.

    Returns:
        Optional[str]: The first matching path, or None.
    """
    return self._index.get(text)

  def __call__(self, text: str) -> Optional[str]:
    return self.resolve(text)
