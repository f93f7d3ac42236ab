"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A message catalog and resolver shared by the transformation tests.
- Tracer isolation so events from one test never leak into another.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'vue_i18n_codemod' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from vue_i18n_codemod.core.tracer import reset_tracer  # noqa: E402
from vue_i18n_codemod.messages import MessageCatalog  # noqa: E402

MESSAGES = {
  "en": {
    "message": {
      "hello": "hello world",
      "hi": "hi",
    },
  },
  "ch": {
    "message": {
      "hello": "你好，世界",
      "hi": "嗨",
    },
  },
}


@pytest.fixture
def catalog() -> MessageCatalog:
  """Catalog with an English and a Chinese locale."""
  return MessageCatalog(MESSAGES)


@pytest.fixture
def resolve(catalog):
  """Resolver mapping 'hello world' -> message.hello and 'hi' -> message.hi."""
  return catalog.resolve


@pytest.fixture(autouse=True)
def isolate_tracer():
  """Gives every test a fresh global tracer."""
  reset_tracer()
  yield
  reset_tracer()
