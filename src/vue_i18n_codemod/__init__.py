"""
vue-i18n-codemod Package.

A deterministic codemod that moves hard-coded display strings of Vue
components onto vue-i18n: matching literals are rewritten to ``t(key)``
lookups (wrapped in ``computed`` where reactivity is needed), and the
``ref``/``computed``/``useI18n`` imports plus the ``const { t } = useI18n()``
binding are added exactly once.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import vue_i18n_codemod as vic

    catalog = vic.MessageCatalog({"en": {"message": {"hello": "hello world"}}})
    print(vic.localize("const a = 'hello world'", catalog))
    # import { ref, computed } from 'vue';
    # import { useI18n } from 'vue-i18n';
    # const { t } = useI18n();
    # const a = computed(() => t('message.hello'));

Advanced Usage (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from vue_i18n_codemod import LocalizationEngine, LocalizerConfig

    engine = LocalizationEngine(LocalizerConfig(quote='"'))
    res = engine.run(script_source, catalog)

    if res.success:
        print(res.code)
    else:
        print(f"Errors: {res.errors}")
"""

from typing import Callable, Optional

from vue_i18n_codemod.config import LocalizerConfig
from vue_i18n_codemod.core.conversion_result import ConversionResult, RewriteRecord
from vue_i18n_codemod.core.engine import LocalizationEngine
from vue_i18n_codemod.core.sfc import localize_sfc
from vue_i18n_codemod.errors import LocalizationError, ScriptSyntaxError, UnsupportedImportError
from vue_i18n_codemod.messages import MessageCatalog

__version__ = "0.1.0"


def localize(
  code: str,
  resolve: Callable[[str], Optional[str]],
  config: Optional[LocalizerConfig] = None,
) -> str:
  """
  Localizes the source of one component script.

  This is a high-level convenience wrapper around the `LocalizationEngine`.
  For whole ``.vue`` files use `localize_sfc`.

  Args:
      code (str): The script source.
      resolve (Callable): Returns the translation key for a display string,
          or a falsy value to leave the literal alone.
      config (LocalizerConfig, optional): Canonical names.

  Returns:
      str: The localized source code.

  Raises:
      ValueError: If the script cannot be parsed or localized.
  """
  result = LocalizationEngine(config).run(code, resolve)
  if result.has_errors:
    error_msg = "\n".join(result.errors)
    raise ValueError(f"Localization failed:\n{error_msg}")
  return result.code


__all__ = [
  "ConversionResult",
  "LocalizationEngine",
  "LocalizationError",
  "LocalizerConfig",
  "MessageCatalog",
  "RewriteRecord",
  "ScriptSyntaxError",
  "UnsupportedImportError",
  "localize",
  "localize_sfc",
  "__version__",
]
