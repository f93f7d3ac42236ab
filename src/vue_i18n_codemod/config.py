"""
Runtime Configuration Store.

Holds the canonical names the codemod injects and matches against: the
reactive-primitives module (``vue``) with its ``ref``/``computed`` members,
the accessor module (``vue-i18n``) with its ``useI18n`` hook, the ``t``
property destructured from the hook, and the ``setup`` method convention.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")


class LocalizerConfig(BaseModel):
  """
  Global configuration container for the localization engine.
  """

  reactive_module: str = Field("vue", description="Module exporting the reactive primitives.")
  ref_name: str = Field("ref", description="Plain reactive wrapper; literals passed to it become `t(key)`.")
  computed_name: str = Field("computed", description="Derived-value wrapper used for all other literals.")
  i18n_module: str = Field("vue-i18n", description="Module exporting the translation hook.")
  hook_name: str = Field("useI18n", description="Translation hook called to obtain the accessor.")
  translate_name: str = Field("t", description="Property destructured from the hook result.")
  setup_name: str = Field("setup", description="Name of the component initialization method.")
  quote: str = Field("'", description="Quote character for synthesized string literals.")

  @field_validator("ref_name", "computed_name", "hook_name", "translate_name", "setup_name")
  @classmethod
  def validate_identifier(cls, v: str) -> str:
    """
    Ensures injected names are usable as JavaScript identifiers.

    Args:
        v (str): The candidate name.

    Returns:
        str: The stripped name.

    Raises:
        ValueError: If the name is not a valid identifier.
    """
    v_clean = v.strip()
    if not _JS_IDENTIFIER.match(v_clean):
      raise ValueError(f"'{v}' is not a valid JavaScript identifier")
    return v_clean

  @field_validator("reactive_module", "i18n_module")
  @classmethod
  def validate_module(cls, v: str) -> str:
    """
    Rejects empty module specifiers.

    Args:
        v (str): The module specifier.

    Returns:
        str: The stripped specifier.

    Raises:
        ValueError: If the specifier is blank.
    """
    v_clean = v.strip()
    if not v_clean:
      raise ValueError("Module specifier must not be empty")
    return v_clean

  @field_validator("quote")
  @classmethod
  def validate_quote(cls, v: str) -> str:
    """
    Restricts quotes to the two JavaScript string delimiters.

    Args:
        v (str): The quote character.

    Returns:
        str: The quote character.

    Raises:
        ValueError: If it is neither ``'`` nor ``"``.
    """
    if v not in ("'", '"'):
      raise ValueError(f"Unsupported quote character: {v!r}")
    return v

  @classmethod
  def load(cls, **overrides: Optional[Any]) -> "LocalizerConfig":
    """
    Builds a configuration from keyword overrides.

    Overrides set to ``None`` are ignored so callers can forward optional CLI
    or API arguments without filtering them first.

    Args:
        **overrides: Field values keyed by field name.

    Returns:
        LocalizerConfig: The resolved configuration.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    return cls(**values)
