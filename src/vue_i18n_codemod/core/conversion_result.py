"""
Data structures representing the output of a localization run.

This module defines the `RewriteRecord` and `ConversionResult` Pydantic models,
which encapsulate the generated code, the literals that were rewritten, any
errors encountered, and the execution trace logs.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from vue_i18n_codemod.enums import RewriteCategory


class RewriteRecord(BaseModel):
  """
  One literal replaced by a translation lookup.
  """

  value: str = Field(..., description="The original display string.")
  key: str = Field(..., description="Translation key returned by the resolver.")
  category: RewriteCategory = Field(..., description="Rewrite strategy that was applied.")


class ConversionResult(BaseModel):
  """
  Container for the results of a localization job.
  """

  code: str = Field(default="", description="The generated source code.")
  rewrites: List[RewriteRecord] = Field(default_factory=list, description="Rewritten literals in document order.")
  errors: List[str] = Field(default_factory=list, description="List of error messages encountered.")
  success: bool = Field(
    default=True,
    description="True if the pipeline completed without fatal errors.",
  )
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Execution trace log data.")

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0
