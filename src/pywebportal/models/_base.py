"""Base model for web portal payloads.

Every portal model inherits from :class:`PortalBaseModel` which provides:

* Frozen, extra-tolerant validation (the portal adds fields freely).
* Numeric identifiers coerced to ``str``.
* Empty-string and ``None`` values dropped so the field default is used,
  unless the model sets ``_KEEP_EMPTY``.
* A ``raw`` dict that captures the original payload.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PortalBaseModel(BaseModel):
    """Base for portal payload models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    _KEEP_EMPTY: ClassVar[bool] = False
    """When ``True``, empty strings and ``None`` are kept as sent."""

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original portal dict."""

    @model_validator(mode="before")
    @classmethod
    def _clean_portal_values(cls, values: Any) -> Any:
        """Drop empty values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        if cls._KEEP_EMPTY:
            cleaned = dict(values)
        else:
            cleaned = {k: v for k, v in values.items() if v is not None and not (isinstance(v, str) and not v.strip())}
        # Keep the caller's raw= when constructing with kwargs.
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
