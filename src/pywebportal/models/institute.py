"""Institute entry from the login response."""

from __future__ import annotations

from typing import Any, ClassVar

from pywebportal.models._base import PortalBaseModel


class Institute(PortalBaseModel):
    """One ``institutelist`` entry, values kept exactly as sent.

    Parameters
    ----------
    label : Any
        Human-readable institute name.
    value : Any
        Institute identifier sent back as ``instituteid``.
    """

    _KEEP_EMPTY: ClassVar[bool] = True

    label: Any
    value: Any
