"""Login CAPTCHA pair."""

from __future__ import annotations

from pywebportal._constants import DEFAULT_CAPTCHA
from pywebportal.models._base import PortalBaseModel


class Captcha(PortalBaseModel):
    """CAPTCHA answer and the hidden token it was issued with."""

    captcha: str = DEFAULT_CAPTCHA["captcha"]
    hidden: str = DEFAULT_CAPTCHA["hidden"]

    def to_payload(self) -> dict[str, str]:
        return {"captcha": self.captcha, "hidden": self.hidden}
