"""Data models for web portal payloads."""

from pywebportal.models._base import PortalBaseModel
from pywebportal.models.captcha import Captcha
from pywebportal.models.institute import Institute

__all__ = [
    "Captcha",
    "Institute",
    "PortalBaseModel",
]
