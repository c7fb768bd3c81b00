"""
Domain models and value objects.

Contains the plain values exchanged with the calculation core: Weekday,
GeoCoordinate, MailMessage.
"""

from src.core.domain.geo import CoordinateLike, GeoCoordinate
from src.core.domain.mail import MailMessage, MailPriority
from src.core.domain.weekday import Weekday

__all__ = [
    # Calendar
    "Weekday",
    # Geo
    "GeoCoordinate",
    "CoordinateLike",
    # Mail
    "MailMessage",
    "MailPriority",
]
