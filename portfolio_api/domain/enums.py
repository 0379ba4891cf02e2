"""Domain enumerations for the portfolio content.

Enums represent fixed sets of values accepted on write.
"""

from enum import Enum


class ProjectCategory(str, Enum):
    """Which section of the Projects page a project belongs to."""

    PERSONAL = "personal"
    CLIENT = "client"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid category values as strings."""
        return [category.value for category in cls]


class PricingPeriod(str, Enum):
    """Billing period shown next to a pricing plan's price."""

    PROJECT = "project"
    HOUR = "hour"
    MONTH = "month"
    YEAR = "year"
