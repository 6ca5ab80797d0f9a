"""src/unrestrictive_url/utils/__init__.py"""

from .humanize import HumanizeOptions, humanize_url
from .validators import can_parse

__all__ = ["HumanizeOptions", "humanize_url", "can_parse"]
