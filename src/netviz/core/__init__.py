from .config import settings, get_settings, Settings
from .constants import *  # noqa: F401,F403
from .dependencies import container
from .models import RelationshipMode, FrequencyEntry, TopNResult

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "container",
    "RelationshipMode",
    "FrequencyEntry",
    "TopNResult",
] + [name for name in globals().keys() if name.isupper()]
