"""Typed Gerrit records and query-option models."""

from .access import *  # noqa: F401,F403
from .accounts import *  # noqa: F401,F403
from .base import *  # noqa: F401,F403
from .changes import *  # noqa: F401,F403
from .config import *  # noqa: F401,F403
from .events import *  # noqa: F401,F403
from .groups import *  # noqa: F401,F403
from .plugins import *  # noqa: F401,F403
from .projects import *  # noqa: F401,F403
