"""Time and identifier sources.

Services take these as constructor dependencies instead of calling
datetime.now() and uuid4() directly, so tests can pin both.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4


class Clock:
    """Wall clock returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class IdGenerator:
    """Random UUID4 generator."""

    def new_id(self) -> UUID:
        return uuid4()
