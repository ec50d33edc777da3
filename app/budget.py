import logging

logger = logging.getLogger(__name__)


class ApiCallBudget:
    """Process-wide ceiling on outbound Places API calls.

    ``try_acquire`` checks and increments without awaiting in between, so on a
    single event loop no two tasks can both take the last slot.
    """

    def __init__(self, limit: int) -> None:
        self._limit = limit
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def remaining(self) -> int:
        return max(self._limit - self._count, 0)

    @property
    def exhausted(self) -> bool:
        return self._count >= self._limit

    def try_acquire(self) -> bool:
        if self.exhausted:
            return False
        self._count += 1
        logger.debug("API call %d/%d reserved", self._count, self._limit)
        return True
