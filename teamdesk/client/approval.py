import logging
from typing import Awaitable, Callable, Optional

from teamdesk.core.enums import ApprovalStatus, next_status

logger = logging.getLogger(__name__)


class ApprovalToggle:
    """
    Three-state approval control.

    Each click advances the status at once and calls ``on_change``. If that
    raises or returns ``False`` the status goes back to what it was just before
    that click.
    """

    def __init__(
        self,
        status,
        on_change: Callable[[ApprovalStatus], Awaitable[Optional[bool]]],
    ):
        self.status = ApprovalStatus(status)
        self.on_change = on_change
        self._in_flight = 0

    @property
    def busy(self) -> bool:
        return self._in_flight > 0

    async def click(self) -> ApprovalStatus:
        previous = self.status
        self.status = next_status(previous)
        self._in_flight += 1
        try:
            ok = await self.on_change(self.status)
        except Exception:
            logger.warning("Approval change to %s failed", self.status.value, exc_info=True)
            ok = False
        finally:
            self._in_flight -= 1

        if ok is False:
            self.status = previous
        return self.status
