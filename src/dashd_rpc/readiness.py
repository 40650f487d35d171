"""Poll the node until it reports a nonzero chain height."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

from .config import OnConnected
from .constants import E_IN_WARMUP
from .exceptions import RemoteError, SanityError
from .types import ConnectionState

logger = logging.getLogger(__name__)


def tip_height(chain_tips: Any) -> int:
    """Return the height of the first entry of a ``getchaintips`` result."""
    if not isinstance(chain_tips, list) or not chain_tips:
        raise SanityError("Sanity Fail: missing tip", {"result": chain_tips})
    tip = chain_tips[0]
    if not isinstance(tip, Mapping) or tip.get("height") is None:
        raise SanityError("Sanity Fail: missing tip height", {"tip": tip})
    try:
        return int(tip["height"])
    except (TypeError, ValueError) as exc:
        raise SanityError("Sanity Fail: invalid tip height", {"tip": tip}) from exc


class ReadinessMonitor:
    """Drive ``ConnectionState`` from not-connected to connected.

    ``fetch_chain_tips`` performs the ``getChainTips`` call and returns its
    result. There is no overall deadline and no cancellation token: callers
    that want to give up must abandon the thread running :meth:`wait_until_ready`.
    """

    def __init__(
        self,
        fetch_chain_tips: Callable[[], Any],
        state: ConnectionState,
        *,
        endpoint: str,
        on_connected: OnConnected | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._fetch_chain_tips = fetch_chain_tips
        self._state = state
        self._endpoint = endpoint
        self._on_connected = on_connected or self._log_connected
        self._sleep = sleep

    def wait_until_ready(self, retry_interval: float) -> int:
        self._state.connected = False
        self._state.height = 0

        warning: RemoteError | None = None
        attempt = 0
        while True:
            attempt += 1
            try:
                height = tip_height(self._fetch_chain_tips())
            except RemoteError as exc:
                if exc.code != E_IN_WARMUP:
                    raise
                logger.warning("dashd at %s is warming up: %s", self._endpoint, exc.message)
                warning = exc
                height = 0

            if height:
                self._state.height = height
                if not self._state.connected:
                    self._state.connected = True
                    self._on_connected(warning)
                return height

            logger.debug(
                "dashd at %s not ready (attempt %s), retrying in %ss",
                self._endpoint,
                attempt,
                retry_interval,
            )
            self._sleep(retry_interval)

    def _log_connected(self, warning: RemoteError | None) -> None:
        logger.info("client connected to %s", self._endpoint)
