# invsync Sync State Machine
# idle/syncing/success/error state, manual vs. automatic passes, periodic timer

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from invsync.errors import AccountUnavailableError, SyncError, SyncInProgressError
from invsync.store.base import EntityStore
from invsync.store.entities import utcnow
from invsync.sync.engine import PassResult, ReconciliationEngine
from invsync.sync.records import AccountChange, AccountStatus, RemoteChangeSource

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 60.0


class SyncStatus(str, Enum):
    """Synchronization states."""

    IDLE = "idle"
    SYNCING = "syncing"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SyncState:
    """Current status plus the error message when status is ERROR."""

    status: SyncStatus = SyncStatus.IDLE
    message: Optional[str] = None

    @classmethod
    def error(cls, message: str) -> SyncState:
        return cls(SyncStatus.ERROR, message)

    @property
    def is_syncing(self) -> bool:
        return self.status is SyncStatus.SYNCING

    def __str__(self) -> str:
        if self.status is SyncStatus.ERROR:
            return f"error({self.message})"
        return self.status.value


IDLE = SyncState(SyncStatus.IDLE)
SYNCING = SyncState(SyncStatus.SYNCING)
SUCCESS = SyncState(SyncStatus.SUCCESS)


class SyncStateMachine:
    """
    Drives reconciliation passes and exposes their state.

    Manual passes report failures through ``state``. Automatic passes run
    on a fixed interval, are skipped while another pass is in flight, and
    only log their failures. All methods must run on one event loop.
    """

    def __init__(
        self,
        engine: ReconciliationEngine,
        *,
        source: Optional[RemoteChangeSource] = None,
        interval: float = DEFAULT_INTERVAL,
        auto_sync: bool = True,
    ):
        """
        Initialize the state machine.

        Args:
            engine: Engine that performs passes.
            source: Source queried for account status (defaults to the engine's).
            interval: Seconds between automatic passes.
            auto_sync: Whether ``start()`` launches the periodic timer.
        """
        if interval <= 0:
            raise ValueError("interval must be > 0")
        self.engine = engine
        self.source = source or engine.source
        self.interval = interval
        self.auto_sync_enabled = auto_sync
        self.is_account_available = False
        self.last_sync: Optional[datetime] = None
        self.last_result: Optional[PassResult] = None
        self._state = IDLE
        self._in_flight = False
        self._timer: Optional[asyncio.Task] = None
        self._listeners: list[Callable[[SyncState], None]] = []

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def is_running(self) -> bool:
        """True while the periodic timer is active."""
        return self._timer is not None and not self._timer.done()

    def add_listener(self, callback: Callable[[SyncState], None]) -> None:
        """Register a callback invoked on every state change."""
        self._listeners.append(callback)

    def _set_state(self, state: SyncState) -> None:
        self._state = state
        for callback in self._listeners:
            callback(state)

    def _try_begin(self) -> Optional[SyncState]:
        """
        Claim the single in-flight slot.

        Check and claim happen with no await in between, so two callers on
        the same loop cannot both win. Returns the state before the claim,
        or None if a pass is already running.
        """
        if self._in_flight:
            return None
        self._in_flight = True
        previous = self._state
        self._set_state(SYNCING)
        return previous

    def _finish(self, result: PassResult) -> None:
        self.last_result = result
        self.last_sync = result.finished or utcnow()
        self._set_state(SUCCESS)

    async def manual_sync(self) -> SyncState:
        """
        Run a pass on user request.

        Returns:
            The state after the attempt.
        """
        if not self.is_account_available:
            self._set_state(SyncState.error(AccountUnavailableError().message))
            return self._state

        if self._try_begin() is None:
            logger.warning(SyncInProgressError().message)
            return self._state

        try:
            result = await self.engine.run_pass()
        except asyncio.CancelledError:
            logger.info("Manual sync cancelled")
            self._set_state(IDLE)
            raise
        except SyncError as e:
            logger.error("Manual sync failed: %s", e.message)
            self._set_state(SyncState.error(e.message))
        except Exception as e:
            logger.exception("Manual sync failed")
            self._set_state(SyncState.error(str(e) or type(e).__name__))
        else:
            self._finish(result)
        finally:
            self._in_flight = False
        return self._state

    async def auto_sync(self) -> Optional[PassResult]:
        """
        Run a pass on the timer's behalf.

        Skipped when the account is unavailable or a pass is in flight.
        Failures are logged and the previous state is restored.

        Returns:
            PassResult, or None if skipped or failed.
        """
        if not self.is_account_available:
            logger.debug("Auto-sync skipped: account not available")
            return None

        previous = self._try_begin()
        if previous is None:
            logger.debug("Auto-sync skipped: pass already in flight")
            return None

        try:
            result = await self.engine.run_pass()
        except asyncio.CancelledError:
            logger.info("Auto-sync cancelled")
            self._set_state(previous)
            raise
        except Exception as e:
            logger.error("Auto-sync failed: %s", e)
            self._set_state(previous)
            return None
        else:
            self._finish(result)
            return result
        finally:
            self._in_flight = False

    def reset(self) -> None:
        """Return a settled success/error state to idle."""
        if not self._in_flight:
            self._set_state(IDLE)

    def handle_account_change(self, change: AccountChange) -> None:
        """Update account availability from a platform account event."""
        self.is_account_available = change in (AccountChange.SIGN_IN, AccountChange.SWITCH_ACCOUNTS)
        logger.info("Account change %s, available=%s", change.value, self.is_account_available)

    async def refresh_account_status(self) -> bool:
        """Query the source for account status. Errors count as unavailable."""
        try:
            status = await self.source.account_status()
        except Exception as e:
            logger.warning("Account status check failed: %s", e)
            status = AccountStatus.UNKNOWN
        self.is_account_available = status is AccountStatus.AVAILABLE
        return self.is_account_available

    def rebind_store(self, store: EntityStore) -> None:
        """Use a different local store for subsequent passes."""
        self.engine.rebind_store(store)

    async def start(self) -> None:
        """Check the account and start the periodic timer if enabled."""
        await self.refresh_account_status()
        if self.auto_sync_enabled and not self.is_running:
            self._timer = asyncio.create_task(self._run_timer())
            logger.info("Auto-sync started, interval %.0fs", self.interval)

    async def stop(self) -> None:
        """Cancel the periodic timer."""
        if self._timer is None:
            return
        self._timer.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._timer
        self._timer = None

    async def _run_timer(self) -> None:
        # A hung pass delays the next tick; there is no timeout at this layer
        while True:
            await asyncio.sleep(self.interval)
            await self.auto_sync()
