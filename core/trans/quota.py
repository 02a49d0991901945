"""Daily call budgets for metered translation providers."""

from __future__ import annotations

import time
from datetime import date
from typing import TYPE_CHECKING, Final

from models.translation_models import APIQuota
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable, Mapping

    from core.storage import KeyValueStorage

__all__: list[str] = ["DEFAULT_DAILY_LIMITS", "QUOTA_STORAGE_KEY", "QuotaLedger"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

QUOTA_STORAGE_KEY: Final[str] = "translation-quotas"

DEFAULT_DAILY_LIMITS: Final[dict[str, int]] = {
    "mymemory": 1000,  # MyMemory anonymous free tier
    "libretranslate": 100,  # Conservative for public mirrors
}


class QuotaLedger:
    """Per-provider daily usage bookkeeping.

    The ledger is persisted as one snapshot `{"date": "<YYYY-MM-DD>", "quotas": [[name, quota], ...]}`
    and written through after every increment. Usage recorded on a different local calendar day
    is discarded; configured daily limits always win over persisted ones.

    Providers not known to the ledger are never usable.

    Attributes:
        storage (KeyValueStorage): Durable store for the snapshot.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        daily_limits: Mapping[str, int] | None = None,
        *,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Load today's usage from storage or start a fresh day.

        Args:
            storage (KeyValueStorage): Durable store for the ledger snapshot.
            daily_limits (Mapping[str, int] | None): Limits per provider. Defaults to DEFAULT_DAILY_LIMITS.
            today (Callable[[], date] | None): Source of the current local date.
        """
        self.storage: KeyValueStorage = storage
        self._daily_limits: dict[str, int] = dict(daily_limits or DEFAULT_DAILY_LIMITS)
        self._today: Callable[[], date] = today or date.today
        self._quotas: dict[str, APIQuota] = {}
        self._date: str = ""
        self._load()

    def _today_stamp(self) -> str:
        return self._today().isoformat()

    @staticmethod
    def _now_ms() -> int:
        return int(time.time() * 1000)

    def _load(self) -> None:
        today: str = self._today_stamp()
        stored = self.storage.load(QUOTA_STORAGE_KEY)

        if isinstance(stored, dict) and stored.get("date") == today:
            try:
                quotas: dict[str, APIQuota] = {
                    name: APIQuota.from_dict(data, infer_missing=True) for name, data in stored.get("quotas", [])
                }
            except (KeyError, TypeError, ValueError) as err:
                logger.error("Error loading quotas: %s", err)
            else:
                self._date = today
                self._quotas = quotas
                self._apply_configured_limits()
                logger.debug("Loaded quota ledger for %s: %s", today, self._quotas)
                return
        elif isinstance(stored, dict):
            logger.info("Quota ledger date changed (stored: %s, today: %s); usage reset", stored.get("date"), today)

        self._reset(today)

    def _apply_configured_limits(self) -> None:
        for name, limit in self._daily_limits.items():
            quota: APIQuota | None = self._quotas.get(name)
            if quota is None:
                self._quotas[name] = APIQuota(provider=name, daily_limit=limit, last_reset=self._now_ms())
            else:
                quota.daily_limit = limit

    def _reset(self, today: str) -> None:
        now: int = self._now_ms()
        self._date = today
        self._quotas = {
            name: APIQuota(provider=name, daily_limit=limit, current_usage=0, last_reset=now)
            for name, limit in self._daily_limits.items()
        }
        self._save()

    def _rollover_if_needed(self) -> None:
        today: str = self._today_stamp()
        if today != self._date:
            logger.info("Calendar day changed (%s -> %s); resetting provider usage", self._date, today)
            self._reset(today)

    def _save(self) -> None:
        snapshot: dict = {
            "date": self._date,
            "quotas": [[name, quota.to_dict()] for name, quota in self._quotas.items()],
        }
        self.storage.save(QUOTA_STORAGE_KEY, snapshot)

    def can_use_provider(self, provider: str) -> bool:
        """Check whether the provider still has budget today.

        Args:
            provider (str): Provider name.

        Returns:
            bool: True iff current usage is below the daily limit.
        """
        self._rollover_if_needed()
        quota: APIQuota | None = self._quotas.get(provider)
        return quota.current_usage < quota.daily_limit if quota is not None else False

    def increment_usage(self, provider: str) -> None:
        """Record one dispatched request and persist the ledger. Unknown providers are ignored."""
        self._rollover_if_needed()
        quota: APIQuota | None = self._quotas.get(provider)
        if quota is None:
            logger.debug("No quota tracked for provider '%s'", provider)
            return
        quota.current_usage += 1
        self._save()
        logger.debug("Usage for '%s': %d/%d", provider, quota.current_usage, quota.daily_limit)

    def try_acquire(self, provider: str) -> bool:
        """Reserve one request for the provider if it still has budget.

        Gate and increment happen without yielding to the event loop, so concurrent translations
        cannot all pass the gate before any of them is counted.

        Returns:
            bool: True if a slot was reserved and persisted.
        """
        if not self.can_use_provider(provider):
            return False
        self.increment_usage(provider)
        return True

    def release(self, provider: str) -> None:
        """Give back a slot reserved by try_acquire whose request never got an answer."""
        self._rollover_if_needed()
        quota: APIQuota | None = self._quotas.get(provider)
        # A reservation from before a day rollover has nothing left to refund.
        if quota is None or quota.current_usage == 0:
            return
        quota.current_usage -= 1
        self._save()
        logger.debug("Refunded '%s' slot: %d/%d", provider, quota.current_usage, quota.daily_limit)

    def get_quota(self, provider: str) -> APIQuota | None:
        quota: APIQuota | None = self._quotas.get(provider)
        return APIQuota.from_dict(quota.to_dict()) if quota is not None else None

    def get_quotas(self) -> dict[str, APIQuota]:
        """Return copies of every tracked quota keyed by provider."""
        return {name: APIQuota.from_dict(quota.to_dict()) for name, quota in self._quotas.items()}
