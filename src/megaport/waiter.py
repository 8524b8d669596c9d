# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Provisioning-wait engine.

Orders, modifications and deletions are asynchronous on the API side: the
mutating call returns an identifier immediately and the resource converges
to its target state minutes later. This module blocks the calling task until
a caller-defined predicate holds for the resource's observed state, the
resource reaches a terminal failure state, the timeout elapses, or the
caller cancels.

The engine is resource-agnostic. It is parameterized by a ``fetch``
coroutine function returning the current snapshot, an ``is_satisfied``
predicate over snapshots (see ``megaport.predicates``) and an optional
``is_failed`` predicate for states the resource never leaves.

Timing:
    - The first check happens immediately (or uses a snapshot the caller
      already holds).
    - Subsequent fetches start ``poll_interval`` seconds after the previous
      one started; fetches never overlap and never run more often.
    - The tick that reaches the deadline still evaluates the predicate, so a
      resource converging exactly at the deadline is reported as satisfied.
    - Cancellation via ``cancel_event`` interrupts the sleep or an in-flight
      fetch at once.
    - A fetch still running ``poll_interval`` seconds past the deadline is
      abandoned and the wait times out.

Expected outcomes are returned as values, never raised:

    >>> outcome = await wait_for(
    ...     lambda: client.vxc.get_vxc(uid),
    ...     is_provisioned,
    ...     poll_interval=30,
    ...     timeout=300,
    ... )
    >>> match outcome:
    ...     case Satisfied(snapshot=vxc):
    ...         print(vxc.provisioning_status)
    ...     case TimedOut():
    ...         ...

Task cancellation (``asyncio.CancelledError``) is not an outcome; it
propagates as usual.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, NoReturn, TypeVar, Union

from .config import FetchErrorPolicy, WaitConfig
from .exceptions import (
    WaitCanceledError,
    WaitFailedError,
    WaitFetchError,
    WaitTimeoutError,
)
from .observability.constants import (
    WAIT_DURATION_SECONDS,
    WAIT_FETCH_FAILURES_TOTAL,
    WAIT_POLLS_TOTAL,
    WAITS_IN_PROGRESS,
    WAITS_TOTAL,
)
from .observability.protocols import MetricsCollectorProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")

FetchFn = Callable[[], Awaitable[T]]
Predicate = Callable[[T], bool]


def _describe_status(snapshot: Any) -> str:
    status = getattr(snapshot, "provisioning_status", None) or getattr(snapshot, "status", None)
    return str(status) if status else "unknown"


@dataclass(frozen=True)
class WaitSpec(Generic[T]):
    """
    What to wait for: how to observe a resource and when to stop.

    Built fresh for every wait call and discarded afterwards.

    Attributes:
        fetch: Zero-argument coroutine function returning the current snapshot.
        is_satisfied: Pure predicate over a snapshot. Must return False (not
            raise) for partially initialised snapshots.
        poll_interval: Minimum seconds between fetch starts.
        timeout: Maximum seconds to wait, measured from the start of the call.
        resource: Short resource kind used in logs and metric labels.
        identifier: Identifier of the watched resource, for logs and errors.
        describe: Renders a snapshot for progress logs. Defaults to its
            provisioning status.
        is_failed: Optional predicate for terminal states from which
            ``is_satisfied`` can never become true. Ends the wait with
            Failed instead of polling until the timeout.
    """

    fetch: FetchFn[T]
    is_satisfied: Predicate[T]
    poll_interval: float
    timeout: float
    resource: str = "resource"
    identifier: str | None = None
    describe: Callable[[T], str] = _describe_status
    is_failed: Predicate[T] | None = None

    def __post_init__(self) -> None:
        if not callable(self.fetch):
            raise ValueError("fetch must be callable")
        if not callable(self.is_satisfied):
            raise ValueError("is_satisfied must be callable")
        if self.is_failed is not None and not callable(self.is_failed):
            raise ValueError("is_failed must be callable")
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


class OutcomeKind(Enum):
    """Kind of a wait outcome. Values double as metric labels."""

    SATISFIED = "satisfied"
    TIMED_OUT = "timed_out"
    CANCELED = "canceled"
    FETCH_FAILED = "fetch_failed"
    FAILED = "failed"


@dataclass(frozen=True)
class _Outcome:
    """
    Fields shared by every wait outcome.

    Attributes:
        resource: Resource kind from the WaitSpec.
        identifier: Resource identifier from the WaitSpec.
        elapsed: Seconds between the start of the wait and the outcome.
        fetches: Number of fetch attempts, failed ones included.
        last_snapshot: Most recent successfully fetched snapshot, or None.
    """

    kind: ClassVar[OutcomeKind]

    resource: str
    identifier: str | None
    elapsed: float
    fetches: int
    last_snapshot: Any

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SATISFIED

    def _label(self) -> str:
        if self.identifier:
            return f"{self.resource} {self.identifier}"
        return self.resource


@dataclass(frozen=True)
class Satisfied(_Outcome):
    """The predicate held for ``snapshot``."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.SATISFIED

    @property
    def snapshot(self) -> Any:
        return self.last_snapshot

    def unwrap(self) -> Any:
        return self.last_snapshot


@dataclass(frozen=True)
class TimedOut(_Outcome):
    """The predicate never held before the deadline. Retry with a longer timeout."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.TIMED_OUT

    def unwrap(self) -> NoReturn:
        raise WaitTimeoutError(
            f"timed out after {self.elapsed:.1f}s waiting for {self._label()}",
            resource=self.resource,
            identifier=self.identifier,
            last_snapshot=self.last_snapshot,
            elapsed=self.elapsed,
        )


@dataclass(frozen=True)
class Canceled(_Outcome):
    """The caller canceled the wait. Never retry."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.CANCELED

    def unwrap(self) -> NoReturn:
        raise WaitCanceledError(
            f"wait for {self._label()} was canceled",
            resource=self.resource,
            identifier=self.identifier,
            last_snapshot=self.last_snapshot,
        )


@dataclass(frozen=True)
class FetchFailed(_Outcome):
    """Fetching failed ``consecutive_failures`` times in a row (FAIL_FAST only)."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.FETCH_FAILED

    error: BaseException
    consecutive_failures: int

    def unwrap(self) -> NoReturn:
        raise WaitFetchError(
            f"fetching {self._label()} failed {self.consecutive_failures} "
            f"times in a row: {self.error}",
            resource=self.resource,
            identifier=self.identifier,
            last_snapshot=self.last_snapshot,
            consecutive_failures=self.consecutive_failures,
        ) from self.error


@dataclass(frozen=True)
class Failed(_Outcome):
    """``last_snapshot`` is in a terminal state that ``is_failed`` rejects. Never retry."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.FAILED

    def unwrap(self) -> NoReturn:
        raise WaitFailedError(
            f"{self._label()} reached a terminal state: "
            f"{_describe_status(self.last_snapshot)}",
            resource=self.resource,
            identifier=self.identifier,
            last_snapshot=self.last_snapshot,
        )


WaitOutcome = Union[Satisfied, TimedOut, Canceled, FetchFailed, Failed]


class _Poll(Enum):
    """How a single fetch ended."""

    DONE = "done"
    CANCELED = "canceled"
    EXPIRED = "expired"


async def _sleep_until(
    loop: asyncio.AbstractEventLoop,
    when: float,
    cancel_event: asyncio.Event | None,
) -> bool:
    """Sleep until loop time ``when``. Returns True if ``cancel_event`` fired first."""
    if cancel_event is not None and cancel_event.is_set():
        return True
    delay = max(0.0, when - loop.time())
    if cancel_event is None:
        await asyncio.sleep(delay)
        return False
    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=delay)
    except asyncio.TimeoutError:
        return False
    return True


class _WaitRun:
    """Mutable bookkeeping for a single wait call. Never shared."""

    def __init__(
        self,
        spec: WaitSpec[Any],
        config: WaitConfig,
        metrics: MetricsCollectorProtocol | None,
        started_at: float,
    ) -> None:
        self.spec = spec
        self.config = config
        self.metrics = metrics
        self.started_at = started_at
        self.deadline = started_at + spec.timeout
        self.fetches = 0
        self.consecutive_failures = 0
        self.last_error: BaseException | None = None
        self.last_snapshot: Any = None
        self.satisfied = False
        self.failed = False

    @property
    def labels(self) -> dict[str, str]:
        return {"resource": self.spec.resource}

    @property
    def cutoff(self) -> float:
        """Loop time at which an in-flight fetch is abandoned."""
        return self.deadline + self.spec.poll_interval

    def observe(self, snapshot: Any) -> None:
        self.last_snapshot = snapshot
        self.consecutive_failures = 0
        self.satisfied = bool(self.spec.is_satisfied(snapshot))
        is_failed = self.spec.is_failed
        self.failed = not self.satisfied and is_failed is not None and bool(is_failed(snapshot))

    async def _fetch(self) -> Any:
        return await self.spec.fetch()

    async def poll(
        self,
        loop: asyncio.AbstractEventLoop,
        cancel_event: asyncio.Event | None,
        cutoff: float,
    ) -> _Poll:
        """
        Fetch once and evaluate the predicates.

        The fetch races ``cancel_event`` and is abandoned when the event
        fires or loop time reaches ``cutoff``, whichever comes first.
        """
        self.fetches += 1
        if self.metrics is not None:
            self.metrics.inc_counter(WAIT_POLLS_TOTAL, labels=self.labels)

        fetch_task = asyncio.ensure_future(self._fetch())
        racers: set[asyncio.Future[Any]] = {fetch_task}
        cancel_task = None
        if cancel_event is not None:
            cancel_task = asyncio.ensure_future(cancel_event.wait())
            racers.add(cancel_task)
        try:
            done, _ = await asyncio.wait(
                racers,
                timeout=max(0.0, cutoff - loop.time()),
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            for task in racers:
                task.cancel()

        if fetch_task not in done:
            await asyncio.gather(fetch_task, return_exceptions=True)
            if cancel_task is not None and cancel_task in done:
                logger.debug(
                    f"Abandoned fetch of {self.spec.resource} "
                    f"{self.spec.identifier or ''} on cancel"
                )
                return _Poll.CANCELED
            logger.warning(
                f"Fetching {self.spec.resource} {self.spec.identifier or ''} "
                f"did not finish before the deadline"
            )
            return _Poll.EXPIRED

        try:
            snapshot = fetch_task.result()
        except Exception as e:
            self.consecutive_failures += 1
            self.last_error = e
            self.satisfied = False
            self.failed = False
            if self.metrics is not None:
                self.metrics.inc_counter(WAIT_FETCH_FAILURES_TOTAL, labels=self.labels)
            logger.warning(
                f"Fetching {self.spec.resource} {self.spec.identifier or ''} failed "
                f"({self.consecutive_failures} in a row): {e}"
            )
            return _Poll.DONE
        self.observe(snapshot)
        return _Poll.DONE

    @property
    def fetch_failures_exhausted(self) -> bool:
        return (
            self.config.fetch_error_policy is FetchErrorPolicy.FAIL_FAST
            and self.consecutive_failures >= self.config.max_consecutive_failures
        )

    def verdict(self) -> type[_Outcome] | None:
        """Outcome type the last observation settles on, or None to keep polling."""
        if self.satisfied:
            return Satisfied
        if self.failed:
            return Failed
        if self.fetch_failures_exhausted:
            return FetchFailed
        return None


class ProvisioningWaiter:
    """
    Runs WaitSpecs with a shared WaitConfig and metrics sink.

    The waiter itself holds no per-wait state, so one instance can serve any
    number of concurrent waits (e.g. ``asyncio.gather`` over several
    resources).

    Example:
        >>> waiter = ProvisioningWaiter(WaitConfig(poll_interval=10, timeout=600))
        >>> spec = WaitSpec(
        ...     fetch=lambda: client.ports.get_port(uid),
        ...     is_satisfied=is_provisioned,
        ...     poll_interval=10,
        ...     timeout=600,
        ...     resource="port",
        ...     identifier=uid,
        ... )
        >>> outcome = await waiter.wait(spec)
    """

    def __init__(
        self,
        config: WaitConfig | None = None,
        metrics: MetricsCollectorProtocol | None = None,
    ) -> None:
        self.config = config or WaitConfig()
        self.metrics = metrics

    def spec(
        self,
        fetch: FetchFn[T],
        is_satisfied: Predicate[T],
        *,
        resource: str,
        identifier: str | None = None,
        poll_interval: float | None = None,
        timeout: float | None = None,
        is_failed: Predicate[T] | None = None,
    ) -> WaitSpec[T]:
        """Build a WaitSpec, filling interval and timeout from the config."""
        return WaitSpec(
            fetch=fetch,
            is_satisfied=is_satisfied,
            poll_interval=poll_interval or self.config.poll_interval,
            timeout=timeout or self.config.timeout,
            resource=resource,
            identifier=identifier,
            is_failed=is_failed,
        )

    async def wait(
        self,
        spec: WaitSpec[T],
        *,
        cancel_event: asyncio.Event | None = None,
        initial_snapshot: T | None = None,
    ) -> WaitOutcome:
        """
        Block until ``spec.is_satisfied`` holds, ``spec.is_failed`` reports a
        terminal state, the deadline passes, or ``cancel_event`` is set.

        Args:
            spec: What to fetch and when to stop.
            cancel_event: Setting this event ends the wait with Canceled.
            initial_snapshot: State the caller already holds (e.g. the body
                of an update response); used for the first check instead of
                a fetch.

        Returns:
            Satisfied, TimedOut, Canceled, FetchFailed, or Failed.
        """
        loop = asyncio.get_running_loop()
        run = _WaitRun(spec, self.config, self.metrics, loop.time())
        label = f"{spec.resource} {spec.identifier or ''}".rstrip()

        logger.debug(
            f"Waiting for {label} (timeout={spec.timeout}s, "
            f"poll_interval={spec.poll_interval}s)"
        )
        if self.metrics is not None:
            self.metrics.inc_gauge(WAITS_IN_PROGRESS, labels=run.labels)
        try:
            return await self._run(loop, run, cancel_event, initial_snapshot)
        finally:
            if self.metrics is not None:
                self.metrics.dec_gauge(WAITS_IN_PROGRESS, labels=run.labels)

    async def _run(
        self,
        loop: asyncio.AbstractEventLoop,
        run: _WaitRun,
        cancel_event: asyncio.Event | None,
        initial_snapshot: Any,
    ) -> WaitOutcome:
        spec = run.spec

        if cancel_event is not None and cancel_event.is_set():
            return self._finish(loop, run, Canceled)

        last_fetch_at = loop.time()
        if initial_snapshot is not None:
            run.observe(initial_snapshot)
        else:
            result = await run.poll(loop, cancel_event, run.cutoff)
            if result is _Poll.CANCELED:
                return await self._canceled(loop, run)
            if result is _Poll.EXPIRED:
                return self._timed_out(loop, run)
        verdict = run.verdict()
        if verdict is not None:
            return self._finish(loop, run, verdict)

        tick = 0
        while True:
            tick += 1
            next_fetch_at = last_fetch_at + spec.poll_interval
            final_tick = next_fetch_at >= run.deadline

            if await _sleep_until(loop, next_fetch_at, cancel_event):
                return await self._canceled(loop, run)

            last_fetch_at = loop.time()
            result = await run.poll(loop, cancel_event, run.cutoff)
            if result is _Poll.CANCELED:
                return await self._canceled(loop, run)
            if result is _Poll.DONE:
                verdict = run.verdict()
                if verdict is not None:
                    return self._finish(loop, run, verdict)
            if result is _Poll.EXPIRED or final_tick or loop.time() >= run.deadline:
                return self._timed_out(loop, run)

            every = self.config.progress_log_every
            if every and tick % every == 0:
                logger.info(
                    f"{spec.resource} {spec.identifier or ''} is still converging. "
                    f"Status: {spec.describe(run.last_snapshot)}"
                )

    async def _canceled(self, loop: asyncio.AbstractEventLoop, run: _WaitRun) -> WaitOutcome:
        """Canceled, unless ``check_on_cancel`` finds the target already reached."""
        if self.config.check_on_cancel:
            cutoff = min(run.cutoff, loop.time() + run.spec.poll_interval)
            if await run.poll(loop, None, cutoff) is _Poll.DONE and run.satisfied:
                return self._finish(loop, run, Satisfied)
        return self._finish(loop, run, Canceled)

    def _timed_out(self, loop: asyncio.AbstractEventLoop, run: _WaitRun) -> WaitOutcome:
        spec = run.spec
        logger.info(
            f"Wait cycle for {spec.resource} {spec.identifier or ''} complete "
            f"without reaching target state. Status: "
            f"{spec.describe(run.last_snapshot)}"
        )
        return self._finish(loop, run, TimedOut)

    def _finish(
        self,
        loop: asyncio.AbstractEventLoop,
        run: _WaitRun,
        outcome_type: type[_Outcome],
    ) -> WaitOutcome:
        elapsed = loop.time() - run.started_at
        common = {
            "resource": run.spec.resource,
            "identifier": run.spec.identifier,
            "elapsed": elapsed,
            "fetches": run.fetches,
            "last_snapshot": run.last_snapshot,
        }
        outcome: WaitOutcome
        if outcome_type is FetchFailed:
            assert run.last_error is not None
            outcome = FetchFailed(
                **common,
                error=run.last_error,
                consecutive_failures=run.consecutive_failures,
            )
        else:
            outcome = outcome_type(**common)  # type: ignore[assignment]

        if outcome.kind is OutcomeKind.FAILED:
            logger.warning(
                f"{run.spec.resource} {run.spec.identifier or ''} reached a terminal state: "
                f"{run.spec.describe(run.last_snapshot)}"
            )

        if self.metrics is not None:
            labels = {"resource": run.spec.resource, "outcome": outcome.kind.value}
            self.metrics.inc_counter(WAITS_TOTAL, labels=labels)
            self.metrics.observe_histogram(WAIT_DURATION_SECONDS, elapsed, labels=labels)

        logger.debug(
            f"Wait for {run.spec.resource} {run.spec.identifier or ''} finished: "
            f"{outcome.kind.value} after {elapsed:.2f}s and {run.fetches} fetches"
        )
        return outcome


async def wait_for(
    fetch: FetchFn[T],
    is_satisfied: Predicate[T],
    *,
    poll_interval: float,
    timeout: float,
    cancel_event: asyncio.Event | None = None,
    fetch_error_policy: FetchErrorPolicy = FetchErrorPolicy.SWALLOW,
    max_consecutive_failures: int = 3,
    check_on_cancel: bool = False,
    progress_log_every: int = 5,
    resource: str = "resource",
    identifier: str | None = None,
    initial_snapshot: T | None = None,
    metrics: MetricsCollectorProtocol | None = None,
    is_failed: Predicate[T] | None = None,
) -> WaitOutcome:
    """
    One-shot wait without building a ProvisioningWaiter first.

    Raises:
        ValueError: If fetch/is_satisfied are not callable or the interval,
            timeout, or failure threshold is out of range.
    """
    config = WaitConfig(
        poll_interval=poll_interval,
        timeout=timeout,
        fetch_error_policy=fetch_error_policy,
        max_consecutive_failures=max_consecutive_failures,
        check_on_cancel=check_on_cancel,
        progress_log_every=progress_log_every,
    )
    spec = WaitSpec(
        fetch=fetch,
        is_satisfied=is_satisfied,
        poll_interval=poll_interval,
        timeout=timeout,
        resource=resource,
        identifier=identifier,
        is_failed=is_failed,
    )
    waiter = ProvisioningWaiter(config, metrics)
    return await waiter.wait(
        spec, cancel_event=cancel_event, initial_snapshot=initial_snapshot
    )


__all__ = [
    "Canceled",
    "Failed",
    "FetchFailed",
    "OutcomeKind",
    "ProvisioningWaiter",
    "Satisfied",
    "TimedOut",
    "WaitOutcome",
    "WaitSpec",
    "wait_for",
]
