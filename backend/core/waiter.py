# core/waiter.py
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Type

from models.element import WaitResult

DEFAULT_INTERVAL = 1.0
DEFAULT_MAX_ATTEMPTS = 60


@dataclass
class RetryPolicy:
    """How often to poll, when to give up, and which errors count as "not yet"."""
    interval: float = DEFAULT_INTERVAL
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    deadline: Optional[float] = None
    retry_on: Tuple[Type[Exception], ...] = (Exception,)

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.interval < 0:
            raise ValueError(f"interval must not be negative, got {self.interval}")
        if self.deadline is not None and self.deadline < 0:
            raise ValueError(f"deadline must not be negative, got {self.deadline}")


class Waiter:
    def __init__(self, policy: Optional[RetryPolicy] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 clock: Callable[[], float] = time.monotonic):
        self.policy = policy or RetryPolicy()
        self.sleep = sleep
        self.clock = clock
        self.logger = logging.getLogger(__name__)

    def poll_until(self, condition: Callable[[], bool], description: str = 'condition',
                   policy: Optional[RetryPolicy] = None) -> WaitResult:
        """
        Call `condition` until it returns something truthy or the policy gives up.

        Errors listed in `policy.retry_on` count as a falsy attempt; anything
        else propagates. Never raises on timeout, check the returned result.
        """
        policy = policy or self.policy
        start = self.clock()
        attempts = 0
        last_error = ''
        while True:
            attempts += 1
            try:
                if condition():
                    return WaitResult(True, attempts, self.clock() - start, last_error, description)
            except policy.retry_on as e:
                last_error = str(e).strip() or type(e).__name__
                self.logger.debug(f"Attempt {attempts} for {description} failed: {last_error}")
            elapsed = self.clock() - start
            out_of_time = policy.deadline is not None and elapsed >= policy.deadline
            if attempts >= policy.max_attempts or out_of_time:
                self.logger.warning(f"timeout: {description} not met after {attempts} attempts ({elapsed:.1f}s)")
                return WaitResult(False, attempts, elapsed, last_error, description)
            pause = policy.interval
            if policy.deadline is not None:
                pause = min(pause, policy.deadline - elapsed)
            self.pause(pause)

    def wait_for_element_present(self, is_present: Callable[[str], bool], locator: str,
                                 policy: Optional[RetryPolicy] = None) -> WaitResult:
        return self.poll_until(lambda: is_present(locator), locator, policy)

    def pause(self, seconds: float) -> None:
        if seconds <= 0:
            return
        # time.sleep itself resumes after EINTR; only injected sleepers raise this
        try:
            self.sleep(seconds)
        except InterruptedError as e:
            self.logger.warning(f"Sleep of {seconds}s interrupted, continuing: {e}")
