# models/element.py
from dataclasses import dataclass, field
from datetime import datetime


class WaitTimeout(Exception):
    """Raised when a wait result is checked and the condition never held."""
    pass


@dataclass
class WaitResult:
    found: bool
    attempts: int
    elapsed: float = 0.0
    last_error: str = ''
    locator: str = ''

    def __bool__(self) -> bool:
        return self.found

    @property
    def timed_out(self) -> bool:
        return not self.found

    def raise_for_timeout(self) -> 'WaitResult':
        if not self.found:
            msg = f"'{self.locator or 'condition'}' not met after {self.attempts} attempts ({self.elapsed:.1f}s)"
            if self.last_error:
                msg += f", last error: {self.last_error}"
            raise WaitTimeout(msg)
        return self

    def to_dict(self) -> dict:
        return {
            'found': self.found,
            'attempts': self.attempts,
            'elapsed': round(self.elapsed, 3),
            'last_error': self.last_error,
            'locator': self.locator,
        }


@dataclass
class StepResult:
    name: str
    status: str = 'passed'
    expected: str = ''
    actual: str = ''
    error_message: str = ''
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def passed(self) -> bool:
        return self.status == 'passed'
