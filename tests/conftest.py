"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# backend/ holds the top-level packages (config, core, models, ...)
BACKEND_ROOT = Path(__file__).parent.parent / "backend"
sys.path.insert(0, str(BACKEND_ROOT))


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: needs a running Selenium server and the demo app")


# ============================================================
# Fake clock
# ============================================================

class FakeClock:
    """Monotonic clock that only moves when sleep() is called."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def waiter(clock):
    from core.waiter import Waiter, RetryPolicy
    return Waiter(RetryPolicy(interval=1.0, max_attempts=60), sleep=clock.sleep, clock=clock)


# ============================================================
# Fake command processor
# ============================================================

class FakeCommandProcessor:
    """
    In-memory stand-in for the remote browser.

    `elements` maps full locators to their text. A qxClickAt on the toggle
    button changes its text from 'Before' to 'After'.
    """

    def __init__(self, elements=None, appear_after=0, on_click=None):
        self.elements = dict(elements or {})
        self.appear_after = appear_after
        self.on_click = on_click
        self.commands = []
        self.started = False
        self.stopped = False
        self.opened = []
        self._presence_checks = 0

    def start(self):
        self.started = True

    def stop(self):
        self.stopped = True

    def do_command(self, command, args):
        self.commands.append((command, list(args)))
        if command == 'open':
            self.opened.append(args[0])
            return None
        if command == 'isElementPresent':
            self._presence_checks += 1
            return self._presence_checks > self.appear_after and args[0] in self.elements
        if command == 'getText':
            return self.elements[args[0]]
        if command in ('qxClickAt', 'qxClick', 'click'):
            if self.on_click:
                self.on_click(self, args[0])
            elif self.elements.get(args[0]) == 'Before':
                self.elements[args[0]] = 'After'
            return None
        raise ValueError(f"Unexpected command {command}")


@pytest.fixture
def button_page():
    return FakeCommandProcessor(elements={'id=myButton': 'Before'})


@pytest.fixture
def session(button_page, waiter):
    from core.remote_selenium import RemoteSelenium
    return RemoteSelenium(command_processor=button_page, waiter=waiter, settle_delay=1.0)


@pytest.fixture
def make_page():
    return FakeCommandProcessor
