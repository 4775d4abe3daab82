# core/remote_selenium.py
import logging
from typing import Optional

from config.settings import Config
from core.command_processor import WebDriverCommandProcessor
from core.waiter import RetryPolicy, Waiter
from models.element import WaitResult
from utils.locators import to_id_locator


class RemoteSelenium:
    """
    Remote browser client addressing widgets by their custom widget id.

    Every locator passed in is a bare widget name and is sent as "id=<name>".
    Clicks go through the qxClickAt command so mousedown/mouseup reach the page.
    """

    CLICK_COMMAND = 'qxClickAt'

    def __init__(self, server_host: str = 'localhost', server_port: int = 4444,
                 browser_start_command: str = '*firefox', browser_url: str = '',
                 command_processor=None, waiter: Optional[Waiter] = None,
                 settle_delay: float = 1.0, headless: bool = True, server_path: str = '/wd/hub'):
        self.browser_url = browser_url
        self.command_processor = command_processor or WebDriverCommandProcessor(
            server_host, server_port, browser_start_command, browser_url,
            headless=headless, server_path=server_path)
        self.waiter = waiter or Waiter()
        self.settle_delay = settle_delay
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config=Config, **overrides) -> 'RemoteSelenium':
        kwargs = dict(
            server_host=config.SELENIUM_HOST,
            server_port=config.SELENIUM_PORT,
            browser_start_command=config.BROWSER_START_COMMAND,
            browser_url=config.BASE_URL,
            waiter=Waiter(RetryPolicy(interval=config.POLL_INTERVAL, max_attempts=config.POLL_ATTEMPTS)),
            settle_delay=config.SETTLE_DELAY,
            headless=config.HEADLESS,
            server_path=config.SELENIUM_PATH,
        )
        kwargs.update(overrides)
        return cls(**kwargs)

    def __enter__(self) -> 'RemoteSelenium':
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()

    def start(self) -> None:
        self.command_processor.start()

    def stop(self) -> None:
        self.command_processor.stop()

    def open(self, url: str = '') -> None:
        self.command_processor.do_command('open', [url])

    def click(self, locator: str, event_params: str = '') -> None:
        args = [to_id_locator(locator)]
        if event_params:
            args.append(event_params)
        self.command_processor.do_command(self.CLICK_COMMAND, args)

    def get_text(self, locator: str) -> str:
        return self.command_processor.do_command('getText', [to_id_locator(locator)])

    def is_element_present(self, locator: str) -> bool:
        return bool(self.command_processor.do_command('isElementPresent', [to_id_locator(locator)]))

    def wait_for_element_present(self, locator: str, policy: Optional[RetryPolicy] = None) -> WaitResult:
        return self.waiter.wait_for_element_present(self.is_element_present, locator, policy)

    def click_and_wait(self, locator: str, expected_text: Optional[str] = None,
                       policy: Optional[RetryPolicy] = None) -> Optional[WaitResult]:
        """
        Click, then give the page the settle delay to react.

        With `expected_text`, keep polling the element text until it matches and
        return the wait result; without it nothing is checked.
        """
        self.click(locator)
        self.waiter.pause(self.settle_delay)
        if expected_text is None:
            return None
        result = self.waiter.poll_until(lambda: self.get_text(locator) == expected_text,
                                        f"{locator} text == '{expected_text}'", policy)
        if not result.found:
            self.logger.warning(f"'{locator}' text did not become '{expected_text}' after click")
        return result
