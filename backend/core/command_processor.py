# core/command_processor.py
import logging
from typing import Dict, List, Optional, Tuple
from urllib.parse import urljoin

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.remote.webelement import WebElement

from utils.locators import parse_locator
from utils.server_utils import server_url


class UnknownCommandError(ValueError):
    pass


class UnsupportedBrowserError(ValueError):
    pass


class SessionNotStartedError(RuntimeError):
    pass


BROWSER_ALIASES = {
    'firefox': 'firefox',
    'firefoxproxy': 'firefox',
    'firefoxchrome': 'firefox',
    'chrome': 'chrome',
    'googlechrome': 'chrome',
    'edge': 'edge',
    'microsoftedge': 'edge',
}

MOUSE_BUTTONS = ('left', 'middle', 'right')

# Fires focus, mouseover, mousedown, mouseup and click on arguments[0].
# Toolkits like qooxdoo react to mousedown/mouseup rather than click.
QX_CLICK_SCRIPT = """
var element = arguments[0];
var params = arguments[1] || {};
var buttons = {left: 0, middle: 1, right: 2};
if (arguments[2]) {
    var rect = element.getBoundingClientRect();
    params.clientX = Math.round(rect.left);
    params.clientY = Math.round(rect.top);
}
function fire(type) {
    element.dispatchEvent(new MouseEvent(type, {
        bubbles: params.bubbles !== false,
        cancelable: params.cancelable !== false,
        view: window,
        detail: params.detail === undefined ? 1 : params.detail,
        screenX: params.screenX || 0,
        screenY: params.screenY || 0,
        clientX: params.clientX || 0,
        clientY: params.clientY || 0,
        ctrlKey: !!params.ctrlKey,
        altKey: !!params.altKey,
        shiftKey: !!params.shiftKey,
        metaKey: !!params.metaKey,
        button: buttons[params.button || 'left']
    }));
}
if (element.focus) { element.focus(); }
fire('mouseover');
fire('mousedown');
fire('mouseup');
fire('click');
"""


def parse_browser_start_command(command: str) -> Tuple[str, Optional[str]]:
    """'*firefox C:/Program Files/Mozilla Firefox/firefox.exe' -> ('firefox', 'C:/Program Files/...')"""
    command = (command or '').strip()
    if not command:
        raise UnsupportedBrowserError('Empty browser start command')
    name, _, binary = command.partition(' ')
    browser = BROWSER_ALIASES.get(name.lstrip('*').lower())
    if browser is None:
        raise UnsupportedBrowserError(f"Unsupported browser start command: {command}")
    return browser, binary.strip() or None


def parse_event_params(event_params: str) -> Dict:
    """'button=right, shiftKey=true, clientX=300' -> {'button': 'right', 'shiftKey': True, 'clientX': 300}"""
    params = {}
    for item in (event_params or '').split(','):
        item = item.strip()
        if not item:
            continue
        key, sep, value = item.partition('=')
        key, value = key.strip(), value.strip()
        if not sep or not key:
            raise ValueError(f"Malformed event parameter: '{item}'")
        if value.lower() in ('true', 'false'):
            params[key] = value.lower() == 'true'
        elif value.lstrip('-').isdigit():
            params[key] = int(value)
        else:
            params[key] = value
    button = params.get('button', 'left')
    if button not in MOUSE_BUTTONS:
        raise ValueError(f"Unknown mouse button: '{button}'")
    return params


def build_browser_options(browser: str, binary: Optional[str] = None, headless: bool = True):
    if browser == 'firefox':
        options = FirefoxOptions()
        if headless:
            options.add_argument('-headless')
    elif browser == 'chrome':
        options = ChromeOptions()
        if headless:
            options.add_argument('--headless')
        options.add_argument('--no-sandbox')
        options.add_argument('--disable-dev-shm-usage')
    elif browser == 'edge':
        options = EdgeOptions()
        if headless:
            options.add_argument('--headless')
    else:
        raise UnsupportedBrowserError(f"Unsupported browser: {browser}")
    if binary:
        options.binary_location = binary
    return options


class WebDriverCommandProcessor:
    """Executes named remote-control commands on a Selenium remote WebDriver session."""

    def __init__(self, server_host: str, server_port: int, browser_start_command: str,
                 browser_url: str, headless: bool = True, server_path: str = '/wd/hub'):
        self.server_host = server_host
        self.server_port = server_port
        self.server_path = server_path
        self.browser_start_command = browser_start_command
        self.browser_url = browser_url
        self.headless = headless
        self.driver = None
        self.logger = logging.getLogger(__name__)
        self._commands = {
            'open': self._open,
            'click': self._click,
            'qxClick': self._qx_click,
            'qxClickAt': self._qx_click_at,
            'getText': self._get_text,
            'getTitle': self._get_title,
            'isElementPresent': self._is_element_present,
        }

    @property
    def executor_url(self) -> str:
        return server_url(self.server_host, self.server_port, self.server_path)

    def start(self) -> None:
        if self.driver is not None:
            return
        browser, binary = parse_browser_start_command(self.browser_start_command)
        options = build_browser_options(browser, binary, self.headless)
        try:
            self.driver = webdriver.Remote(command_executor=self.executor_url, options=options)
        except Exception as e:
            self.logger.error(f"Error starting {browser} session on {self.executor_url}: {e}")
            raise
        self.logger.info(f"Started {browser} session on {self.executor_url}")

    def stop(self) -> None:
        if self.driver is None:
            return
        try:
            self.driver.quit()
            self.logger.info("Remote session closed")
        finally:
            self.driver = None

    def do_command(self, command: str, args: List[str]):
        handler = self._commands.get(command)
        if handler is None:
            raise UnknownCommandError(f"Unknown command: {command}")
        if self.driver is None:
            raise SessionNotStartedError(f"Cannot run '{command}' before the session is started")
        self.logger.debug(f"{command}({', '.join(args)})")
        return handler(*args)

    def _find(self, locator: str) -> WebElement:
        by, value = parse_locator(locator)
        return self.driver.find_element(by, value)

    def _open(self, url: str = ''):
        target = urljoin(self.browser_url, url)
        self.driver.get(target)

    def _click(self, locator: str):
        self._find(locator).click()

    def _qx_click(self, locator: str, event_params: str = ''):
        element = self._find(locator)
        self.driver.execute_script(QX_CLICK_SCRIPT, element, parse_event_params(event_params), False)

    def _qx_click_at(self, locator: str, event_params: str = ''):
        element = self._find(locator)
        self.driver.execute_script(QX_CLICK_SCRIPT, element, parse_event_params(event_params), True)

    def _get_text(self, locator: str) -> str:
        return self._find(locator).text

    def _get_title(self) -> str:
        return self.driver.title

    def _is_element_present(self, locator: str) -> bool:
        by, value = parse_locator(locator)
        return len(self.driver.find_elements(by, value)) > 0
