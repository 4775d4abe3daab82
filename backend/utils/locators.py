# utils/locators.py
from typing import Tuple
from selenium.webdriver.common.by import By

ID_PREFIX = 'id='

STRATEGIES = {
    'id': By.ID,
    'identifier': By.ID,
    'name': By.NAME,
    'css': By.CSS_SELECTOR,
    'xpath': By.XPATH,
    'link': By.LINK_TEXT,
}


def to_id_locator(name: str) -> str:
    """Bare widget name -> full locator. Always prefixed, even if it already looks like one."""
    return ID_PREFIX + name


def parse_locator(locator: str) -> Tuple[str, str]:
    if not locator:
        raise ValueError('Empty locator')
    if locator.startswith('//'):
        return By.XPATH, locator
    strategy, sep, value = locator.partition('=')
    if sep and strategy in STRATEGIES:
        return STRATEGIES[strategy], value
    return By.ID, locator
