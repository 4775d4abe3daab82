"""
Locator convention tests
"""

import pytest
from selenium.webdriver.common.by import By

from utils.locators import parse_locator, to_id_locator


def test_bare_name_gets_id_prefix():
    assert to_id_locator('myButton') == 'id=myButton'


@pytest.mark.parametrize('locator, expected', [
    ('id=myButton', (By.ID, 'myButton')),
    ('identifier=myButton', (By.ID, 'myButton')),
    ('name=user', (By.NAME, 'user')),
    ('css=div.shell > button', (By.CSS_SELECTOR, 'div.shell > button')),
    ('xpath=//button[@id="myButton"]', (By.XPATH, '//button[@id="myButton"]')),
    ('link=Home', (By.LINK_TEXT, 'Home')),
    ('//button', (By.XPATH, '//button')),
    ('myButton', (By.ID, 'myButton')),
    ('w10=x', (By.ID, 'w10=x')),
])
def test_parse_locator(locator, expected):
    assert parse_locator(locator) == expected


def test_css_value_may_contain_equals():
    assert parse_locator('css=button[id=myButton]') == (By.CSS_SELECTOR, 'button[id=myButton]')


def test_empty_locator():
    with pytest.raises(ValueError):
        parse_locator('')
