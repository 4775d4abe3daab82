# config/settings.py
import os

class Config:
    SELENIUM_HOST = os.getenv('SELENIUM_HOST', 'localhost')
    SELENIUM_PORT = int(os.getenv('SELENIUM_PORT', 4444))
    SELENIUM_PATH = os.getenv('SELENIUM_PATH', '/wd/hub')
    # "*<browser> [executable path]"
    BROWSER_START_COMMAND = os.getenv('BROWSER_START_COMMAND', '*firefox')
    BASE_URL = os.getenv('BASE_URL', 'http://127.0.0.1:10080/rap')
    HEADLESS = os.getenv('HEADLESS', 'true').lower() == 'true'
    POLL_INTERVAL = float(os.getenv('POLL_INTERVAL', 1.0))
    POLL_ATTEMPTS = int(os.getenv('POLL_ATTEMPTS', 60))
    SETTLE_DELAY = float(os.getenv('SETTLE_DELAY', 1.0))
    BUTTON_ID = os.getenv('BUTTON_ID', 'myButton')
    REPORT_DIR = os.getenv('REPORT_DIR', '.')
    PORT = int(os.getenv('PORT', 10080))
