# utils/server_utils.py
import logging
import requests

logger = logging.getLogger(__name__)


def server_url(host: str, port: int, path: str = '') -> str:
    path = path or ''
    if path and not path.startswith('/'):
        path = '/' + path
    return f"http://{host}:{port}{path.rstrip('/')}"


def is_selenium_server_up(host: str, port: int, path: str = '', timeout: float = 3.0) -> bool:
    url = server_url(host, port, path) + '/status'
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.info(f"Selenium server not reachable at {url}: {e}")
        return False
    if response.status_code != 200:
        logger.info(f"Selenium server at {url} answered {response.status_code}")
        return False
    try:
        value = response.json().get('value', {})
    except ValueError:
        return False
    # Grid 4 reports {"value": {"ready": true}}; older servers omit "ready".
    return bool(value.get('ready', True)) if isinstance(value, dict) else True
