# services/scenario_service.py
import json
import logging
import os
from dataclasses import asdict
from datetime import datetime
from typing import Dict, Optional

from config.settings import Config
from core.remote_selenium import RemoteSelenium
from models.element import StepResult
from utils.server_utils import is_selenium_server_up, server_url

BEFORE_TEXT = 'Before'
AFTER_TEXT = 'After'


class ToggleScenarioService:
    """Opens the demo page, checks the button label, clicks it and checks the new label."""

    def __init__(self, config=Config, session_factory=None):
        self.config = config
        self.session_factory = session_factory or RemoteSelenium.from_config
        self.logger = logging.getLogger(__name__)

    def run_and_report(self, url: Optional[str] = None, settle_delay: Optional[float] = None) -> Dict:
        url = url or self.config.BASE_URL
        results = self.run_scenario(url, settle_delay)
        self.print_detailed_report(results)
        self.save_results_to_file(results)
        return results

    def run_scenario(self, url: str, settle_delay: Optional[float] = None) -> Dict:
        results = {
            'url': url,
            'button': self.config.BUTTON_ID,
            'steps': [],
            'wait': None,
            'passed': False,
            'summary': {},
            'timestamp': datetime.now().isoformat(),
        }
        host, port, path = self.config.SELENIUM_HOST, self.config.SELENIUM_PORT, self.config.SELENIUM_PATH
        if not is_selenium_server_up(host, port, path):
            results['error'] = f"Selenium server not reachable at {server_url(host, port, path)}"
            self.logger.error(results['error'])
            return results

        overrides = {} if settle_delay is None else {'settle_delay': settle_delay}
        session = self.session_factory(self.config, **overrides)
        steps = results['steps']
        button = self.config.BUTTON_ID
        try:
            session.start()
            session.open(url)

            wait = session.wait_for_element_present(button)
            results['wait'] = wait.to_dict()
            steps.append(self._step('wait_for_element', wait.found, 'present',
                                    'present' if wait.found else f"absent after {wait.attempts} attempts"))
            if wait.found:
                self._run_toggle_steps(session, button, steps)
        except Exception as e:
            self.logger.error(f"Scenario failed with error: {e}")
            steps.append(StepResult(name='error', status='error', error_message=str(e)))
        finally:
            try:
                session.stop()
            except Exception as e:
                self.logger.error(f"Error stopping session: {e}")

        results['steps'] = [asdict(step) for step in steps]
        passed = sum(1 for step in steps if step.passed)
        results['summary'] = {
            'total_steps': len(steps),
            'passed': passed,
            'failed': len(steps) - passed,
        }
        results['passed'] = bool(steps) and passed == len(steps)
        return results

    def _run_toggle_steps(self, session: RemoteSelenium, button: str, steps: list) -> None:
        before = session.get_text(button)
        steps.append(self._step('initial_text', before == BEFORE_TEXT, BEFORE_TEXT, before))
        if before != BEFORE_TEXT:
            return
        converged = session.click_and_wait(button, expected_text=AFTER_TEXT)
        steps.append(self._step('click_and_wait', converged.found, AFTER_TEXT,
                                'converged' if converged.found else converged.last_error or 'timed out'))
        after = session.get_text(button)
        steps.append(self._step('updated_text', after == AFTER_TEXT, AFTER_TEXT, after))

    def _step(self, name: str, ok: bool, expected: str, actual: str) -> StepResult:
        step = StepResult(name=name, status='passed' if ok else 'failed', expected=expected, actual=actual)
        if not ok:
            step.error_message = f"expected '{expected}', got '{actual}'"
            self.logger.warning(f"Step {name} failed: {step.error_message}")
        else:
            self.logger.info(f"Step {name} passed")
        return step

    def print_detailed_report(self, results: Dict) -> None:
        self.logger.info("=" * 60)
        self.logger.info("TOGGLE BUTTON TEST REPORT")
        self.logger.info("=" * 60)
        if 'error' in results:
            self.logger.error(f"An error occurred: {results['error']}")
            return
        summary = results.get('summary', {})
        self.logger.info(f"URL: {results['url']}")
        self.logger.info(f"Steps: {summary.get('total_steps', 0)} total, {summary.get('passed', 0)} passed, {summary.get('failed', 0)} failed")
        for step in results.get('steps', []):
            line = f"   {step['name']}: {step['status']}"
            if step['error_message']:
                line += f" ({step['error_message']})"
            self.logger.info(line)
        self.logger.info(f"Result: {'PASSED' if results.get('passed') else 'FAILED'}")

    def save_results_to_file(self, results: Dict, filename: Optional[str] = None) -> Optional[str]:
        if not filename:
            safe_url = results.get('url', 'unknown_url').replace('https://', '').replace('http://', '')
            safe_url = safe_url.replace('/', '_').replace(':', '_')
            filename = os.path.join(self.config.REPORT_DIR, f"toggle_test_{safe_url}.json")
        try:
            with open(filename, 'w', encoding='utf-8') as f:
                json.dump(results, f, indent=2, ensure_ascii=False)
            self.logger.info(f"Results saved to: {filename}")
            return filename
        except OSError as e:
            self.logger.error(f"Error saving results: {e}")
            return None
