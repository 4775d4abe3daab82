# main.py
import logging
import os
import sys
from services.scenario_service import ToggleScenarioService
from config.settings import Config

# --- FastAPI imports ---
from fastapi import FastAPI
from routes.api import router as api_router
import uvicorn

def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

def run_cli():
    service = ToggleScenarioService(Config)
    try:
        results = service.run_and_report()
    except KeyboardInterrupt:
        logging.warning('Test interrupted by user.')
        return 130
    except Exception as e:
        logging.error(f'Test failed with error: {e}')
        return 1
    return 0 if results.get('passed') else 1

def create_app():
    app = FastAPI(title="Toggle Button Demo")
    app.include_router(api_router)
    return app

def run_api():
    uvicorn.run(create_app(), host="0.0.0.0", port=Config.PORT)

if __name__ == '__main__':
    setup_logging()
    mode = os.getenv('MODE', 'api').lower()  # Default to API mode
    if len(sys.argv) > 1 and sys.argv[1] in ('api', 'cli'):
        mode = sys.argv[1]
    if mode == 'api':
        run_api()
    else:
        sys.exit(run_cli())

# Usage:
#   python main.py           # serve the demo page and API (default)
#   python main.py cli       # run the toggle scenario against BASE_URL
#   MODE=cli python main.py  # same, via env
