# routes/api.py
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse
from services.scenario_service import ToggleScenarioService
from config.settings import Config
from typing import Optional
from ui.button_app import render_button_page

router = APIRouter()

# Last report of /run-test, kept in memory
last_results = None

def get_scenario_service():
    return ToggleScenarioService(Config)

@router.get('/', response_class=HTMLResponse)
@router.get('/rap', response_class=HTMLResponse)
def app_page():
    return render_button_page(button_id=Config.BUTTON_ID)

@router.post('/run-test')
def run_test(
    url: Optional[str] = None,
    settle_delay: Optional[float] = Query(None, ge=0, description="Seconds to wait after clicking before checking the label"),
    service: ToggleScenarioService = Depends(get_scenario_service)
):
    global last_results
    try:
        last_results = service.run_and_report(url, settle_delay=settle_delay)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    if 'error' in last_results:
        raise HTTPException(status_code=503, detail=last_results['error'])
    return {"status": "passed" if last_results['passed'] else "failed", "summary": last_results.get('summary', {}), "report": last_results}

@router.get('/results')
def get_results():
    if last_results is None:
        raise HTTPException(status_code=404, detail="No results available. Run a test first.")
    return last_results

@router.get('/status')
def status():
    return {"status": "ok"}
