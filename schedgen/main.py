import logging

from fastapi import FastAPI, HTTPException

from schedgen.config import get_settings
from schedgen.data.defaults import default_request
from schedgen.schemas import (
    GenerateRequest,
    GenerationReport,
    GridResponse,
)
from schedgen.services.schedule_service import ScheduleService

logging.basicConfig(level=get_settings().log_level.upper())

app = FastAPI(title="Weekly Schedule Generator")

service = ScheduleService()


@app.post("/generate", response_model=GenerationReport)
def generate_schedule(payload: GenerateRequest):
    return service.generate(payload)


@app.post("/generate/grid/{group_id}", response_model=GridResponse)
def generate_group_grid(group_id: str, payload: GenerateRequest):
    report = service.generate(payload)
    try:
        return service.group_grid(payload, report, group_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/defaults", response_model=GenerateRequest)
def get_defaults():
    return default_request()
