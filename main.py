from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from api import router
from config import get_settings
from services.schedule_service import ScheduleBook
from utils.logger_config import get_logger, setup_logging

#  python -m uvicorn main:app --reload --port 9000 run this
settings = get_settings()
setup_logging()
logger = get_logger(__name__)

app = FastAPI(title=settings.APP_TITLE)
app.state.schedules = ScheduleBook()

# --- Allow front-end access ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
def root():
    return {"message": "FastAPI is running!"}


@app.get("/schedules")
async def list_schedules(request: Request):
    return {"schedules": request.app.state.schedules.names()}


@app.delete("/schedules/{name}", status_code=204)
async def drop_schedule(name: str, request: Request):
    request.app.state.schedules.drop(name)
    logger.info("Dropped schedule %s", name)
    return Response(status_code=204)
