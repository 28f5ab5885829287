# fitmarket/main.py
import os
import time
import logging
import uuid
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text

from fitmarket.routers.auth import router as auth_router
from fitmarket.routers.users import router as users_router, community_router
from fitmarket.routers.workouts import router as workouts_router
from fitmarket.routers.nutrition_plans import router as nutrition_router
from fitmarket.routers.advice import router as advice_router
from fitmarket.routers.purchases import router as purchases_router
from fitmarket.routers.dashboard import router as dashboard_router
from fitmarket.routers.forms import router as forms_router
from fitmarket.routers.anatomy import router as anatomy_router
from fitmarket.db import SessionLocal  # for healthz DB check
from fitmarket.settings import get_settings

log = logging.getLogger("uvicorn")

app = FastAPI(
    title="FitMarket API",
    openapi_tags=[
        {"name": "auth", "description": "Registration, login & logout"},
        {"name": "users", "description": "Profiles and avatars"},
        {"name": "community", "description": "Member directory"},
        {"name": "workouts", "description": "Trainer workout catalog"},
        {"name": "nutrition-plans", "description": "Nutritionist plan catalog"},
        {"name": "advice", "description": "Advice published by professionals"},
        {"name": "purchases", "description": "Simulated purchases of workouts and plans"},
        {"name": "dashboard", "description": "Per-role summary"},
        {"name": "forms", "description": "Publishing form access"},
        {"name": "anatomy", "description": "Anatomy reference"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
def root():
    return {"ok": True, "name": "FitMarket API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": os.getenv("API_VERSION", "dev")}

# Routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(community_router)
app.include_router(workouts_router)
app.include_router(nutrition_router)
app.include_router(advice_router)
app.include_router(purchases_router)
app.include_router(dashboard_router)
app.include_router(forms_router)
app.include_router(anatomy_router)

# Local object storage is served straight from disk
_settings = get_settings()
if _settings.STORAGE_BACKEND == "local":
    Path(_settings.STORAGE_ROOT).mkdir(parents=True, exist_ok=True)
    app.mount("/media", StaticFiles(directory=_settings.STORAGE_ROOT), name="media")
