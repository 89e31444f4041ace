import sys
from pathlib import Path

root_path = Path(__file__).parent.parent
sys.path.append(str(root_path))

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from core.config import settings
from core.database import create_db_tables
from core.seed import seed_sample_data
from core.templates import render_template
from api.routers import owners_router

import logging

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

# CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def setup_logging():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@app.on_event("startup")
async def startup():
    setup_logging()
    logger.info("Starting Petclinic Backend...")

    await create_db_tables()
    if settings.SEED_DATA:
        await seed_sample_data()


@app.on_event("shutdown")
def shutdown_event():
    logger.info("Application shutdown")


# Endpoints
@app.get("/", response_class=HTMLResponse)
async def root(request: Request):
    return render_template("welcome.html", {}, request)


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "service": "petclinic-backend"}


app.include_router(owners_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
