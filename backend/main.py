# backend/main.py
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

load_dotenv()

from config import settings
from database import SessionLocal, init_db, ping_db
from services.errors import InventoryError
from utils.seed import seed_users
from utils.uploads import UPLOADS_URL

# Router imports
from routes.parts import router as parts_router
from routes.movements import router as movements_router
from routes.users import router as users_router
from routes.alerts import router as alerts_router
from routes.uploads import router as uploads_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialization: schema first, then the operator list
init_db()
with SessionLocal() as _db:
    seed_users(_db, settings.SEED_USERS)

app = FastAPI(title="GMAO Stock API", version="1.0.0")

# Uploads - make sure the directory exists before mounting it
Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
app.mount(UPLOADS_URL, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# CORS configuration
origins = ["*"]
if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Router registration
app.include_router(parts_router, prefix="/api")
app.include_router(movements_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(alerts_router, prefix="/api")
app.include_router(uploads_router, prefix="/api")


@app.get("/")
def read_root():
    return {"message": "GMAO Stock API is running"}


@app.get("/health")
def health():
    try:
        ping_db()
    except SQLAlchemyError as e:
        logger.error("Database health check failed: %s", e)
        return JSONResponse(status_code=503, content={"status": "fail", "database": str(e)})
    return {"status": "pass", "database": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT)
