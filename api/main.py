import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from core import config, db, errors, mailer
from daily_activities import router as daily_activities_router
from feedings import router as feedings_router
from medical_history import router as medical_history_router
from pets import router as pets_router
from users import router as users_router

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    if db.apply_schema_on_startup():
        await db.apply_schema()
    await mailer.verify_connection()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(
    title="PetSync API",
    version="1.0.0",
    description="Pets, their owners and their feeding, medical and activity records.",
    lifespan=lifespan,
)

# Only the configured frontend may call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.register_error_handlers(app)

api_v1 = APIRouter(prefix="/api/v1")
api_v1.include_router(users_router.router, tags=["user"])
api_v1.include_router(auth_router.router, tags=["auth"])
api_v1.include_router(pets_router.router, tags=["pet"])
api_v1.include_router(feedings_router.router, tags=["feeding"])
api_v1.include_router(medical_history_router.router, tags=["medical_history"])
api_v1.include_router(daily_activities_router.router, tags=["daily_activity"])
app.include_router(api_v1)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "petsync api"}
