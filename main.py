# main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from campusnet.api.v1.api import api_router
from campusnet.config import CORS_ORIGINS
from campusnet.database import engine
from campusnet.models import Base
import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create every table on startup
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready.")

    yield


app = FastAPI(
    title="CampusNet API",
    description="Messaging, posts and notifications for officials, teachers and students.",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")

@app.get("/")
def read_root():
    return {"message": "Welcome to the CampusNet API! Visit /docs for API documentation."}
