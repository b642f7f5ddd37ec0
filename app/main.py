import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI

from app.routers import pages, posts
from app.security import get_api_key
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Site Content API", description="Blog posts, services and projects")


@asynccontextmanager
async def lifespan(app: FastAPI):
    for name, directory in settings.content_dirs.items():
        if Path(directory).is_dir():
            logger.info(f"Serving {name} content from {directory}")
        else:
            logger.warning(f"Content directory for {name} not found: {directory}")
    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router, dependencies=[Depends(get_api_key)])
app.include_router(pages.services_router, dependencies=[Depends(get_api_key)])
app.include_router(pages.projects_router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "Site Content API is running"}
