from fastapi import Depends

from app.repos.content_repo import FilesystemContentRepo
from app.security import get_settings
from app.services.pages_service import PagesService
from app.services.posts_service import PostsService


def get_posts_repo(current_settings=Depends(get_settings)):
    return FilesystemContentRepo(
        current_settings.CONTENT_DIR, current_settings.CONTENT_EXTENSION
    )


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings=Depends(get_settings),
):
    return PostsService(repo=repo, words_per_minute=current_settings.WORDS_PER_MINUTE)


def get_services_service(current_settings=Depends(get_settings)):
    return PagesService(
        FilesystemContentRepo(
            current_settings.SERVICES_DIR, current_settings.CONTENT_EXTENSION
        )
    )


def get_projects_service(current_settings=Depends(get_settings)):
    return PagesService(
        FilesystemContentRepo(
            current_settings.PROJECTS_DIR, current_settings.CONTENT_EXTENSION
        )
    )
