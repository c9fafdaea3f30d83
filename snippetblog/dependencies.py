from fastapi import Depends, Request

from snippetblog.repos.posts_repo import FilePostsRepo
from snippetblog.services.code_runner import CodeRunner
from snippetblog.services.posts_service import PostsService
from snippetblog.settings import Settings, get_settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.posts_path, current_settings.POST_EXTENSION)


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(repo=repo, abridge_limit=current_settings.ABRIDGE_LIMIT)


def get_http_client(request: Request):
    return request.app.state.http_client


def get_code_runner(
    client=Depends(get_http_client),
    current_settings: Settings = Depends(get_settings),
):
    return CodeRunner(
        client,
        url=current_settings.RUNNER_URL,
        token=current_settings.RUNNER_TOKEN,
        filename=current_settings.RUNNER_FILENAME,
        timeout=current_settings.RUNNER_TIMEOUT,
    )
