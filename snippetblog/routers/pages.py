from fastapi import APIRouter, Depends

from snippetblog.schemas.blog import AboutInfo
from snippetblog.settings import Settings, get_settings

router = APIRouter()


@router.get("/about", response_model=AboutInfo)
def about(current_settings: Settings = Depends(get_settings)):
    return AboutInfo(
        title=current_settings.SITE_TITLE,
        description=current_settings.SITE_DESCRIPTION,
        source_url=current_settings.SITE_SOURCE_URL or None,
    )
