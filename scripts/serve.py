import uvicorn

from snippetblog.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "snippetblog.main:app",
        host=settings.HOST,
        port=settings.PORT,
        proxy_headers=settings.PROXY_HEADERS,
        forwarded_allow_ips="*" if settings.PROXY_HEADERS else None,
        log_level=settings.LOG_LEVEL.lower(),
    )
