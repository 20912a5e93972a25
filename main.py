"""Academy Backend - 培训机构内容服务入口。"""

import sentry_sdk
from fastapi import FastAPI
from fastapi.concurrency import asynccontextmanager
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from src.core.application import security as app_security
from src.core.config import settings
from src.core.domain.exceptions import DomainException
from src.core.infrastructure.database.session import (
    check_db_health,
    close_db,
    init_db,
)
from src.core.infrastructure.logging import setup_logging
from src.core.infrastructure.security import jwt as infra_jwt
from src.core.interfaces.http.exceptions import (
    domain_exception_handler,
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from src.core.interfaces.http.routers import api_router
from src.modules.contacts.application import dependencies as contacts_app_deps
from src.modules.contacts.infrastructure import dependencies as contacts_infra_deps
from src.modules.newsletter.application import dependencies as newsletter_app_deps
from src.modules.newsletter.infrastructure import (
    dependencies as newsletter_infra_deps,
)
from src.modules.pages.application import dependencies as pages_app_deps
from src.modules.pages.infrastructure import dependencies as pages_infra_deps
from src.modules.posts.application import dependencies as posts_app_deps
from src.modules.posts.infrastructure import dependencies as posts_infra_deps
from src.modules.programs.application import dependencies as programs_app_deps
from src.modules.programs.infrastructure import dependencies as programs_infra_deps
from src.modules.taxonomy.application import dependencies as taxonomy_app_deps
from src.modules.taxonomy.infrastructure import dependencies as taxonomy_infra_deps

APP_VERSION = "0.1.0"


def custom_generate_unique_id(route: APIRoute) -> str:
    """Generate unique operation IDs for OpenAPI."""
    if route.tags:
        return f"{route.tags[0]}-{route.name}"
    return route.name


# Initialize Sentry if configured
if settings.SENTRY_DSN and settings.ENVIRONMENT != "local":
    sentry_sdk.init(
        dsn=str(settings.SENTRY_DSN),
        enable_tracing=True,
        environment=settings.ENVIRONMENT,
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Application lifespan manager."""
    setup_logging()
    logger.info("Starting academy backend...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    logger.info("Initializing database connection...")
    await init_db()

    yield

    logger.info("Shutting down academy backend...")
    await close_db()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=(
        "培训机构网站内容接口 - 培训项目、博客文章、分类、静态页面、"
        "联系表单与邮件订阅\n\n"
        "## 认证方式\n\n"
        "公开接口无需认证；`/admin/*` 接口需要 **JWT Bearer**，且 role 为 admin"
    ),
    version=APP_VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url=f"{settings.API_V1_STR}/docs",
    redoc_url=f"{settings.API_V1_STR}/redoc",
    root_path=settings.ROOTPATH,
    generate_unique_id_function=custom_generate_unique_id,
    lifespan=lifespan,
)

# Dependency overrides (application -> infrastructure)
app.dependency_overrides[app_security.get_current_admin] = infra_jwt.get_current_admin

app.dependency_overrides[taxonomy_app_deps.get_program_category_repository] = (
    taxonomy_infra_deps.get_program_category_repository
)
app.dependency_overrides[taxonomy_app_deps.get_post_category_repository] = (
    taxonomy_infra_deps.get_post_category_repository
)

app.dependency_overrides[programs_app_deps.get_program_repository] = (
    programs_infra_deps.get_program_repository
)
app.dependency_overrides[programs_app_deps.get_schedule_repository] = (
    programs_infra_deps.get_schedule_repository
)

app.dependency_overrides[posts_app_deps.get_post_repository] = (
    posts_infra_deps.get_post_repository
)

app.dependency_overrides[pages_app_deps.get_page_repository] = (
    pages_infra_deps.get_page_repository
)

app.dependency_overrides[contacts_app_deps.get_contact_repository] = (
    contacts_infra_deps.get_contact_repository
)

app.dependency_overrides[newsletter_app_deps.get_subscriber_repository] = (
    newsletter_infra_deps.get_subscriber_repository
)

# Exception handlers
app.add_exception_handler(DomainException, domain_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# CORS middleware
if settings.all_cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.all_cors_origins,
        allow_credentials=True,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

# Include API router
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint.

    数据库是唯一的外部依赖，连接失败即视为 unhealthy。
    """
    db_health_result = await check_db_health()
    overall_status = (
        "healthy" if db_health_result.status.value == "ok" else "unhealthy"
    )
    return {
        "status": overall_status,
        "environment": settings.ENVIRONMENT,
        "version": APP_VERSION,
        "components": {"database": db_health_result.to_dict()},
    }


@app.get("/", tags=["root"])
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to Academy API",
        "docs": f"{settings.API_V1_STR}/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.SERVER_PORT,
        reload=settings.ENVIRONMENT == "local",
    )
