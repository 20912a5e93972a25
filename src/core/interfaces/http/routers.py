"""API router configuration."""

from fastapi import APIRouter

from src.modules.contacts.interfaces.admin_router import (
    router as admin_contacts_router,
)
from src.modules.contacts.interfaces.router import router as contact_router
from src.modules.newsletter.interfaces.admin_router import (
    router as admin_newsletter_router,
)
from src.modules.newsletter.interfaces.router import router as newsletter_router
from src.modules.pages.interfaces.router import router as pages_router
from src.modules.posts.interfaces.admin_router import router as admin_posts_router
from src.modules.posts.interfaces.router import router as posts_router
from src.modules.programs.interfaces.admin_router import (
    router as admin_programs_router,
)
from src.modules.programs.interfaces.router import router as programs_router
from src.modules.taxonomy.interfaces.router import router as taxonomy_router

api_router = APIRouter()

# Public content
api_router.include_router(programs_router)
api_router.include_router(posts_router)
api_router.include_router(taxonomy_router)
api_router.include_router(pages_router)

# Forms
api_router.include_router(contact_router)
api_router.include_router(newsletter_router)

# Admin
api_router.include_router(admin_programs_router)
api_router.include_router(admin_posts_router)
api_router.include_router(admin_contacts_router)
api_router.include_router(admin_newsletter_router)
