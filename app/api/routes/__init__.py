from app.api.routes.root import router as root_router
from app.api.routes.users import router as users_router

__all__ = [
    "root_router",
    "users_router",
]
