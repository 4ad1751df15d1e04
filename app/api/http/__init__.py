from app.api.http.greeting import router as greeting_router
from app.api.http.posts import router as posts_router

__all__ = [
    "greeting_router",
    "posts_router"
]
