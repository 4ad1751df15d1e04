from app.db.models.post import Post

__all__ = [
    "Post",
]
