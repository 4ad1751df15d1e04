from app.domains.posts.entities import Post
from app.domains.posts.schemas import GreetingForm, PostCreate
from app.domains.posts.services import PostService

__all__ = [
    "Post",
    "GreetingForm", "PostCreate",
    "PostService"
]
