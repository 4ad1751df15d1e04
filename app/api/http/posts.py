from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
import uuid

from app.api.deps import get_post_form, get_post_service
from app.core.errors import NotFound
from app.domains.posts.schemas import PostCreate
from app.domains.posts.services import PostService

router = APIRouter(tags=["posts"])


@router.post("/posts", response_class=PlainTextResponse)
async def create_post(
    post_data: PostCreate = Depends(get_post_form),
    post_service: PostService = Depends(get_post_service)
):
    """Создание новой записи, в ответе её идентификатор"""
    post_uuid = await post_service.insert(post_data.title, post_data.content)
    return str(post_uuid)


@router.get("/posts/{post_uuid}", response_class=PlainTextResponse)
async def get_post(
    post_uuid: uuid.UUID,
    post_service: PostService = Depends(get_post_service)
):
    """Получение записи по UUID"""
    post = await post_service.get(post_uuid)

    if not post:
        raise NotFound(f"Post {post_uuid} not found")

    return post_service.render(post)
