from typing import Optional
import logging
import uuid

from app.core.db import Database
from app.core.templates import TemplateStore
from app.db.repositories.post_repository import PostRepository
from app.domains.posts.entities import Post

logger = logging.getLogger(__name__)


class PostService:
    """Сервис для работы с записями

    Каждая операция выполняется под эксклюзивным доступом к единственной
    сессии БД.
    """

    def __init__(self, database: Database, templates: TemplateStore):
        self.database = database
        self.templates = templates

    async def insert(self, title: str, content: str) -> uuid.UUID:
        """Создание новой записи, идентификатор генерируется здесь"""
        post = Post.create_post(title=title, content=content)

        async with self.database.acquire() as session:
            created_post = await PostRepository(session).create(post)

        logger.info(f"Created post {created_post.uuid}")
        return created_post.uuid

    async def get(self, post_uuid: uuid.UUID) -> Optional[Post]:
        """Получение записи по UUID"""
        async with self.database.acquire() as session:
            return await PostRepository(session).get_by_uuid(post_uuid)

    async def count(self) -> int:
        async with self.database.acquire() as session:
            return await PostRepository(session).count()

    def render(self, post: Post) -> str:
        """Рендеринг записи через шаблон"""
        return self.templates.render("post_template", post.to_context())
