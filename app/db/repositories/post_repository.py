from typing import Optional, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
import logging
import uuid

from app.core.errors import StorageError
from app.db.models.post import Post as PostModel

if TYPE_CHECKING:
    from app.domains.posts.entities import Post

logger = logging.getLogger(__name__)


class PostRepository:
    """Репозиторий для работы с записями"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, post: "Post") -> "Post":
        """Сохранение новой записи"""
        db_post = PostModel(
            uuid=post.uuid,
            title=post.title,
            content=post.content
        )

        self.session.add(db_post)
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to store post {post.uuid}: {e}")
            raise StorageError(f"Cannot store post {post.uuid}") from e

        return self._to_domain(db_post)

    async def get_by_uuid(self, post_uuid: uuid.UUID) -> Optional["Post"]:
        """Получение записи по UUID"""
        try:
            result = await self.session.execute(
                select(PostModel).where(PostModel.uuid == post_uuid)
            )
        except SQLAlchemyError as e:
            # сессия общая: прерванная транзакция не должна пережить запрос
            await self.session.rollback()
            raise StorageError(f"Cannot read post {post_uuid}") from e
        db_post = result.scalar_one_or_none()
        return self._to_domain(db_post) if db_post else None

    async def count(self) -> int:
        """Подсчет количества записей"""
        try:
            result = await self.session.execute(select(func.count(PostModel.uuid)))
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError("Cannot count posts") from e
        return result.scalar()

    def _to_domain(self, db_post: PostModel) -> "Post":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.posts.entities import Post

        return Post(
            uuid=db_post.uuid,
            title=db_post.title,
            content=db_post.content
        )
