import uuid
from typing import Dict


class Post:
    """Сущность записи домена Posts"""

    def __init__(self, uuid: uuid.UUID, title: str, content: str = ""):
        self.uuid = uuid
        self.title = title
        self.content = content

    def to_context(self) -> Dict[str, str]:
        """Контекст для рендеринга шаблона записи"""
        return {
            "id": str(self.uuid),
            "title": self.title,
            "content": self.content,
        }

    @classmethod
    def create_post(cls, title: str, content: str = "") -> "Post":
        """Создание новой записи с новым идентификатором"""
        return cls(uuid=uuid.uuid4(), title=title, content=content)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Post):
            return False
        return self.uuid == other.uuid

    def __hash__(self) -> int:
        return hash(self.uuid)

    def __repr__(self) -> str:
        return f"Post(uuid={self.uuid}, title={self.title})"
