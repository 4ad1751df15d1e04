import uuid

from sqlalchemy import Column, Uuid
from sqlalchemy.orm import declarative_base

# Базовый класс для моделей
Base = declarative_base()


class BaseModel(Base):
    __abstract__ = True

    uuid = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
