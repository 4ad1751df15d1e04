from sqlalchemy import Column, Text

from app.db.base import BaseModel


class Post(BaseModel):
    __tablename__ = "posts"

    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False, default="")
