from pydantic import BaseModel, Field


class GreetingForm(BaseModel):
    """Форма приветствия"""
    name: str


class PostCreate(BaseModel):
    """Схема для создания записи"""
    title: str = Field(..., min_length=1)
    content: str
