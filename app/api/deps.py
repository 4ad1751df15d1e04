from typing import Dict
from urllib.parse import parse_qsl

from fastapi import Depends, Request
from pydantic import ValidationError

from app.core.db import Database
from app.core.errors import BadRequest
from app.core.templates import TemplateStore
from app.domains.posts.schemas import GreetingForm, PostCreate
from app.domains.posts.services import PostService


def get_db(request: Request) -> Database:
    """Зависимость для получения единственного соединения с БД"""
    return request.app.state.db


def get_templates(request: Request) -> TemplateStore:
    return request.app.state.templates


def get_post_service(
    db: Database = Depends(get_db),
    templates: TemplateStore = Depends(get_templates)
) -> PostService:
    return PostService(db, templates)


async def get_form_data(request: Request) -> Dict[str, str]:
    """Разбор тела запроса как application/x-www-form-urlencoded

    Content-Type не проверяется: тело разбирается всегда. Пустые сегменты
    (лишние '&') пропускаются, сегмент без '=' - ошибка.
    """
    body = await request.body()
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise BadRequest("Malformed form body") from e

    segments = [segment for segment in text.split("&") if segment]
    if any("=" not in segment for segment in segments):
        raise BadRequest("Malformed form body")

    try:
        pairs = parse_qsl("&".join(segments), keep_blank_values=True, errors="strict")
    except ValueError as e:
        raise BadRequest("Malformed form body") from e
    return dict(pairs)


async def get_greeting_form(form: Dict[str, str] = Depends(get_form_data)) -> GreetingForm:
    try:
        return GreetingForm.model_validate(form)
    except ValidationError as e:
        raise BadRequest("Missing 'name' field") from e


async def get_post_form(form: Dict[str, str] = Depends(get_form_data)) -> PostCreate:
    try:
        return PostCreate.model_validate(form)
    except ValidationError as e:
        raise BadRequest("Missing 'title' or 'content' field") from e
