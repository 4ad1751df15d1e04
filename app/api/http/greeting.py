from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.api.deps import get_greeting_form, get_templates
from app.core.templates import TemplateStore
from app.domains.posts.schemas import GreetingForm

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse)
async def greet(
    form: GreetingForm = Depends(get_greeting_form),
    templates: TemplateStore = Depends(get_templates)
):
    """Приветствие по имени из тела запроса"""
    return templates.render("hello", {"name": form.name})


@router.api_route("/", methods=["POST", "PUT", "PATCH", "DELETE"], response_class=PlainTextResponse)
async def hello():
    """Приветствие по умолчанию, тело запроса игнорируется"""
    return "Hello, World!"
