import logging
from typing import Dict, List, Mapping

from jinja2 import Environment, StrictUndefined, Template, TemplateSyntaxError, UndefinedError

from app.core.errors import TemplateError

logger = logging.getLogger(__name__)

HELLO_TEMPLATE = "Hello, {{ name }}!"
POST_TEMPLATE = "id: {{ id }}\ntitle: {{ title }}\ncontent:\n{{ content }}\n"


class TemplateStore:
    """Хранилище именованных шаблонов

    Шаблоны регистрируются только до вызова freeze(), после этого хранилище
    доступно только для чтения и используется всеми запросами без блокировок.
    """

    def __init__(self):
        self._environment = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._templates: Dict[str, Template] = {}
        self._frozen = False

    def register(self, name: str, template_text: str) -> None:
        """Компиляция и регистрация шаблона"""
        if self._frozen:
            raise TemplateError(f"Template store is frozen, cannot register '{name}'")
        if name in self._templates:
            raise TemplateError(f"Template '{name}' is already registered")

        try:
            template = self._environment.from_string(template_text)
        except TemplateSyntaxError as e:
            raise TemplateError(f"Invalid template '{name}': {e}") from e

        self._templates[name] = template
        logger.info(f"Registered template '{name}'")

    def freeze(self) -> None:
        """Завершение инициализации"""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> List[str]:
        return sorted(self._templates)

    def render(self, name: str, context: Mapping[str, str]) -> str:
        """Рендеринг шаблона с контекстом"""
        template = self._templates.get(name)
        if template is None:
            raise TemplateError(f"Unknown template '{name}'")

        try:
            return template.render(dict(context))
        except UndefinedError as e:
            raise TemplateError(f"Cannot render '{name}': {e}") from e


def build_template_store() -> TemplateStore:
    """Создание хранилища со встроенными шаблонами"""
    store = TemplateStore()
    store.register("hello", HELLO_TEMPLATE)
    store.register("post_template", POST_TEMPLATE)
    store.freeze()
    return store
