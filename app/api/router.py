from typing import Callable, List, Optional, Sequence

from fastapi import APIRouter
from fastapi.responses import Response
from starlette.routing import BaseRoute, Match

from app.api.http import greeting_router, posts_router

api_router = APIRouter()
api_router.include_router(greeting_router)
api_router.include_router(posts_router)

# Маршруты в порядке объявления: точные пути раньше параметризованных
declared_routes: List[BaseRoute] = [*greeting_router.routes, *posts_router.routes]


async def not_found():
    """Ответ для любых неизвестных (path, method)"""
    return Response(status_code=404)


def resolve_handler(method: str, path: str, routes: Optional[Sequence[BaseRoute]] = None) -> Callable:
    """Поиск обработчика для (method, path) по таблице маршрутов

    Вспомогательная функция для просмотра таблицы маршрутов: запросы
    в работающем приложении маршрутизирует FastAPI, а 404/405 переписываются
    в not_found в app.main. Маршруты берутся из объявивших их роутеров,
    а не из api_router, т.к. include_router может хранить обёртки.
    Первое полное совпадение побеждает, совпадение только по пути
    (другой метод) не считается.
    """
    scope = {
        "type": "http",
        "method": method.upper(),
        "path": path,
        "root_path": "",
        "path_params": {},
    }
    for route in declared_routes if routes is None else routes:
        match, _ = route.matches(scope)
        if match == Match.FULL:
            return route.endpoint
    return not_found
