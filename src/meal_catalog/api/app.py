"""FastAPI application factory."""

import logging
import re

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from meal_catalog.api.models import CategoryOut, ErrorOut, MealOut
from meal_catalog.app_logging import configure_logging
from meal_catalog.config import normalize_prefix
from meal_catalog.containers import AppContainer
from meal_catalog.domain.browse import BrowseQuery, MealFilter, MealSort

_logger = logging.getLogger(__name__)

_NOT_FOUND = {404: {"model": ErrorOut}, 500: {"model": ErrorOut}}
_FAILURE = {500: {"model": ErrorOut}}
_MEAL_ID_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


class CatalogApiError(Exception):
    """Error answered with a status code and a ``{"message": ...}`` body."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI(title=container.settings.app_name)
    app.state.container = container

    @app.exception_handler(CatalogApiError)
    async def handle_catalog_error(
        request: Request, exc: CatalogApiError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code, content={"message": exc.message}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    app.include_router(
        _catalog_router(), prefix=normalize_prefix(container.settings.api_prefix)
    )
    return app


def _catalog_router() -> APIRouter:
    router = APIRouter(tags=["catalog"])

    @router.get("/categories", responses=_FAILURE)
    async def list_categories(request: Request) -> list[CategoryOut]:
        """Return all categories."""
        container: AppContainer = request.app.state.container
        try:
            categories = container.catalog_service.list_categories()
            return [CategoryOut.from_domain(category) for category in categories]
        except Exception as exc:
            _logger.exception("Failed to fetch categories")
            raise CatalogApiError(500, "Failed to fetch categories") from exc

    @router.get("/categories/{slug}", responses=_NOT_FOUND)
    async def get_category(slug: str, request: Request) -> CategoryOut:
        """Return a category by slug."""
        container: AppContainer = request.app.state.container
        try:
            category = container.catalog_service.get_category_by_slug(slug)
            if category is None:
                raise CatalogApiError(404, "Category not found")
            return CategoryOut.from_domain(category)
        except CatalogApiError:
            raise
        except Exception as exc:
            _logger.exception("Failed to fetch category", extra={"slug": slug})
            raise CatalogApiError(500, "Failed to fetch category") from exc

    @router.get("/meals", responses=_FAILURE)
    async def list_meals(
        request: Request,
        search: str = "",
        active_filter: MealFilter = Query(default=MealFilter.ALL, alias="filter"),
        sort_by: MealSort = Query(default=MealSort.DEFAULT, alias="sort"),
    ) -> list[MealOut]:
        """Return all meals, optionally searched, filtered and sorted."""
        container: AppContainer = request.app.state.container
        query = BrowseQuery(search=search, active_filter=active_filter, sort_by=sort_by)
        try:
            meals = container.catalog_service.browse(None, query)
            return [MealOut.from_domain(meal) for meal in meals]
        except Exception as exc:
            _logger.exception("Failed to fetch meals")
            raise CatalogApiError(500, "Failed to fetch meals") from exc

    @router.get("/meals/{category}", responses=_FAILURE)
    async def list_meals_by_category(
        category: str,
        request: Request,
        search: str = "",
        active_filter: MealFilter = Query(default=MealFilter.ALL, alias="filter"),
        sort_by: MealSort = Query(default=MealSort.DEFAULT, alias="sort"),
    ) -> list[MealOut]:
        """Return meals in a category, optionally searched, filtered and sorted."""
        container: AppContainer = request.app.state.container
        query = BrowseQuery(search=search, active_filter=active_filter, sort_by=sort_by)
        try:
            meals = container.catalog_service.browse(category, query)
            return [MealOut.from_domain(meal) for meal in meals]
        except Exception as exc:
            _logger.exception("Failed to fetch meals", extra={"category": category})
            raise CatalogApiError(500, "Failed to fetch meals") from exc

    @router.get("/meal/{meal_id}", responses={400: {"model": ErrorOut}, **_NOT_FOUND})
    async def get_meal(meal_id: str, request: Request) -> MealOut:
        """Return a meal by numeric id."""
        container: AppContainer = request.app.state.container
        parsed_id = _parse_meal_id(meal_id)
        if parsed_id is None:
            raise CatalogApiError(400, "Invalid meal ID")
        try:
            meal = container.catalog_service.get_meal(parsed_id)
            if meal is None:
                raise CatalogApiError(404, "Meal not found")
            return MealOut.from_domain(meal)
        except CatalogApiError:
            raise
        except Exception as exc:
            _logger.exception("Failed to fetch meal", extra={"meal_id": parsed_id})
            raise CatalogApiError(500, "Failed to fetch meal") from exc

    return router


def _parse_meal_id(raw: str) -> int | None:
    cleaned = raw.strip()
    if not _MEAL_ID_PATTERN.fullmatch(cleaned):
        return None
    return int(cleaned)
