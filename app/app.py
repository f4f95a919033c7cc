import contextlib
import logging
from typing import Any

import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from app import config
from app.html.pages import Placeholder, RecipeBuilder
from app.logs import configure_logging
from domain.auth import AuthService
from domain.errors import InternalFault, ValidationError
from domain.models import Credential, IngredientList
from domain.recommend import RecommendationService, parse_ingredients
from domain.remote import RemoteEndpoint, remote_client_factory


logger = logging.getLogger(__name__)


PLACEHOLDERS = {
    "/saved": ("Saved Recipes", "Keep the recipes you love in one place."),
    "/about": ("About RecipeAI", "How we turn your ingredients into ideas."),
}


async def read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as e:
        raise ValidationError("Request body is not valid JSON.") from e


# API


async def ping(request: Request) -> JSONResponse:
    return JSONResponse({"message": request.app.state.config.ping_message})


async def demo(request: Request) -> JSONResponse:
    return JSONResponse({"message": "Hello from the RecipeAI server"})


async def recommend(request: Request) -> JSONResponse:
    try:
        ingredients = parse_ingredients(await read_json(request))
    except ValidationError as e:
        return JSONResponse(
            {"error": "Invalid ingredients array", "details": str(e)},
            status_code=400,
        )
    recommender: RecommendationService = request.app.state.recommender
    try:
        recipes = await recommender.recommend(ingredients)
    except Exception:
        logger.exception("Server error in recipe recommendations")
        return JSONResponse(
            {"error": "Failed to get recipe recommendations"}, status_code=500
        )
    return JSONResponse([r.to_dict() for r in recipes])


async def login(request: Request) -> JSONResponse:
    auth: AuthService = request.app.state.auth
    try:
        credential = Credential.from_body(await read_json(request))
        result = await auth.login(credential)
    except ValidationError:
        return JSONResponse(
            {"success": False, "message": "Username and password are required"},
            status_code=400,
        )
    except Exception:
        logger.exception("Login error")
        return JSONResponse(
            {
                "success": False,
                "message": "Internal server error during authentication",
            },
            status_code=500,
        )
    return JSONResponse(result.body, status_code=result.status_code)


async def logout(request: Request) -> JSONResponse:
    auth: AuthService = request.app.state.auth
    try:
        body = await auth.logout()
    except Exception:
        logger.exception("Logout error")
        return JSONResponse(
            {"success": False, "message": "Error during logout"},
            status_code=500,
        )
    return JSONResponse(body)


# Pages


def templates(request: Request) -> Environment:
    return request.app.state.templates


async def ingredients_from_form(request: Request) -> tuple[IngredientList, Any]:
    async with request.form() as form:
        ingredients = IngredientList(str(i) for i in form.getlist("ingredients"))
        return ingredients, dict(form)


async def homepage(request: Request) -> HTMLResponse:
    page = RecipeBuilder(IngredientList(), environment=templates(request))
    return HTMLResponse(page.render())


async def edit_ingredients(request: Request) -> HTMLResponse:
    ingredients, form = await ingredients_from_form(request)
    match form:
        case {"remove": str(item)} if item:
            ingredients.remove(item)
        case {"ingredient": str(item)}:
            ingredients.add(item)
    page = RecipeBuilder(ingredients, environment=templates(request))
    return HTMLResponse(page.render())


async def generate(request: Request) -> HTMLResponse:
    ingredients, _ = await ingredients_from_form(request)
    recipes = []
    if ingredients:
        recommender: RecommendationService = request.app.state.recommender
        recipes = await recommender.recommend(ingredients.to_list())
    page = RecipeBuilder(ingredients, recipes, environment=templates(request))
    return HTMLResponse(page.render())


async def placeholder(request: Request) -> HTMLResponse:
    title, description = PLACEHOLDERS[request.url.path]
    page = Placeholder(title, description, environment=templates(request))
    return HTMLResponse(page.render())


# Errors


async def not_found(request: Request, exc: Exception) -> Response:
    if request.url.path.startswith("/api/"):
        return JSONResponse({"error": "Not found"}, status_code=404)
    html = templates(request).get_template("not-found.html").render(
        path=request.url.path
    )
    return HTMLResponse(html, status_code=404)


async def http_error(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, HTTPException)
    if exc.status_code == 404:
        return await not_found(request, exc)
    return JSONResponse(
        {"error": exc.detail}, status_code=exc.status_code, headers=exc.headers
    )


async def internal_error(request: Request, exc: Exception) -> Response:
    logger.error("Unhandled error on %s: %r", request.url.path, exc)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def create_app(
    cfg: config.Config | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> Starlette:
    cfg = config.Config() if cfg is None else cfg
    configure_logging(cfg.log_level)

    # One client shared by both services; the lifespan closes it.
    if http_client is None:
        http_client = remote_client_factory(cfg.remote_timeout)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        await http_client.aclose()

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/ingredients", edit_ingredients, methods=["POST"]),
            Route("/recipes", generate, methods=["POST"]),
            *[Route(path, placeholder) for path in PLACEHOLDERS],
            Route("/api/ping", ping),
            Route("/api/demo", demo),
            Route("/api/recipes/recommend", recommend, methods=["POST"]),
            Route("/api/auth/login", login, methods=["POST"]),
            Route("/api/auth/logout", logout, methods=["POST"]),
            Mount(
                "/assets", app=StaticFiles(directory=cfg.assets_dir), name="assets"
            ),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=cfg.cors_origins,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        ],
        exception_handlers={
            HTTPException: http_error,
            InternalFault: internal_error,
            Exception: internal_error,
        },
        lifespan=lifespan,
    )

    app.state.config = cfg
    app.state.templates = Environment(
        loader=FileSystemLoader(cfg.html_dir),
        autoescape=select_autoescape(),
    )
    app.state.recommender = RecommendationService(
        RemoteEndpoint(cfg.recommend_url, timeout=cfg.remote_timeout),
        http_client=http_client,
    )
    app.state.auth = AuthService(
        RemoteEndpoint(cfg.auth_url, timeout=cfg.remote_timeout),
        http_client=http_client,
        demo_username=cfg.demo_username,
        demo_password=cfg.demo_password,
    )
    return app


# uvicorn --factory app.app:create_app
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.app:create_app", factory=True, host="0.0.0.0", port=8080)
