import io
from decimal import Decimal

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from .catalog import DEFAULT_CATALOG, Catalog, ItemNotFound, format_price
from .writers import Writer, fprintf, quote

from shared.logging import get_logger
from shared.settings import settings

logger = get_logger(__name__)

STATUS_BODY = "Status: OK"

# Every route answers any method, not only GET
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def write_listing(w: Writer, catalog: Catalog) -> None:
    for item, price in catalog.items():
        fprintf(w, "%s: %s\n", item, format_price(price))


def write_price(w: Writer, price: Decimal) -> None:
    fprintf(w, "%s\n", format_price(price))


def write_not_found(w: Writer, item: str) -> None:
    fprintf(w, "No such item: %s\n", quote(item))


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_item(request: Request) -> str:
    # A missing parameter is looked up as the empty name; repeats use the first value
    values = request.query_params.getlist("item")
    return values[0] if values else ""


def create_app(catalog: Catalog = DEFAULT_CATALOG) -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, version="v1")
    app.state.catalog = catalog

    @app.api_route("/list", methods=ALL_METHODS, response_class=PlainTextResponse)
    def list_items(catalog: Catalog = Depends(get_catalog)):
        logger.debug(f"Listing {len(catalog)} catalog entries")
        out = io.StringIO()
        write_listing(out, catalog)
        return PlainTextResponse(out.getvalue())

    @app.api_route("/price", methods=ALL_METHODS, response_class=PlainTextResponse)
    def price(item: str = Depends(get_item), catalog: Catalog = Depends(get_catalog)):
        out = io.StringIO()
        try:
            write_price(out, catalog.price_of(item))
        except ItemNotFound as e:
            logger.warning(f"Price lookup failed: {e}")
            write_not_found(out, e.item)
            return PlainTextResponse(out.getvalue(), status_code=404)
        logger.debug(f"Price lookup for '{item}': {out.getvalue().strip()}")
        return PlainTextResponse(out.getvalue())

    # Registered last: every other path falls through to the status page
    @app.api_route("/", methods=ALL_METHODS, response_class=PlainTextResponse)
    @app.api_route("/{path:path}", methods=ALL_METHODS, response_class=PlainTextResponse, include_in_schema=False)
    def status():
        return PlainTextResponse(STATUS_BODY)

    return app


app = create_app()


def run() -> None:
    """Serves the catalog until interrupted. A port that cannot be bound ends the process."""
    logger.info(f"Starting {settings.APP_NAME} on {settings.CATALOG_HOST}:{settings.CATALOG_PORT}")
    uvicorn.run(
        app,
        host=settings.CATALOG_HOST,
        port=settings.CATALOG_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
