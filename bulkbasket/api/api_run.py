from fastapi import FastAPI
import logging

from bulkbasket.api.routes import shopping
from bulkbasket.api.routes.shopping import RateLimitExceeded, rate_limit_response
from bulkbasket.infra.rate_limiter import InMemoryRateLimitStore, RateLimiter
from bulkbasket.utilities.config import (
    DEBUG,
    RATE_LIMIT_MAX_REQUESTS,
    RATE_LIMIT_WINDOW_SECONDS,
    TRUST_USER_ID_HEADER,
)

# Logging
logger = logging.getLogger("bulkbasket_app")


def create_app(rate_limiter: RateLimiter | None = None,
               trust_user_id_header: bool = TRUST_USER_ID_HEADER) -> FastAPI:
    """Build the API. Each app gets its own rate limiter unless one is passed in.

    Callers are rate limited by client host; with trust_user_id_header the
    X-User-Id header (set by an upstream auth layer) is used instead.
    """
    app = FastAPI(title="BulkBasket Shopping List API", debug=DEBUG)
    app.state.rate_limiter = rate_limiter or RateLimiter(
        InMemoryRateLimitStore(),
        max_requests=RATE_LIMIT_MAX_REQUESTS,
        window_seconds=RATE_LIMIT_WINDOW_SECONDS,
    )
    app.state.trust_user_id_header = trust_user_id_header
    app.add_exception_handler(RateLimitExceeded, rate_limit_response)
    app.include_router(shopping.router)

    @app.get('/health')
    def health():
        return {"status": "ok"}

    logger.info(
        "API ready (rate limit %d requests / %ds)",
        app.state.rate_limiter.max_requests, app.state.rate_limiter.window_seconds,
    )
    return app


app = create_app()
