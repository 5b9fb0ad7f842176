import time
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

HTTP_REQUESTS = Counter("http_requests_total", "Total HTTP requests", ["route", "method", "code"])
HTTP_LATENCY = Histogram("http_request_duration_seconds", "Request latency", ["route", "method"])

PREDICTIONS = Counter("predictions_total", "House price predictions served", ["location"])
PREDICTED_PRICE = Histogram(
    "predicted_price_inr",
    "Current price estimates in INR",
    buckets=(2e6, 5e6, 1e7, 2e7, 3e7, 5e7, 7.5e7, 1e8),
)


def record_prediction(location: str, current_price: int) -> None:
    PREDICTIONS.labels(location=location).inc()
    PREDICTED_PRICE.observe(current_price)


def _route_label(request: Request) -> str:
    # Matched route template keeps label cardinality bounded; unmatched paths share one label
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class PromMiddleware(BaseHTTPMiddleware):
    """Counts requests and their latency per route template."""
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed = time.perf_counter() - start

        route = _route_label(request)
        HTTP_REQUESTS.labels(route=route, method=request.method, code=str(response.status_code)).inc()
        HTTP_LATENCY.labels(route=route, method=request.method).observe(elapsed)
        return response


async def metrics_endpoint(request: Request):
    """GET /v1/metrics, scraped by Prometheus."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
