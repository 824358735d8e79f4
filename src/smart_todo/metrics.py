from prometheus_client import Counter, Histogram, Gauge, REGISTRY


# we check if they are already registered to avoid errors during hot reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "smart_todo_requests_total",
    "Total requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "smart_todo_request_latency_seconds",
    "Request latency",
    Histogram,
    labelnames=["endpoint"],
)

EXTRACTIONS_TOTAL = get_or_create_metric(
    "smart_todo_extractions_total",
    "Extractions completed, by the strategy that produced the result",
    Counter,
    labelnames=["strategy"],
)

FALLBACKS_TOTAL = get_or_create_metric(
    "smart_todo_fallbacks_total",
    "Remote extraction failures absorbed by the local strategy",
    Counter,
    labelnames=["reason"],
)

TASKS_GAUGE = get_or_create_metric(
    "smart_todo_tasks", "Tasks currently in the collection", Gauge
)
