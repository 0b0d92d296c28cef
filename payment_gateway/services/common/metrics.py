"""Prometheus Metrics used to monitor the gateway's flask application.

Available metrics are:

    http_requests_total
        The total number of requests made to the application.

    http_exceptions_total
        The total number of failed requests. This includes exceptions raised
        while processing a request, as well as failures a view handled itself
        and answered with a JSON error body.

    http_requests_latency_seconds
        The number of seconds required to process requests to endpoints of the
        application.

`method` and `path` labels are available for all metrics.
"""
import timeit

from prometheus_client import Counter, Histogram

HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total", "Total amount of HTTP Requests made.", labelnames=["method", "path"]
)
HTTP_EXCEPTIONS_TOTAL = Counter(
    "http_exceptions_total", "Total amount of failed HTTP Requests.", labelnames=["method", "path"]
)
HTTP_REQUESTS_LATENCY = Histogram(
    "http_requests_latency_seconds",
    "Duration of HTTP requests processing.",
    labelnames=["method", "path"],
)


class REDMetricsTracker:
    """Track Rate, Errors and Duration of a request to one of the gateway's views.

    Exceptions escaping the tracked block are counted as errors. Views which
    turn a failure into an error response call :meth:`report_error` instead::

        with REDMetricsTracker(request.method, "/transactions") as tracker:
            try:
                ...
            except Exception as e:
                tracker.report_error()
                return jsonify({"error": str(e)}), 500
    """

    def __init__(self, method, path):
        self.method, self.path = method, path
        self.start = None
        self.failed = False

    def report_error(self):
        """Count the tracked request as failed, even though no exception escapes it."""
        self.failed = True

    def __enter__(self):
        HTTP_REQUESTS_TOTAL.labels(self.method, self.path).inc()
        self.start = timeit.default_timer()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val or self.failed:
            HTTP_EXCEPTIONS_TOTAL.labels(self.method, self.path).inc()

        duration = max(timeit.default_timer() - self.start, 0)
        HTTP_REQUESTS_LATENCY.labels(self.method, self.path).observe(duration)
