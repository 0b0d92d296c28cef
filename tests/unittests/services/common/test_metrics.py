import pytest
from prometheus_client import REGISTRY

from payment_gateway.services.common.metrics import REDMetricsTracker


def trigger_metrics(method, path, raise_exc=False):
    with REDMetricsTracker(method, path):
        if raise_exc:
            raise ValueError


class TestREDMetricContextManager:
    def test_requests_made_counter(self):
        method, path = "TEST", "PATH"
        before = (
            REGISTRY.get_sample_value("http_requests_total", {"method": method, "path": path}) or 0
        )

        trigger_metrics(method, path)

        after = REGISTRY.get_sample_value("http_requests_total", {"method": method, "path": path})
        assert after is not None
        assert after - before == 1

    def test_requests_exceptions_counter(self):
        method, path = "TEST", "PATH"
        labels = {"method": method, "path": path}
        before = REGISTRY.get_sample_value("http_exceptions_total", labels) or 0

        with pytest.raises(ValueError):
            trigger_metrics(method, path, raise_exc=True)

        after = REGISTRY.get_sample_value("http_exceptions_total", labels)
        assert after is not None
        assert after - before == 1

    def test_request_latency_count(self):
        method, path = "TEST", "PATH"
        labels = {"method": method, "path": path}
        before = REGISTRY.get_sample_value("http_requests_latency_seconds_count", labels) or 0

        trigger_metrics(method, path)

        after = REGISTRY.get_sample_value("http_requests_latency_seconds_count", labels)
        assert after is not None
        assert after - before == 1

    def test_gateway_requests_are_tracked(self, gateway_client, chain_client):
        chain_client.eth.block_number = 0
        chain_client.eth.get_block.return_value = {"transactions": []}
        labels = {"method": "GET", "path": "/transactions"}
        before = REGISTRY.get_sample_value("http_requests_total", labels) or 0

        gateway_client.get("/transactions")

        assert REGISTRY.get_sample_value("http_requests_total", labels) - before == 1

    def test_reported_errors_are_counted_without_exception(self):
        labels = {"method": "TEST", "path": "REPORTED"}
        before = REGISTRY.get_sample_value("http_exceptions_total", labels) or 0

        with REDMetricsTracker("TEST", "REPORTED") as tracker:
            tracker.report_error()

        assert REGISTRY.get_sample_value("http_exceptions_total", labels) - before == 1

    def test_successful_requests_are_not_counted_as_errors(self):
        labels = {"method": "TEST", "path": "SUCCESS"}
        before = REGISTRY.get_sample_value("http_exceptions_total", labels) or 0

        trigger_metrics("TEST", "SUCCESS")

        assert (REGISTRY.get_sample_value("http_exceptions_total", labels) or 0) == before

    def test_failed_scan_is_counted_as_error(self, gateway_client, chain_client):
        chain_client.eth.block_number = 1
        chain_client.eth.get_block.side_effect = ConnectionError("node went away")
        labels = {"method": "GET", "path": "/transactions"}
        before = REGISTRY.get_sample_value("http_exceptions_total", labels) or 0

        resp = gateway_client.get("/transactions")

        assert resp.status_code == 500
        assert REGISTRY.get_sample_value("http_exceptions_total", labels) - before == 1

    def test_failed_payment_is_counted_as_error(
        self, gateway_client, chain_client, sender, receiver, privkey
    ):
        chain_client.net.version = "1"
        labels = {"method": "POST", "path": "/sendPayment"}
        before = REGISTRY.get_sample_value("http_exceptions_total", labels) or 0
        payload = {"sender": sender, "privateKey": privkey, "receiver": receiver, "amount": "1"}

        resp = gateway_client.post("/sendPayment", json=payload)

        assert resp.status_code == 400
        assert REGISTRY.get_sample_value("http_exceptions_total", labels) - before == 1
