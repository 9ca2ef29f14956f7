"""
Prometheus Metrics Registration.

Counters and histograms for tool calls and outbound n8n requests.
The exporter is optional; see `start_metrics_server`.
"""

from prometheus_client import Counter, Histogram, start_http_server

from flow_config.settings import Settings

# ============================================================================
# COUNTERS
# ============================================================================

tool_executions_total = Counter(
    "tool_executions_total",
    "Total tool executions",
    ["tool_name", "status"],  # success, failure
)

n8n_api_requests_total = Counter(
    "n8n_api_requests_total",
    "Outbound n8n API requests",
    ["method", "status"],  # HTTP status code
)

# ============================================================================
# HISTOGRAMS
# ============================================================================

tool_execution_duration = Histogram(
    "tool_execution_duration_seconds",
    "Tool execution duration",
    ["tool_name"],
    buckets=(0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0),
)


def start_metrics_server(settings: Settings) -> bool:
    """Expose /metrics over HTTP when METRICS_PORT is set.

    Returns:
        True if the exporter was started
    """
    if not settings.METRICS_PORT:
        return False

    start_http_server(settings.METRICS_PORT)
    return True
