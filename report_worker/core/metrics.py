"""
Prometheus Metrics for the Xray Report Worker

Counters and histograms for the platform API calls the worker issues and for
the report lifecycle outcomes of each scheduled invocation.
"""

from importlib.metadata import version as get_version

from prometheus_client import Counter, Histogram, Info

# =============================================================================
# Application Info Metrics
# =============================================================================

# Get version from package metadata (pyproject.toml)
try:
    APP_VERSION = get_version("xray-report-worker")
except Exception:
    APP_VERSION = "unknown"

app_info = Info("xray_report_worker_app", "Application information")
app_info.info(
    {
        "version": APP_VERSION,
        "app_name": "Xray Report Worker",
    }
)

# =============================================================================
# Platform API Metrics
# =============================================================================

platform_api_requests_total = Counter(
    "platform_api_requests_total",
    "Total platform API requests by HTTP method",
    ["method"],
)

platform_api_errors_total = Counter(
    "platform_api_errors_total",
    "Total platform API transport errors by HTTP method",
    ["method"],
)

platform_api_duration_seconds = Histogram(
    "platform_api_duration_seconds",
    "Platform API request duration in seconds",
    ["method"],
    buckets=(0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0),
)

# =============================================================================
# Report Lifecycle Metrics
# =============================================================================

reports_generated_total = Counter(
    "reports_generated_total",
    "Total reports requested from Xray by report type",
    ["report_type"],
)

reports_deleted_total = Counter(
    "reports_deleted_total",
    "Total worker reports deleted from Xray",
)

report_delete_failures_total = Counter(
    "report_delete_failures_total",
    "Total report deletions rejected by Xray",
)

worker_invocations_total = Counter(
    "worker_invocations_total",
    "Total scheduled invocations by mode and outcome",
    ["mode", "outcome"],
)
