"""
Shared Constants

Xray REST endpoints and the fixed values the worker sends with every request.
"""

from typing import Dict
from urllib.parse import quote

XRAY_API_PREFIX = "/xray/api/v1"

# Reports created by this worker are recognised by this name prefix
REPORT_NAME_PREFIX = "worker_xray_report_"

# Listing: first page only, newest first
REPORT_LIST_PAGE_NUM = 1
REPORT_LIST_NUM_OF_ROWS = 10
REPORT_LIST_ORDER_BY = "start_time"
REPORT_LIST_DIRECTION = "desc"

# Report scope: all projects, latest versions of each
REPORT_INCLUDE_KEY_PATTERNS = ["**"]
REPORT_NUMBER_OF_LATEST_VERSIONS = 5

JSON_HEADERS: Dict[str, str] = {"Content-Type": "application/json"}

# Responses below this status are treated as success
HTTP_ERROR_THRESHOLD = 400


def report_list_path() -> str:
    return (
        f"{XRAY_API_PREFIX}/reports"
        f"?direction={REPORT_LIST_DIRECTION}"
        f"&page_num={REPORT_LIST_PAGE_NUM}"
        f"&num_of_rows={REPORT_LIST_NUM_OF_ROWS}"
        f"&order_by={REPORT_LIST_ORDER_BY}"
    )


def report_create_path(variant: str) -> str:
    return f"{XRAY_API_PREFIX}/reports/{variant}"


def report_delete_path(report_id: str) -> str:
    return f"{XRAY_API_PREFIX}/reports/{quote(str(report_id), safe='')}"
