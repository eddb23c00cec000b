"""
Xray report lifecycle calls.

Report creation and listing abort on the first failure; deletion is best
effort per report and only aborts when the platform cannot be reached.
"""

import logging
from datetime import date, datetime, timezone
from typing import List, Optional

import httpx
from pydantic import ValidationError

from report_worker.core.constants import (
    JSON_HEADERS,
    REPORT_NAME_PREFIX,
    report_create_path,
    report_delete_path,
    report_list_path,
)
from report_worker.core.errors import ErrorKind, ReportWorkerError
from report_worker.core.http_utils import PlatformClient, is_success_status
from report_worker.core.metrics import (
    report_delete_failures_total,
    reports_deleted_total,
    reports_generated_total,
)
from report_worker.models.report import (
    DeletionResult,
    ReportListing,
    ReportPayload,
    ReportSummary,
    ReportType,
)

logger = logging.getLogger(__name__)


def generate_report_name(today: Optional[date] = None) -> str:
    """Date-stamped report name, using the current UTC date unless one is given."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return f"{REPORT_NAME_PREFIX}{today.isoformat()}"


def create_report_payload(report_name: str) -> dict:
    """Unfiltered report over all projects, latest versions of each."""
    return ReportPayload(name=report_name).model_dump()


def _upstream_error(action: str, response: httpx.Response) -> ReportWorkerError:
    logger.warning(f"Request succeeded but returned a non-200 status: {response.status_code}")
    return ReportWorkerError(
        f"{action}: {response.status_code}",
        kind=ErrorKind.UPSTREAM_HTTP,
        status_code=response.status_code,
    )


def _transport_error(action: str, exc: httpx.HTTPError) -> ReportWorkerError:
    logger.error(f"Request failed with status <none>: {exc}")
    return ReportWorkerError(f"{action}: {exc}", kind=ErrorKind.TRANSPORT)


def _json_body(action: str, response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError as e:
        raise ReportWorkerError(
            f"{action}: invalid JSON response",
            kind=ErrorKind.UPSTREAM_HTTP,
            status_code=response.status_code,
        ) from e
    return body if isinstance(body, dict) else {}


async def request_report(client: PlatformClient, payload: dict, report_type: ReportType) -> str:
    """
    Ask Xray to generate a report of the given type.

    Args:
        client: Platform API client
        payload: Report body from create_report_payload()
        report_type: Which report variant to create

    Returns:
        The report id assigned by Xray

    Raises:
        ReportWorkerError: on a non-success status, a response without
            report_id, or a transport failure
    """
    action = f"Failed to generate the {report_type.value} report"
    try:
        response = await client.post(
            report_create_path(report_type.value),
            json=payload,
            headers=JSON_HEADERS,
        )
    except httpx.HTTPError as e:
        raise _transport_error(action, e) from e

    if not is_success_status(response.status_code):
        raise _upstream_error(action, response)

    report_id = _json_body(action, response).get("report_id")
    if report_id is None:
        raise ReportWorkerError(
            f"{action}: response has no report_id",
            kind=ErrorKind.UPSTREAM_HTTP,
            status_code=response.status_code,
        )

    reports_generated_total.labels(report_type=report_type.value).inc()
    logger.info(f"Xray accepted {report_type.value} report request, report id {report_id}")
    return str(report_id)


async def list_reports(client: PlatformClient) -> ReportListing:
    """
    Fetch the most recent reports and keep the ones created by this worker.

    Order follows the listing (newest start time first). An empty result is
    not an error.
    """
    action = "Failed to retrieve the reports"
    try:
        response = await client.post(report_list_path(), headers=JSON_HEADERS)
    except httpx.HTTPError as e:
        raise _transport_error(action, e) from e

    if not is_success_status(response.status_code):
        raise _upstream_error(action, response)

    raw_reports = _json_body(action, response).get("reports")
    if not isinstance(raw_reports, list):
        raise ReportWorkerError(
            f"{action}: response has no reports",
            kind=ErrorKind.UPSTREAM_HTTP,
            status_code=response.status_code,
        )
    try:
        reports = [ReportSummary.model_validate(r) for r in raw_reports]
    except ValidationError as e:
        logger.warning(f"Report listing did not match the expected shape: {e}")
        raise ReportWorkerError(
            f"{action}: invalid report listing",
            kind=ErrorKind.UPSTREAM_HTTP,
            status_code=response.status_code,
        ) from e
    logger.debug(f"All reports: {[r.name for r in reports]}")

    filtered: List[ReportSummary] = [r for r in reports if r.name.startswith(REPORT_NAME_PREFIX)]
    logger.info(f"Filtered reports: {[r.name for r in filtered]}")

    if not filtered:
        logger.warning("No reports found with the specified name pattern.")

    return ReportListing.from_summaries(filtered)


async def delete_reports(client: PlatformClient, report_ids: List[str]) -> DeletionResult:
    """
    Delete reports one at a time.

    A rejected deletion is logged and recorded in the result, and the
    remaining reports are still attempted. A transport failure stops the
    batch and raises.
    """
    result = DeletionResult()
    for report_id in report_ids:
        try:
            response = await client.delete(report_delete_path(report_id), headers=JSON_HEADERS)
        except httpx.HTTPError as e:
            logger.error(f"Failed to delete reports: {e}")
            raise ReportWorkerError(f"Failed to delete reports: {e}", kind=ErrorKind.TRANSPORT) from e

        if is_success_status(response.status_code):
            logger.info(f"Successfully deleted report with ID: {report_id}")
            reports_deleted_total.inc()
            result.deleted.append(report_id)
        else:
            logger.warning(f"Failed to delete report with ID: {report_id}, status: {response.status_code}")
            report_delete_failures_total.inc()
            result.failed.append(report_id)

    return result
