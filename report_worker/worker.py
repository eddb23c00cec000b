"""
Scheduled event entry point.

Either generates a new Xray report or, when clean_reports is set, deletes the
reports previously created by this worker. Every outcome, including failures,
is returned as a message; nothing is raised to the host.
"""

import logging
from typing import Optional, Union

from report_worker.core.config import WorkerConfig, settings
from report_worker.core.errors import ErrorKind, ReportWorkerError
from report_worker.core.metrics import worker_invocations_total
from report_worker.models.event import (
    PlatformContext,
    ScheduledEventRequest,
    ScheduledEventResponse,
)
from report_worker.models.report import ReportType
from report_worker.services.reports import (
    create_report_payload,
    delete_reports,
    generate_report_name,
    list_reports,
    request_report,
)

logger = logging.getLogger(__name__)


def resolve_report_type(value: Union[ReportType, str]) -> ReportType:
    try:
        return ReportType(value)
    except ValueError:
        raise ReportWorkerError(f"Unknown report type: {value}", kind=ErrorKind.CONFIG) from None


async def clean_reports(context: PlatformContext) -> ScheduledEventResponse:
    listing = await list_reports(context.platform_http)

    if not listing.report_ids:
        return ScheduledEventResponse(message="No reports found to delete.")

    result = await delete_reports(context.platform_http, listing.report_ids)
    if result.failed:
        logger.warning(f"{len(result.failed)} of {len(listing)} reports could not be deleted: {result.failed}")

    return ScheduledEventResponse(message=f"Successfully deleted {len(listing)} reports.")


async def generate_report(context: PlatformContext, report_type: Union[ReportType, str]) -> ScheduledEventResponse:
    report_name = generate_report_name()
    payload = create_report_payload(report_name)

    await request_report(context.platform_http, payload, resolve_report_type(report_type))

    try:
        listing = await list_reports(context.platform_http)
    except ReportWorkerError:
        logger.warning(f"Report {report_name} was requested, but listing the reports afterwards failed")
        raise

    if listing.report_ids:
        logger.info(f"Report created with name: {report_name} and ID: {listing.report_ids[0]}")
    else:
        logger.info(f"Report created with name: {report_name} but no report ID was found.")

    # The message names vulnerabilities for both report types
    return ScheduledEventResponse(message=f"Vulnerabilities report {report_name} was successfully generated.")


async def handle_scheduled_event(
    context: PlatformContext,
    request: Optional[ScheduledEventRequest] = None,
    config: Optional[WorkerConfig] = None,
) -> ScheduledEventResponse:
    """
    Run one scheduled invocation of the worker.

    Args:
        context: Platform context carrying the platform API client
        request: Trigger details from the host, only used for logging
        config: Worker options; read from settings when omitted

    Returns:
        The status message for the host
    """
    if config is None:
        config = WorkerConfig.from_settings(settings)

    mode = "clean" if config.clean_reports else "generate"
    trigger_id = request.trigger_id if request else None
    logger.info(f"Scheduled event (trigger: {trigger_id or '<none>'}) running in {mode} mode")

    try:
        if config.clean_reports:
            response = await clean_reports(context)
        else:
            response = await generate_report(context, config.report_type)
    except ReportWorkerError as e:
        logger.error(f"Scheduled event failed ({e.kind.value}, status {e.status_text}): {e.message}")
        worker_invocations_total.labels(mode=mode, outcome="failed").inc()
        return ScheduledEventResponse(message=e.message)
    except Exception as e:
        logger.exception(f"Scheduled event failed unexpectedly: {e}")
        worker_invocations_total.labels(mode=mode, outcome="failed").inc()
        return ScheduledEventResponse(message=str(e) or type(e).__name__)

    worker_invocations_total.labels(mode=mode, outcome="succeeded").inc()
    return response
