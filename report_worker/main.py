import asyncio
import logging

from report_worker.core.config import WorkerConfig, settings
from report_worker.core.http_utils import PlatformClient
from report_worker.core.logging import configure_logging
from report_worker.models.event import PlatformContext, ScheduledEventRequest
from report_worker.worker import handle_scheduled_event

logger = logging.getLogger(__name__)


async def run_once(trigger_id: str = "manual") -> str:
    """Run a single invocation against the platform configured in settings."""
    async with PlatformClient.from_settings(settings) as client:
        response = await handle_scheduled_event(
            PlatformContext(platform_http=client),
            ScheduledEventRequest(trigger_id=trigger_id),
            WorkerConfig.from_settings(settings),
        )
    return response.message


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    logger.info(f"Starting {settings.PROJECT_NAME} against {settings.PLATFORM_URL}")
    message = asyncio.run(run_once())
    print(message)


if __name__ == "__main__":
    main()
