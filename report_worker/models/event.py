from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from report_worker.core.http_utils import PlatformClient


@dataclass
class PlatformContext:
    """What the host hands to the worker on each trigger."""

    platform_http: PlatformClient


class ScheduledEventRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    trigger_id: Optional[str] = Field(default=None, alias="triggerID")


class ScheduledEventResponse(BaseModel):
    # In case of an error the host prints the message as a warning
    message: str
