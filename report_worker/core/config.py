from pydantic import BaseModel
from pydantic_settings import BaseSettings

from report_worker.models.report import ReportType


class Settings(BaseSettings):
    PROJECT_NAME: str = "Xray Report Worker"

    # JFrog Platform
    PLATFORM_URL: str = "http://localhost:8082"
    PLATFORM_ACCESS_TOKEN: str = ""
    PLATFORM_TIMEOUT_SECONDS: float = 30.0

    # Worker behaviour
    REPORT_TYPE: ReportType = ReportType.VIOLATIONS
    CLEAN_REPORTS: bool = False

    LOG_LEVEL: str = "INFO"

    class Config:
        case_sensitive = True
        env_file = ".env"


class WorkerConfig(BaseModel):
    """Behavioural options for a single scheduled invocation."""

    report_type: ReportType = ReportType.VIOLATIONS
    clean_reports: bool = False

    @classmethod
    def from_settings(cls, source: Settings) -> "WorkerConfig":
        return cls(report_type=source.REPORT_TYPE, clean_reports=source.CLEAN_REPORTS)


settings = Settings()
