from datetime import datetime, timezone
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    module_count: int = 0
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ModuleIndex(BaseModel):
    """Identifiers the wrapper will render content for."""

    modules: list[str] = Field(default_factory=list, description="Registered module identifiers")
    web_module_root: str = Field(description="Web-facing prefix every module lives under")
