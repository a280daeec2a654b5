"""
System API models.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class VersionInfo(BaseModel):
    """Service and library versions"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    version: str
    pillow_version: str


class HealthStats(BaseModel):
    """Process health statistics"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    uptime: float
    memory_mb: float
    threads: int
    cpus: int
