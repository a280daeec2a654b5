"""
System API Router - Health and configuration
"""

import logging
import os
import time

import psutil
from fastapi import APIRouter, Depends

from api.dependencies import get_config
from schemas import HealthStats

logger = logging.getLogger(__name__)

router = APIRouter()

# Track start time
START_TIME = time.time()


def get_health_stats() -> HealthStats:
    """Collect process statistics"""
    process = psutil.Process()
    memory_info = process.memory_info()

    return HealthStats(
        uptime=round(time.time() - START_TIME, 2),
        memory_mb=round(memory_info.rss / 1024 / 1024, 2),
        threads=process.num_threads(),
        cpus=os.cpu_count() or 1,
    )


@router.get("/health")
async def health_check() -> HealthStats:
    """Process health statistics"""
    return get_health_stats()


@router.get("/config")
async def get_current_config(config=Depends(get_config)) -> dict:
    """Get current configuration"""
    return config
