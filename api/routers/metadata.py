"""
Metadata API Router - EXIF normalization and decoder tables
"""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_metadata_service
from api.exceptions import safe_endpoint
from core.exif.decoders import DECODER_TABLES
from schemas import ExifMetadata, RawExif

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/normalize", response_model=ExifMetadata, response_model_exclude_none=True)
@safe_endpoint
async def normalize_metadata(
    raw: RawExif, metadata_service=Depends(get_metadata_service)
) -> ExifMetadata:
    """
    Normalize a raw EXIF record.

    The record uses the extraction layer's conventions: rationals as "N/D"
    text, codes as integers, "" and 0 for absent tags.
    """
    return metadata_service.normalize(raw)


@router.get("/tables")
async def list_tables() -> List[str]:
    """List the attributes that have a decoder table"""
    return sorted(DECODER_TABLES)


@router.get("/tables/{attribute}")
async def get_table(attribute: str) -> Dict[int, Optional[str]]:
    """Get the code-to-label table of one attribute"""
    table = DECODER_TABLES.get(attribute)
    if table is None:
        raise HTTPException(status_code=404, detail=f"No decoder table for '{attribute}'")
    return table
