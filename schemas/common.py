"""
schemas/common.py

- Shared schemas reused across the API (Pydantic v2)
  1) error response envelope: ErrorDetail, ErrorResponse
  2) simple message response: MessageResponse
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


# =========================================================
# 1) error response envelope
# =========================================================

class ErrorDetail(BaseModel):
    """Smallest unit carrying an error code and message"""
    code: str = Field(..., description="error code (e.g. NOT_FOUND, VALIDATION_ERROR)")
    message: str = Field(..., description="human readable message")

class ErrorResponse(BaseModel):
    """
    Standard error body returned by the global handlers
    - middlewares/error_handler.py builds every error response from this schema
    """
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="response time (UTC)"
    )
    latency_ms: Optional[int] = Field(
        default=None, ge=0, description="request processing time (ms), filled by the timing middleware"
    )

    model_config = ConfigDict(extra="ignore")


# =========================================================
# 2) message response
# =========================================================

class MessageResponse(BaseModel):
    message: str
