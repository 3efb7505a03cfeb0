# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""
from typing import Literal

from pydantic import BaseModel

# Output of the price endpoints: JSON, or the bare number for IMPORTDATA
ResponseFormat = Literal["json", "text"]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
