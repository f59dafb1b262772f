from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class StoreRequest(BaseModel):
    content: dict[str, Any]
