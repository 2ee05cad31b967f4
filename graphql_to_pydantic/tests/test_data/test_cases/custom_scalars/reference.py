from typing import Any, Optional
from pydantic import BaseModel


class Event(BaseModel):
    starts_at: str
    ends_at: Optional[str]
    payload: Any
    url_value: Optional[str]
