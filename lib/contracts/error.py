"""Error body returned for every failed request."""
from pydantic import BaseModel


class ErrorBody(BaseModel):
    status: int
    error: str
    message: str = ""
    path: str
