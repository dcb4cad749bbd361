"""Sample model exchanged by the sample API."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from lib.utils.validation import INT64_MAX, INT64_MIN


class Sample(BaseModel):
    """A sample with an optional id and optional text.

    Both fields may be absent.  Serialisation goes through :meth:`to_json`
    which keeps only the fields that were actually provided, so a payload
    echoed back keeps the same set of keys it arrived with.  Both fields are
    strict: booleans, floats and numeric strings are rejected instead of
    coerced, so an echo never rewrites a value.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = Field(default=None, strict=True, ge=INT64_MIN, le=INT64_MAX)
    text: Optional[str] = Field(default=None, strict=True)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
