"""Sample API service.

The :class:`SampleController` holds the behaviour behind each endpoint of
the sample API.  Every method is a pure mapping of its input; parsing of
path variables and request bodies happens in the HTTP layer
(:mod:`apps.sample_api.main`) before a method is called, so nothing here
can fail on bad input.
"""

from __future__ import annotations

from dataclasses import dataclass

from lib.contracts.sample import Sample


DEFAULT_SAMPLE_ID = 1
DEFAULT_SAMPLE_TEXT = "sample text"


@dataclass
class SampleController:
    """Endpoint behaviour for ``/sample/``, ``/string``, ``/long`` and
    ``/requestbody``."""

    sample_id: int = DEFAULT_SAMPLE_ID
    sample_text: str = DEFAULT_SAMPLE_TEXT

    def get_sample(self) -> Sample:
        """Return a freshly built fixed sample."""

        return Sample(id=self.sample_id, text=self.sample_text)

    def echo_text(self, text: str) -> str:
        return text

    def echo_long(self, value: int) -> int:
        return value

    def echo_sample(self, sample: Sample) -> Sample:
        """Return the deserialised request body unchanged."""

        return sample


__all__ = ["SampleController", "DEFAULT_SAMPLE_ID", "DEFAULT_SAMPLE_TEXT"]
