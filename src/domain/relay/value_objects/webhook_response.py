"""
WebhookResponse Value Object.

Outcome of the single POST to the webhook: status code plus body text.
Interpreting the status is the Application Layer's job.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WebhookResponse:
    """
    Immutable result of a webhook call.

    Attributes:
        status_code: HTTP status returned by the webhook
        body: Response body as text (may be empty)
    """

    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        """True for any 2xx status."""
        return 200 <= self.status_code < 300
