"""Typed domain models shared across runtime layers."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
    """

    status: str

    def domain_as_payload(self) -> dict[str, str]:
        """Return the JSON-ready representation of this status.

        Returns:
            dict[str, str]: Mapping with the `status` field only.
        """

        return asdict(self)
