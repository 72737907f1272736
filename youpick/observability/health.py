"""Liveness report for the /health endpoints.

The probe never fails the request: a down backend yields ``degraded``.
"""

from dataclasses import dataclass, field

from youpick.models.common import utc_now
from youpick.stores.base import SpaceStore


@dataclass
class HealthReport:
    status: str  # "healthy" | "degraded"
    storage: str
    checks: dict[str, bool] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "timestamp": utc_now().isoformat(),
            "storage": self.storage,
            "checks": dict(self.checks),
        }


async def check_health(store: SpaceStore) -> HealthReport:
    checks = {"api": True, "storage": await store.ping()}
    return HealthReport(
        status="healthy" if all(checks.values()) else "degraded",
        storage=store.backend_name,
        checks=checks,
    )
