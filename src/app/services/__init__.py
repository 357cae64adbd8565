"""Serviços de aplicação.

Implementações concretas de IO ficam em app/infra/.
"""

from app.services.health_monitor import (
    HealthMonitor,
    HealthMonitorSettings,
    HealthOutcome,
    HealthReport,
    ProbeFailure,
    classify_probe_failure,
    is_transient_overload,
)

__all__ = [
    "HealthMonitor",
    "HealthMonitorSettings",
    "HealthOutcome",
    "HealthReport",
    "ProbeFailure",
    "classify_probe_failure",
    "is_transient_overload",
]
