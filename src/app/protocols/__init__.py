"""Protocolos e contratos do core da aplicação."""

from .alert_sink import AlertSinkProtocol, CapabilityProbeProtocol

__all__ = [
    "AlertSinkProtocol",
    "CapabilityProbeProtocol",
]
