"""Implementações de IO para alertas operacionais."""

from app.infra.alerts.http_alert_sink import HttpAlertSink

__all__ = ["HttpAlertSink"]
