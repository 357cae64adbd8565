"""AlertEvent - alerta operacional disparado pelo health check.

Efêmero: enviado ao endpoint de alertas e descartado.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AlertEvent(BaseModel):
    """Payload enviado ao endpoint de alertas."""

    model_config = ConfigDict(frozen=True)

    app: str
    url: str
    error: str
    timestamp: str
    details: str | None = None
