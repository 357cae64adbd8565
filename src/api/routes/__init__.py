"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (parse, export vCard, health)
- Validação inicial do body
- Delegação para serviços em app.state
- Respostas HTTP apropriadas

Estrutura:
- routes/signature/: /api/parse e /api/vcard
- routes/health/: /health e /api/health
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
