"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (site público, login, dashboard, health)
- Validação inicial de request (body, query params, bearer token)
- Delegação para app.services via AppContext
- Respostas `{"error": ...}` via api.errors

Estrutura:
- routes/public/: perfil, agenda e formulário do site
- routes/auth/: login do admin
- routes/admin/: endpoints do dashboard
- routes/pages/: login.html e dashboard.html
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
