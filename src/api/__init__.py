"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests do site e do dashboard
- Validar bodies e bearer token
- Mapear exceções de domínio para `{"error": ...}`

Módulos:
- routes/: endpoints HTTP (público, auth, admin, páginas, health)
- dependencies.py: AppContext e exigência de admin
- errors.py: exception handlers
- middleware.py: correlation_id por request

NÃO PODE conter: regras de validação de domínio nem acesso direto ao store.
"""
