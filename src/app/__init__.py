"""App: coração do sistema: serviços, domínio e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, AppContext)
- domain/: modelos de perfil, agenda e inquiry
- services/: serviços de aplicação (conteúdo, inquiries, credenciais, tokens)
- infra/: implementações concretas de IO (Firestore, SMTP, Telegram, hashing)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
