"""App - serviços, domínio e infraestrutura do SigBlock Parser.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: serialização vCard e eventos de alerta
- services/: HealthMonitor
- infra/: implementações concretas de IO (OpenAI, alertas HTTP)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; ai extrai; utils apoia.
"""
