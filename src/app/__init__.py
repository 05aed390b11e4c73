"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos do evento e do payload de sincronização
- use_cases/: casos de uso (política de sucesso/falha)
- infra/: implementações concretas de IO (cliente HTTP JSON)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
