"""API: camada de borda.

Responsabilidades:
- Receber eventos do provedor de identidade (push HTTP)
- Validar e normalizar payloads para modelos internos
- Delegar ao use case de sincronização

Subpastas:
- connectors/: parsing por plataforma de origem
- routes/: endpoints HTTP (eventos, health)

NÃO PODE conter: chamadas à API downstream nem política de falha.
"""
