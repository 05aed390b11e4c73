"""Connectors: adapters de borda para plataformas externas.

Estrutura:
- firebase_auth/: eventos do Firebase Authentication
"""

__all__: list[str] = []
