"""Casos de uso de contas do provedor de identidade."""

from app.use_cases.accounts.sync_account_created import SyncAccountCreatedUseCase

__all__ = ["SyncAccountCreatedUseCase"]
