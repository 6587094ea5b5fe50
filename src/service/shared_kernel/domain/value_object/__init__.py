"""Shared Kernel Value Objects"""

from src.service.shared_kernel.domain.value_object.store_snapshot import StoreSnapshot

__all__ = ['StoreSnapshot']
