"""Store package for cached space and window state."""

from .store import (
    ABSENT,
    LOADING,
    POPULATED,
    SpaceStore,
    get_space_store,
    initialize_space_store,
    reset_space_store,
)

__all__ = [
    'ABSENT',
    'LOADING',
    'POPULATED',
    'SpaceStore',
    'get_space_store',
    'initialize_space_store',
    'reset_space_store',
]
