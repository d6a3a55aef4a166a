from studio.infrastructure.local.base import BlobLocalStore


class InMemoryLocalStore(BlobLocalStore):
    """Process-lifetime local store. Used in tests and when no storage path is set."""

    pass
