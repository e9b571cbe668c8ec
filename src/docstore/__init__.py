from .store import DocumentNotFoundError, DocumentStore

__all__ = ["DocumentStore", "DocumentNotFoundError"]
