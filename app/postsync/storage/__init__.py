from .firestore import FirestoreWriter, default_client_factory

__all__ = ["FirestoreWriter", "default_client_factory"]
