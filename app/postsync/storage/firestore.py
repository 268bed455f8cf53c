import logging
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, Optional

from google.auth.credentials import AnonymousCredentials
from google.cloud import firestore

from postsync.config import StoreConfig
from postsync.errors import ConfigError, WriteError
from postsync.models.post import Post

log = logging.getLogger("postsync.firestore")

ClientFactory = Callable[[StoreConfig], "firestore.Client"]


def default_client_factory(config: StoreConfig) -> firestore.Client:
    if not config.emulator_host:
        return firestore.Client(project=config.project)

    client = firestore.Client(
        project=config.project,
        credentials=AnonymousCredentials(),
        client_options={"api_endpoint": config.emulator_host},
    )
    # The client only opens an insecure channel (and sends the emulator auth
    # header) when this is set; normally it comes from FIRESTORE_EMULATOR_HOST.
    client._emulator_host = config.emulator_host
    return client


class FirestoreWriter:
    """
    Upserts posts into a Firestore collection, one document per post.

    A client is opened for each save() call and closed before it returns,
    whether or not every write succeeded.
    """

    def __init__(self, config: StoreConfig, client_factory: Optional[ClientFactory] = None):
        self.config = config
        self.client_factory = client_factory or default_client_factory

    @contextmanager
    def _open_client(self) -> Iterator[firestore.Client]:
        try:
            client = self.client_factory(self.config)
        except Exception as exc:
            raise WriteError(f"firestore client creation failed: {exc}") from exc
        try:
            yield client
        finally:
            client.close()

    def save(self, posts: Iterable[Post]) -> int:
        """
        Write every post to the configured collection, keyed by str(post.id).

        Each write replaces the whole document. The first failing write
        stops the loop; documents already written stay written.
        Returns the number of documents written.
        """
        if not self.config.project:
            raise ConfigError("FIRESTORE_PROJECT environment variable not set")

        written = 0
        with self._open_client() as client:
            if self.config.emulator_host:
                log.info("Using Firestore emulator at %s", self.config.emulator_host)

            collection = client.collection(self.config.collection)
            for post in posts:
                try:
                    collection.document(post.doc_id).set(post.to_json())
                except Exception as exc:
                    raise WriteError(
                        f"error saving record ID {post.id}: {exc}",
                        record_id=post.id,
                    ) from exc
                written += 1

        log.info("Saved %d post(s) to %s", written, self.config.collection)
        return written
