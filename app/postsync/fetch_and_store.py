"""Fetch posts and store them once, outside the HTTP server (cron / manual runs)."""
import argparse
import logging

from .config import store_config_from_env
from .errors import FetchError, PostSyncError
from .log import configure_logging
from .services.fetch import POSTS_URL, fetch_posts
from .storage.firestore import FirestoreWriter

log = logging.getLogger("postsync.fetch_store")


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch posts from the API and upsert them into Firestore.",
    )
    parser.add_argument(
        "--url",
        default=POSTS_URL,
        help="Posts endpoint to read from.",
    )
    return parser.parse_args(argv)


def main(argv=None, writer=None) -> int:
    configure_logging()
    args = _parse_args(argv)

    try:
        posts = fetch_posts(args.url)
    except FetchError as exc:
        log.error("Error fetching data: %s", exc)
        return 1

    writer = writer or FirestoreWriter(store_config_from_env())
    try:
        written = writer.save(posts)
    except PostSyncError as exc:
        log.error("Error saving data: %s", exc)
        return 1

    log.info("Stored %s post(s) from %s.", written, args.url)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
