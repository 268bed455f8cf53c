import logging
import os

from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse

from .config import store_config_from_env
from .errors import FetchError, PostSyncError
from .log import configure_logging
from .services.fetch import fetch_posts
from .storage.firestore import FirestoreWriter
from .version import __version__

log = logging.getLogger("postsync.function")

SUCCESS_MESSAGE = "Data successfully processed and stored!"
FETCH_FAILED_MESSAGE = "Failed to fetch data"
SAVE_FAILED_MESSAGE = "Failed to save data"

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

DEFAULT_PORT = 8080

app = FastAPI(title="postsync", version=__version__)


def get_fetcher():
    return fetch_posts


def get_writer() -> FirestoreWriter:
    # Environment is read per invocation, not at import time.
    return FirestoreWriter(store_config_from_env())


# ─────────────────────────────────────────────────────────────
# Entry point: fetch -> save -> respond
# ─────────────────────────────────────────────────────────────
@app.api_route("/", methods=ALL_METHODS, response_class=PlainTextResponse)
def function_entry_point(
    fetcher=Depends(get_fetcher),
    writer: FirestoreWriter = Depends(get_writer),
):
    try:
        posts = fetcher()
    except FetchError as exc:
        log.error("Error fetching data: %s", exc)
        return PlainTextResponse(FETCH_FAILED_MESSAGE, status_code=500)

    try:
        writer.save(posts)
    except PostSyncError as exc:
        log.error("Error saving data: %s", exc)
        return PlainTextResponse(SAVE_FAILED_MESSAGE, status_code=500)

    return PlainTextResponse(SUCCESS_MESSAGE, status_code=200)


def main() -> None:
    import uvicorn

    configure_logging()
    port = int(os.getenv("PORT", DEFAULT_PORT))
    log.info("Server started on :%d", port)
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
