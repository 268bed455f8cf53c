"""Fetch posts from the JSONPlaceholder API."""
import logging
from typing import List, Optional

import requests

from postsync.errors import FetchError
from postsync.models.post import Post

log = logging.getLogger("postsync.fetch")

POSTS_URL = "https://jsonplaceholder.typicode.com/posts"


def fetch_posts_response(url: str = POSTS_URL,
                         session: Optional[requests.Session] = None) -> requests.Response:
    sess = session or requests
    log.info("Fetching %s", url)
    try:
        resp = sess.get(url)
    except requests.RequestException as exc:
        raise FetchError(f"error fetching data: {exc}") from exc

    if resp.status_code != 200:
        raise FetchError(
            f"unexpected status: {resp.status_code} {resp.reason}",
            status_code=resp.status_code,
        )
    return resp


def parse_posts(payload) -> List[Post]:
    if not isinstance(payload, list):
        raise FetchError(
            f"error decoding response: expected a JSON array, got {type(payload).__name__}"
        )

    posts: List[Post] = []
    for idx, item in enumerate(payload):
        try:
            posts.append(Post.from_json(item))
        except ValueError as exc:
            raise FetchError(f"error decoding response: element {idx}: {exc}") from exc
    return posts


def fetch_posts(url: str = POSTS_URL,
                session: Optional[requests.Session] = None) -> List[Post]:
    """
    GET the posts list and decode it into Post records.

    Raises FetchError on a transport failure, any status other than 200,
    or a body that is not a JSON array of post objects.
    """
    resp = fetch_posts_response(url, session=session)
    try:
        payload = resp.json()
    except ValueError as exc:
        raise FetchError(f"error decoding response: {exc}") from exc

    posts = parse_posts(payload)
    log.info("Fetched %d post(s)", len(posts))
    return posts
