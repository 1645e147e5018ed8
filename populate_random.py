"""
Fills a running server with random community data through the public API:
registers users, then pushes ratings, comments, replies and likes.
"""
import os
import sys
import time
import logging
import random
import string
from typing import Dict, List, Optional
from concurrent.futures import ThreadPoolExecutor, as_completed

import requests
from requests.exceptions import RequestException
from tqdm import tqdm
from dotenv import load_dotenv
import backoff

# Load environment variables
load_dotenv()

# Configuration
SERVER_URL      = os.getenv("SERVER_URL", "http://localhost:8000").rstrip("/")
USERS           = int(os.getenv("POPULATE_USERS", "20"))
ACTIONS         = int(os.getenv("POPULATE_ACTIONS", "300"))
WORKERS         = int(os.getenv("WORKERS", "8"))
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))
PASSWORD        = os.getenv("POPULATE_PASSWORD", "populate123")

SCORES = [i / 2 for i in range(1, 11)]
PHRASES = [
    "百听不厌", "前奏一响就回来了", "编曲太绝了", "这首歌陪我度过了高中",
    "live 版本更好听", "歌词写得真好", "R&B 永远的神", "单曲循环中",
]

# Logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[
        logging.FileHandler("populate_random.log", encoding="utf-8"),
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)


class ApiError(Exception):
    pass


def _check(resp: requests.Response) -> dict:
    # 4xx are answers, not outages: no retry
    if resp.status_code >= 500:
        resp.raise_for_status()
    body = resp.json()
    if body.get("code") != 200:
        raise ApiError(f"{resp.request.method} {resp.url}: {body.get('msg')}")
    return body.get("data")


@backoff.on_exception(backoff.expo, RequestException, max_tries=5, jitter=backoff.full_jitter)
def api_get(session: requests.Session, path: str, **params) -> dict:
    return _check(session.get(f"{SERVER_URL}{path}", params=params, timeout=REQUEST_TIMEOUT))


@backoff.on_exception(backoff.expo, RequestException, max_tries=5, jitter=backoff.full_jitter)
def api_post(session: requests.Session, path: str, json: Optional[dict] = None, token: Optional[str] = None) -> dict:
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    return _check(session.post(f"{SERVER_URL}{path}", json=json, headers=headers, timeout=REQUEST_TIMEOUT))


def random_username() -> str:
    return "fan_" + "".join(random.choices(string.ascii_lowercase + string.digits, k=8))


def create_users(session: requests.Session, count: int) -> Dict[str, str]:
    tokens = {}
    for _ in tqdm(range(count), desc="Registering users"):
        username = random_username()
        try:
            api_post(session, "/api/user/register", {"username": username, "password": PASSWORD})
            data = api_post(session, "/api/user/login", {"username": username, "password": PASSWORD})
            tokens[username] = data["token"]
        except ApiError as e:
            logger.warning(f"Skipping {username}: {e}")
    return tokens


def load_targets(session: requests.Session) -> List[tuple]:
    targets = []
    for album in api_get(session, "/api/albums"):
        for song in api_get(session, f"/api/albums/{album['id']}/songs"):
            targets.append(("songs", song["id"]))
    for single in api_get(session, "/api/singles"):
        targets.append(("singles", single["id"]))
    return targets


def random_action(session: requests.Session, tokens: Dict[str, str], targets: List[tuple]) -> str:
    token = random.choice(list(tokens.values()))
    kind, resource_id = random.choice(targets)
    roll = random.random()

    if roll < 0.5:
        api_post(session, f"/api/{kind}/{resource_id}/rating", {"score": random.choice(SCORES)}, token)
        return "rating"

    comments = api_get(session, f"/api/{kind}/{resource_id}/comments", pageSize=20)["comments"]
    if roll < 0.75 or not comments:
        api_post(session, f"/api/{kind}/{resource_id}/comment", {"content": random.choice(PHRASES)}, token)
        return "comment"

    target = random.choice(comments + [r for c in comments for r in c["replies"]])
    if roll < 0.9:
        api_post(session, f"/api/{kind}/{resource_id}/comment",
                 {"content": random.choice(PHRASES), "parentId": target["id"]}, token)
        return "reply"
    try:
        api_post(session, f"/api/comments/{target['id']}/like", token=token)
    except ApiError:
        # already liked by this user
        return "skipped"
    return "like"


def main():
    # Check server availability
    session = requests.Session()
    session.mount('http://', requests.adapters.HTTPAdapter(pool_connections=WORKERS, pool_maxsize=WORKERS))
    try:
        r = session.get(f"{SERVER_URL}/health", timeout=5)
        r.raise_for_status()
    except Exception as e:
        logger.error(f"Cannot connect to server: {e}")
        sys.exit(1)

    targets = load_targets(session)
    logger.info(f"Catalog has {len(targets)} rateable items")
    if not targets:
        logger.error("Empty catalog, nothing to populate")
        sys.exit(1)

    tokens = create_users(session, USERS)
    logger.info(f"Registered {len(tokens)} users")
    if not tokens:
        sys.exit(1)

    done: Dict[str, int] = {}
    with ThreadPoolExecutor(max_workers=WORKERS) as exec:
        futures = [exec.submit(random_action, session, tokens, targets) for _ in range(ACTIONS)]
        for f in tqdm(as_completed(futures), total=len(futures), desc="Pushing to server"):
            try:
                kind = f.result()
                done[kind] = done.get(kind, 0) + 1
            except Exception as e:
                logger.warning(f"Action failed: {e}")

    logger.info("Done: " + ", ".join(f"{k}={v}" for k, v in sorted(done.items())))


if __name__ == "__main__":
    start = time.time()
    try:
        main()
    except Exception as e:
        logger.error(f"Fatal error: {e}")
    finally:
        logger.info(f"Total time: {(time.time() - start)/60:.2f} min")
