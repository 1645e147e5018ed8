from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from ..config import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRE_DAYS, BCRYPT_ROUNDS, PASSWORD_MAX_BYTES
from ..errors import AuthError


def _password_bytes(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes; newer releases raise instead of truncating
    return password.encode("utf-8")[:PASSWORD_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    Хэш bcrypt в виде строки для колонки users.password_hash.
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # malformed hash in the db
        return False


def create_token(username: str, expires_delta: timedelta = None) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "iat": now,
        "exp": now + (expires_delta or timedelta(days=JWT_EXPIRE_DAYS)),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> str:
    """
    Проверяет подпись и срок действия, возвращает username из ``sub``.
    """
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthError("Token expired")
    except jwt.InvalidTokenError:
        raise AuthError("Invalid token")
    username = payload.get("sub")
    if not username:
        raise AuthError("Invalid token")
    return username
