# resume_insight/utils/passwords.py
from passlib.context import CryptContext

MIN_PASSWORD_CHARS = 8
MAX_PASSWORD_CHARS = 4096

_pwd = CryptContext(schemes=["argon2"], deprecated="auto")

def hash_password(raw: str) -> str:
    raw = (raw or "").strip()
    if len(raw) < MIN_PASSWORD_CHARS:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_CHARS} characters")
    return _pwd.hash(raw[:MAX_PASSWORD_CHARS])

def verify_password(raw: str, hashed: str) -> bool:
    raw = (raw or "").strip()
    if not raw or not hashed:
        return False
    return _pwd.verify(raw[:MAX_PASSWORD_CHARS], hashed)
