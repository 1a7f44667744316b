"""
Password hashing for staff accounts

Hashing is deliberately slow, so request handlers use the ``*_async``
variants, which run the work in the threadpool instead of on the event loop.
"""

from typing import Optional

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from starlette.concurrency import run_in_threadpool

password_hasher = PasswordHash.recommended()


def hash_password(password: str) -> str:
    """Return an Argon2id hash string for ``password``"""
    return password_hasher.hash(password)


def verify_password(password: str, stored: Optional[str]) -> bool:
    """Check ``password`` against a stored hash; unreadable hashes never match"""
    if not stored:
        return False
    try:
        return password_hasher.verify(password, stored)
    except (UnknownHashError, ValueError):
        return False


async def hash_password_async(password: str) -> str:
    return await run_in_threadpool(hash_password, password)


async def verify_password_async(password: str, stored: Optional[str]) -> bool:
    return await run_in_threadpool(verify_password, password, stored)
