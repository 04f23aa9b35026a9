import bcrypt

from config import ApplicationConfig

# bcrypt only consumes the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72

_dummy_hash = None


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt"""
    hashed = bcrypt.hashpw(
        _password_bytes(password), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    )
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time check of a password against its stored hash"""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        return False


def burn_password_check(password: str) -> None:
    """Run a throwaway hash check so unknown users cost the same as bad passwords"""
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password("dummy_password").encode("utf-8")
    bcrypt.checkpw(_password_bytes(password), _dummy_hash)
