from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Return a salted bcrypt digest; raises ValueError past bcrypt's input limit."""
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError("The password is too long: bcrypt accepts at most 72 bytes.")
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    # bcrypt cannot hash an over-long candidate, so it can never match a stored digest
    if len(plain.encode("utf-8")) > BCRYPT_MAX_BYTES:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False
