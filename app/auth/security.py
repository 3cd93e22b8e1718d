from passlib.context import CryptContext

# Fixed cost factor. bcrypt_sha256 is the default so passwords past bcrypt's
# 72-byte limit are not truncated; plain bcrypt tokens still verify.
BCRYPT_ROUNDS = 10

pwd_context = CryptContext(
    schemes=["bcrypt_sha256", "bcrypt"],
    deprecated="auto",
    bcrypt_sha256__rounds=BCRYPT_ROUNDS,
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unrecognised or corrupted hash
        return False


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def dummy_verify() -> None:
    """Spend roughly one verification's time when there is no hash to check."""
    pwd_context.dummy_verify()
