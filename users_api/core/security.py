# Standard library imports
import logging
from typing import Optional

# External package imports
import bcrypt

# Local application imports
from .config import get_settings
from ..domain.exceptions import PasswordHashingError

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plain password using bcrypt
    
    Only the first 72 bytes of the UTF-8 encoded password are hashed.
    
    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt cost factor; defaults to the BCRYPT_ROUNDS setting
        
    Returns:
        Hashed password string
        
    Raises:
        PasswordHashingError: If bcrypt could not produce a hash
    """
    cost = rounds if rounds is not None else get_settings().bcrypt_rounds
    try:
        salt = bcrypt.gensalt(rounds=cost)
        hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
    except (ValueError, TypeError) as e:
        logger.error(f"Password hashing failed: {e}")
        raise PasswordHashingError(f"Password hashing failed: {str(e)}") from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password
    
    Used to check stored hashes; passwords longer than 72 bytes are
    compared on their first 72 bytes, as when they were hashed.
    
    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against
        
    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError):
        return False
