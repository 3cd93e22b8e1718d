import enum
import logging

from app.auth.exceptions import ValidationError

logger = logging.getLogger(__name__)


class Role(str, enum.Enum):
    BUYER = "buyer"
    FARMER = "farmer"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def resolve_role(value: str, strict: bool = False) -> Role:
    """Map a request's role string to a partition.

    Anything other than "buyer" or "farmer" is treated as a farmer unless
    ``strict`` is set, in which case it is rejected.
    """
    try:
        return Role(value)
    except ValueError:
        if strict:
            raise ValidationError("Invalid role")
        logger.warning("Unknown role %r, treating as farmer", value)
        return Role.FARMER
