import secrets
import string
import uuid
from typing import Protocol

ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits


class IIDGenerator(Protocol):
    """
    Protocol for ID generation strategies.
    Lets callers swap random strings for UUIDs without changing call sites.
    """

    def next_id(self) -> str:
        """Generates the next identifier."""
        ...


class RandomIdGenerator(IIDGenerator):
    """Fixed-length identifiers drawn from ``[A-Za-z0-9]``."""

    def __init__(self, length: int = 10) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self.length = length

    def next_id(self) -> str:
        return "".join(secrets.choice(ALPHANUMERIC) for _ in range(self.length))


class UUID4Generator(IIDGenerator):
    """Random UUIDv4 identifiers."""

    def next_id(self) -> str:
        """Returns a string representation of a random UUIDv4."""
        return str(uuid.uuid4())


def generate_id(type: str, length: int = 10) -> str | None:
    """
    Generate an identifier of the given *type*.

    ``"random"`` yields *length* alphanumeric characters, ``"uuid"`` a
    UUIDv4 string. Any other type returns ``None``.
    """
    generator: IIDGenerator
    if type == "random":
        generator = RandomIdGenerator(length)
    elif type == "uuid":
        generator = UUID4Generator()
    else:
        return None
    return generator.next_id()
