import uuid
from typing import Callable, Optional


class IdentifierGenerator:
    """Hands out a fresh record identifier for every creation call.

    Identifiers are random UUID4 strings; with 122 random bits no
    collision check is performed.
    """

    def __init__(self, factory: Optional[Callable[[], str]] = None):
        self._factory = factory or (lambda: str(uuid.uuid4()))

    def __call__(self) -> str:
        return self._factory()
