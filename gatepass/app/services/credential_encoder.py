from abc import ABC, abstractmethod


class CredentialEncoder(ABC):
    """Turns a serialized credential payload into a scannable image"""

    @abstractmethod
    def encode(self, payload: str) -> bytes:
        """Encode payload, returning PNG bytes"""
        pass
