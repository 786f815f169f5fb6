from abc import ABC, abstractmethod


class IAuthProvider(ABC):
    """Proof-of-identity capability consumed by ledger commands."""

    @abstractmethod
    def require(self, identity: str) -> None:
        """
        Demand proof that the caller acts as `identity`.

        Raises:
            UnauthorizedError: When the proof is missing or does not match
        """
        pass
