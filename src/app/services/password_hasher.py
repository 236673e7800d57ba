from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Credential hasher interface - application layer"""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted one-way hash; repeated calls give different output"""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True iff password matches the input that produced password_hash"""
        pass

    @abstractmethod
    def dummy_verify(self) -> None:
        """Spend the time of one verify call, used when no user was found"""
        pass
