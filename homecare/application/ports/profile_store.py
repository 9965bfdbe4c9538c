from abc import ABC, abstractmethod

from homecare.domain.entities.profile import UserProfile


class ProfileStorePort(ABC):
    @abstractmethod
    def get_profile(self, user_id: str) -> UserProfile:
        """Fetch exactly one profile. Raises ProfileNotFoundError when missing."""
        raise NotImplementedError

    @abstractmethod
    def find_id_by_email(self, email: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def create_profile(self, profile: UserProfile) -> UserProfile:
        raise NotImplementedError
