from abc import ABC, abstractmethod

from corsgate.resources.models import Resource


class ResourceLoader(ABC):
    """
    Abstract interface for fetching resource definitions.

    This interface allows us to swap out different resource sources
    (YAML files, databases, etc.) without changing the application logic.
    """

    @abstractmethod
    async def get_resources(self) -> list[Resource]:
        """
        Fetch all resource definitions.

        Returns:
            list of Resource objects
        """
        pass
