from typing import Optional, Protocol, Union
from kubernetes.client import V1Secret, V1Service
from esresolve.dto.resource import NamespacedName, ResourceKind

class DirectoryServiceProtocol(Protocol):
    def get(
        self,
        name: NamespacedName,
        kind: ResourceKind,
        request_timeout: Optional[float] = None,
    ) -> Union[V1Service, V1Secret]:
        """Fetch a namespaced resource of the given kind, raising NotFoundError if it does not exist."""
        ...
