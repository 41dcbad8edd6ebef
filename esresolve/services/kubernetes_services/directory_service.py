from kubernetes import client
from typing import Optional, Union
from esresolve.dto.resource import NamespacedName, ResourceKind
from esresolve.util.errors import NotFoundError
from esresolve.util.logger import log

class DirectoryService():
    def __init__(self, config: client.Configuration):
        api_client = client.ApiClient(configuration=config)
        self.v1 = client.CoreV1Api(api_client=api_client)

    def get(
        self,
        name: NamespacedName,
        kind: ResourceKind,
        request_timeout: Optional[float] = None,
    ) -> Union[client.V1Service, client.V1Secret]:
        kwargs = {}
        if request_timeout is not None:
            kwargs["_request_timeout"] = request_timeout

        try:
            if kind is ResourceKind.SERVICE:
                return self.v1.read_namespaced_service(name.name, name.namespace, **kwargs)
            if kind is ResourceKind.SECRET:
                return self.v1.read_namespaced_secret(name.name, name.namespace, **kwargs)
        except client.ApiException as e:
            if e.status == 404:
                log(f"{kind.value} {name} not found", "WARNING")
                raise NotFoundError(kind.value, name.namespace, name.name) from e
            log(f"Failed to get {kind.value} {name}: {e.status} {e.reason}", "ERROR")
            raise

        raise ValueError(f"Unsupported resource kind: {kind}")
