from dataclasses import dataclass
from enum import Enum

DEFAULT_SERVICE_TEMPLATE      = "{cluster}-es-http"
DEFAULT_CREDENTIALS_TEMPLATE  = "{cluster}-es-elastic-user"
DEFAULT_CERTIFICATES_TEMPLATE = "{cluster}-es-http-certs-public"


class ResourceKind(Enum):
    SERVICE = "Service"
    SECRET  = "Secret"


@dataclass(frozen=True)
class NamespacedName:
    namespace: str
    name:      str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True)
class ResourceNames:
    """Name templates for the objects an Elasticsearch cluster exposes.

    Each template is formatted with ``cluster`` set to the logical cluster name.
    """
    service:      str = DEFAULT_SERVICE_TEMPLATE
    credentials:  str = DEFAULT_CREDENTIALS_TEMPLATE
    certificates: str = DEFAULT_CERTIFICATES_TEMPLATE

    def service_name(self, cluster_name: str) -> str:
        return self.service.format(cluster=cluster_name)

    def credentials_name(self, cluster_name: str) -> str:
        return self.credentials.format(cluster=cluster_name)

    def certificates_name(self, cluster_name: str) -> str:
        return self.certificates.format(cluster=cluster_name)
