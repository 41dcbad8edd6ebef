import base64
from typing import Optional
from kubernetes.client import V1Secret, V1Service
from esresolve.dto.es_config import (
    CA_CERT_KEY,
    ELASTIC_USERNAME,
    Credential,
    EndpointDescriptor,
    ResolvedConfig,
    TrustMaterial,
)
from esresolve.dto.resource import NamespacedName, ResourceKind, ResourceNames
from esresolve.services.protocol.kubernetes.directory_service_protocol import DirectoryServiceProtocol
from esresolve.util.errors import InvalidShapeError, MissingAddressError, MissingEntryError
from esresolve.util.logger import log

# spec.clusterIP of a headless service
HEADLESS_CLUSTER_IP = "None"

class ResolverService:
    """Builds Elasticsearch client configuration from the objects a cluster exposes in Kubernetes.

    Lookups always run in the same order (service, credentials, certificates)
    and stop at the first failure, so no partial configuration is ever returned.
    """
    def __init__(
        self,
        directory_service: DirectoryServiceProtocol,
        names: Optional[ResourceNames] = None,
    ):
        self.directory_service = directory_service
        self.names = names or ResourceNames()

    def resolve(self, namespace: str, cluster_name: str, request_timeout: Optional[float] = None) -> ResolvedConfig:
        endpoint = self.resolve_endpoint(namespace, cluster_name, request_timeout)
        credential = self.resolve_credential(namespace, cluster_name, request_timeout)
        trust = self.resolve_trust_material(namespace, cluster_name, request_timeout)

        log(f"Resolved Elasticsearch cluster {namespace}/{cluster_name} at {endpoint.url()}")
        return ResolvedConfig(
            addresses=[endpoint.url()],
            username=credential.username,
            password=credential.password.decode("utf-8"),
            ca_cert=trust.ca_cert,
        )

    def resolve_endpoint(self, namespace: str, cluster_name: str, request_timeout: Optional[float] = None) -> EndpointDescriptor:
        name = NamespacedName(namespace, self.names.service_name(cluster_name))
        service: V1Service = self.directory_service.get(name, ResourceKind.SERVICE, request_timeout)

        ports = (service.spec.ports if service.spec else None) or []
        if len(ports) != 1:
            log(f"Service {name} does not declare exactly 1 port: {len(ports)}", "ERROR")
            raise InvalidShapeError(f"not exactly 1 port: {len(ports)}")

        protocol = ports[0].name
        if not protocol:
            log(f"Port of Service {name} has no protocol name", "ERROR")
            raise InvalidShapeError(f"port of {name} has no protocol name")

        address = self._select_address(service)
        if not address:
            log(f"Service {name} has no usable address", "ERROR")
            raise MissingAddressError(f"service IP not found for {name}")

        return EndpointDescriptor(protocol=protocol, address=address, port=ports[0].port)

    def resolve_credential(self, namespace: str, cluster_name: str, request_timeout: Optional[float] = None) -> Credential:
        name = NamespacedName(namespace, self.names.credentials_name(cluster_name))
        secret: V1Secret = self.directory_service.get(name, ResourceKind.SECRET, request_timeout)

        password = self._secret_entry(secret, ELASTIC_USERNAME)
        if password is None:
            log(f"Secret {name} has no '{ELASTIC_USERNAME}' entry", "ERROR")
            raise MissingEntryError(ELASTIC_USERNAME, name.name)

        try:
            password.decode("utf-8")
        except UnicodeDecodeError as e:
            log(f"Secret {name} entry '{ELASTIC_USERNAME}' is not valid UTF-8", "ERROR")
            raise InvalidShapeError(f"'{ELASTIC_USERNAME}' entry in Secret {name.name!r} is not valid UTF-8") from e

        return Credential(password=password)

    def resolve_trust_material(self, namespace: str, cluster_name: str, request_timeout: Optional[float] = None) -> TrustMaterial:
        name = NamespacedName(namespace, self.names.certificates_name(cluster_name))
        secret: V1Secret = self.directory_service.get(name, ResourceKind.SECRET, request_timeout)

        ca_cert = self._secret_entry(secret, CA_CERT_KEY)
        if ca_cert is None:
            log(f"Secret {name} has no '{CA_CERT_KEY}' entry, continuing without a CA certificate", "WARNING")
        return TrustMaterial(ca_cert=ca_cert)

    # Helper methods
    def _select_address(self, service: V1Service) -> str:
        ingress = []
        if service.status and service.status.load_balancer:
            ingress = service.status.load_balancer.ingress or []

        # multiple ingress entries are ambiguous, fall back to the cluster IP
        if len(ingress) == 1:
            return ingress[0].ip or ingress[0].hostname or ""

        cluster_ip = service.spec.cluster_ip or ""
        if cluster_ip == HEADLESS_CLUSTER_IP:
            return ""
        return cluster_ip

    def _secret_entry(self, secret: V1Secret, key: str) -> Optional[bytes]:
        data = secret.data or {}
        if key not in data:
            return None
        return base64.b64decode(data[key])
