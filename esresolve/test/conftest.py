import base64
from typing import Dict, List, Optional, Tuple
import pytest
from kubernetes import client
from esresolve.dto.resource import NamespacedName, ResourceKind
from esresolve.util.errors import NotFoundError

NAMESPACE = "ns-a"
CLUSTER = "cluster-a"


def encode(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


class FakeDirectory:
    """In-memory stand-in for the Kubernetes API that records every lookup."""

    def __init__(self, objects):
        self.objects: Dict[Tuple[ResourceKind, str, str], object] = {}
        self.calls: List[Tuple[ResourceKind, str, Optional[float]]] = []
        for obj in objects:
            kind = ResourceKind.SERVICE if isinstance(obj, client.V1Service) else ResourceKind.SECRET
            self.objects[(kind, obj.metadata.namespace, obj.metadata.name)] = obj

    def get(self, name: NamespacedName, kind: ResourceKind, request_timeout: Optional[float] = None):
        self.calls.append((kind, name.name, request_timeout))
        try:
            return self.objects[(kind, name.namespace, name.name)]
        except KeyError:
            raise NotFoundError(kind.value, name.namespace, name.name)


def make_service(ports=None, cluster_ip="127.0.0.1", ingress=None, name=f"{CLUSTER}-es-http"):
    if ports is None:
        ports = [client.V1ServicePort(name="http", port=9200)]
    status = None
    if ingress is not None:
        status = client.V1ServiceStatus(
            load_balancer=client.V1LoadBalancerStatus(ingress=ingress)
        )
    return client.V1Service(
        metadata=client.V1ObjectMeta(namespace=NAMESPACE, name=name),
        spec=client.V1ServiceSpec(ports=ports, cluster_ip=cluster_ip),
        status=status,
    )


def make_secret(name: str, data: Optional[Dict[str, bytes]] = None):
    encoded = None
    if data is not None:
        encoded = {key: encode(value) for key, value in data.items()}
    return client.V1Secret(
        metadata=client.V1ObjectMeta(namespace=NAMESPACE, name=name),
        data=encoded,
    )


@pytest.fixture
def service():
    return make_service()


@pytest.fixture
def user_secret():
    return make_secret(f"{CLUSTER}-es-elastic-user", {"elastic": b"secretpw"})


@pytest.fixture
def invalid_user_secret():
    return make_secret(f"{CLUSTER}-es-elastic-user", {"badEntry": b"x"})


@pytest.fixture
def certs_secret():
    return make_secret(f"{CLUSTER}-es-http-certs-public")


@pytest.fixture
def directory():
    def build(*objects):
        return FakeDirectory(objects)
    return build
