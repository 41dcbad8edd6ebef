import ssl
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

ELASTIC_USERNAME = "elastic"
CA_CERT_KEY      = "ca.crt"


@dataclass(frozen=True)
class EndpointDescriptor:
    protocol: str
    address:  str
    port:     int

    def url(self) -> str:
        return f"{self.protocol}://{self.address}:{self.port}"


@dataclass(frozen=True)
class Credential:
    password: bytes = field(repr=False)
    username: str   = ELASTIC_USERNAME


@dataclass(frozen=True)
class TrustMaterial:
    ca_cert: Optional[bytes] = None


@dataclass(frozen=True)
class ResolvedConfig:
    addresses: List[str]
    username:  str
    password:  str             = field(repr=False)
    ca_cert:   Optional[bytes] = field(default=None, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict (e.g. for JSON)."""
        return asdict(self)

    def to_client_options(self) -> Dict[str, Any]:
        """Keyword arguments for constructing an Elasticsearch client."""
        options: Dict[str, Any] = {
            "hosts": list(self.addresses),
            "basic_auth": (self.username, self.password),
        }
        if self.ca_cert is not None:
            options["ssl_context"] = ssl.create_default_context(cadata=self.ca_cert.decode("ascii"))
        return options
