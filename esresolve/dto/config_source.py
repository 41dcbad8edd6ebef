from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ConfigSource:
    """Where the Kubernetes client configuration is loaded from.

    Passed explicitly to the client constructor instead of being read from
    the ``KUBECONFIG`` environment variable. ``kubeconfig_path`` of None lets
    the kubernetes library fall back to its default location.
    """
    kubeconfig_path: Optional[str] = None
    context:         Optional[str] = None
    in_cluster:      bool          = False
