from typing import Optional


class ResolveError(Exception):
    """Base class for every failure raised while resolving a cluster config."""


class NotFoundError(ResolveError):
    def __init__(self, kind: str, namespace: str, name: str):
        self.kind = kind
        self.namespace = namespace
        self.name = name
        super().__init__(f"{kind} {namespace}/{name} not found")


class InvalidShapeError(ResolveError):
    pass


class MissingAddressError(ResolveError):
    pass


class MissingEntryError(ResolveError):
    def __init__(self, key: str, name: str):
        self.key = key
        self.name = name
        super().__init__(f"no '{key}' entry in Secret {name!r}")


class SettingsError(Exception):
    def __init__(self, message: str, errors: Optional[dict] = None):
        self.errors = errors
        super().__init__(message)
