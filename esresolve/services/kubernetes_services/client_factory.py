from kubernetes import client, config
from esresolve.dto.config_source import ConfigSource
from esresolve.services.kubernetes_services.directory_service import DirectoryService
from esresolve.util.logger import log

def load_kubernetes_config(source: ConfigSource) -> client.Configuration:
    configuration = client.Configuration()
    if source.in_cluster:
        config.load_incluster_config(client_configuration=configuration)
        log("Loaded in-cluster Kubernetes configuration")
    else:
        config.load_kube_config(
            config_file=source.kubeconfig_path,
            context=source.context,
            client_configuration=configuration,
        )
        log(f"Loaded Kubernetes configuration from {source.kubeconfig_path or 'default kubeconfig'}")
    return configuration

def check_connection(configuration: client.Configuration) -> None:
    # listing secrets also proves the credentials can read the objects we need
    with client.ApiClient(configuration=configuration) as api_client:
        v1 = client.CoreV1Api(api_client=api_client)
        try:
            v1.list_secret_for_all_namespaces(limit=1)
        except client.ApiException as e:
            log(f"Failed to reach Kubernetes API at {configuration.host}: {e.status} {e.reason}", "ERROR")
            raise

def new_directory_service(source: ConfigSource, verify: bool = True) -> DirectoryService:
    configuration = load_kubernetes_config(source)
    if verify:
        check_connection(configuration)
    return DirectoryService(config=configuration)
