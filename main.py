import json
from esresolve.util.logger import log
from esresolve.util.setup import load_settings, config_source_from_settings, resource_names_from_settings
from esresolve.services.kubernetes_services.client_factory import new_directory_service
from esresolve.services.resolver_service import ResolverService

def run():
    settings = load_settings()
    es_settings = settings['elasticsearch']

    directory_service = new_directory_service(config_source_from_settings(settings))
    resolver = ResolverService(directory_service, names=resource_names_from_settings(settings))
    es_config = resolver.resolve(
        es_settings['namespace'],
        es_settings['clusterName'],
        request_timeout=settings['k8s'].get('requestTimeout'),
    )

    print(json.dumps({
        "addresses": es_config.addresses,
        "username": es_config.username,
        "ca_cert": es_config.ca_cert is not None,
    }, indent=2))

if __name__ == '__main__':
    try:
        run()
    except KeyboardInterrupt:
        pass
    except Exception as e:
        log(f'Error: {e}', "ERROR")
        raise SystemExit(1)
