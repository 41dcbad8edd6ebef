import yaml
import os
from typing import Optional
from cerberus import Validator
from dotenv import load_dotenv
from esresolve.dto.config_source import ConfigSource
from esresolve.dto.resource import ResourceNames
from esresolve.util.errors import SettingsError
from esresolve.util.logger import log

load_dotenv()
settings = {}

SCHEMA_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "config", "settings-schema.yml")

def get_settings():
    global settings
    if settings == {}:
        load_settings()
    return settings

def reset_settings():
    global settings
    settings = {}

def load_settings(config_path: Optional[str] = None):
    if config_path is None:
        config_path = os.getenv("CONFIG_FILE")
        if not config_path:
            raise SettingsError("CONFIG_FILE environment variable is not set and no config_path provided")

    if not os.path.exists(config_path):
        log(f'Config file not found: {config_path}', "ERROR")
        raise SettingsError(f'Config file not found: {config_path}')

    with open(config_path, 'r') as yaml_file:
        loaded_yaml = yaml.safe_load(yaml_file)

    if not os.path.exists(SCHEMA_PATH):
        log(f'Schema file not found: {SCHEMA_PATH}', "ERROR")
        raise SettingsError(f'Schema file not found: {SCHEMA_PATH}')

    with open(SCHEMA_PATH, 'r') as schema_file:
        schema = yaml.safe_load(schema_file)

    v = Validator(schema) # type: ignore
    if not v.validate(loaded_yaml or {}): # type: ignore
        log(f'Invalid config file: {v.errors}', "ERROR")
        raise SettingsError(f'Invalid config file: {v.errors}', errors=v.errors) # type: ignore

    global settings
    settings = v.document
    return settings

def config_source_from_settings(loaded: Optional[dict] = None) -> ConfigSource:
    k8s = (loaded or get_settings())['k8s']
    config_path = k8s.get('configPath')
    return ConfigSource(
        kubeconfig_path=os.path.expanduser(config_path) if config_path else None,
        context=k8s.get('context'),
        in_cluster=k8s.get('inCluster', False),
    )

def resource_names_from_settings(loaded: Optional[dict] = None) -> ResourceNames:
    names = (loaded or get_settings())['elasticsearch'].get('names') or {}
    return ResourceNames(**names)
