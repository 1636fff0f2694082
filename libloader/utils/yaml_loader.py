from ruamel.yaml import YAML

def get_yaml_instance() -> YAML:
    # manifests are read-only, no need for round-trip preservation
    yaml = YAML(typ="safe", pure=True)
    yaml.allow_duplicate_keys = False
    return yaml
