"""Small helpers that do not depend on the rest of the package."""

from scenepath.utils.yaml_utils import normalize_yaml_keys

__all__ = ["normalize_yaml_keys"]
