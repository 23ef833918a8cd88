from .handler import MapHandler, file_handler, json_handler, map_handler, yaml_handler
from .loader import PathURL, RedirectConfigError, build_map, parse_json, parse_yaml

__all__ = [
    "MapHandler",
    "PathURL",
    "RedirectConfigError",
    "build_map",
    "file_handler",
    "json_handler",
    "map_handler",
    "parse_json",
    "parse_yaml",
    "yaml_handler",
]
