from .loader import load_yaml_typed, read_yaml
from .scalars import DEFAULT_SCALARS, ScalarMapping, ValueCategory, categorize, load_scalar_mapping
from .schema_loader import Schema, build_schema, load_schema, parse_type_ref, schema_from_dict

__all__ = [
    "DEFAULT_SCALARS",
    "ScalarMapping",
    "Schema",
    "ValueCategory",
    "build_schema",
    "categorize",
    "load_scalar_mapping",
    "load_schema",
    "load_yaml_typed",
    "parse_type_ref",
    "read_yaml",
    "schema_from_dict",
]
