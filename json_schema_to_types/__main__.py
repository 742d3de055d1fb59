from .json_schema_to_types import json_schema_to_types

if __name__ == "__main__":
    json_schema_to_types()
