from .jsonio import read_json_list_of_dicts, write_json_list

__all__ = ["read_json_list_of_dicts", "write_json_list"]
