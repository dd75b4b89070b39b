"""Shared utilities."""
from .file_utils import dump_json,read_json,write_atomically

__all__=["dump_json","read_json","write_atomically"]
