"""Content-format scanners: text in, located candidates out."""

from .common import Candidate, LineIndex, X_GTS_REF_KEY, child_path
from .json import scan_json_content
from .markdown import scan_markdown_content
from .yaml import scan_yaml_content, split_yaml_documents

__all__ = [
    "Candidate",
    "LineIndex",
    "X_GTS_REF_KEY",
    "child_path",
    "scan_json_content",
    "scan_markdown_content",
    "scan_yaml_content",
    "split_yaml_documents",
]
