"""Small shared helpers: exit codes and canonical JSON output."""

from mcm_meta_helper.utils.exit_codes import ExitCode
from mcm_meta_helper.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
