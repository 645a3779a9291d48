"""mcm_meta_helper — translation coverage checks for MCM Helper mods."""

__all__ = [
    "__version__",
    "check_translations",
    "update_translations",
    "validate_config",
    "TranslationFile",
    "reconcile",
]
__version__ = "0.3.0"

from mcm_meta_helper.api import (  # noqa: E402, F401
    check_translations,
    update_translations,
    validate_config,
)
from mcm_meta_helper.reconcile.engine import reconcile  # noqa: E402, F401
from mcm_meta_helper.translation.file import TranslationFile  # noqa: E402, F401
