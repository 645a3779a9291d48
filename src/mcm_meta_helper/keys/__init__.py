"""Translation-key extraction from MCM Helper and Inventory Injector JSON."""

from mcm_meta_helper.keys.extractor import collect_required_keys, collect_translation_keys

__all__ = [
    "collect_required_keys",
    "collect_translation_keys",
]
