# backend/payflow/presets/__init__.py
"""
Example narratives and payments glossary shown by the UI.
"""

from payflow.presets.registry import (
    GlossaryTerm,
    Preset,
    PresetRegistry,
    get_preset_registry,
)
from payflow.presets.catalog import (
    GLOSSARY,
    PRESET_CATALOG,
    register_all,
)

__all__ = [
    "GlossaryTerm",
    "Preset",
    "PresetRegistry",
    "get_preset_registry",
    "GLOSSARY",
    "PRESET_CATALOG",
    "register_all",
]
