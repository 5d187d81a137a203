# backend/payflow/presets/registry.py
"""
Preset Registry - Central store for example narratives and glossary terms
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from payflow.utils.log import get_logger


logger = get_logger(__name__)


@dataclass
class Preset:
    """An example payments narrative the UI can drop into the input box"""
    id: str
    label: str
    text: str


@dataclass
class GlossaryTerm:
    term: str
    definition: str


class PresetRegistry:
    """
    Registry for presets and glossary terms.

    Keeps registration order, which is the order the UI shows them in.
    """

    def __init__(self):
        self.presets: Dict[str, Preset] = {}
        self.glossary: List[GlossaryTerm] = []

    def register(self, preset: Preset) -> None:
        if preset.id in self.presets:
            raise ValueError(f"Duplicate preset id: {preset.id}")
        self.presets[preset.id] = preset

    def register_term(self, term: GlossaryTerm) -> None:
        self.glossary.append(term)

    def get(self, preset_id: str) -> Optional[Preset]:
        preset = self.presets.get(preset_id)
        logger.debug("get(%r) -> %s", preset_id, "found" if preset else "not found")
        return preset

    def list_all(self) -> List[Preset]:
        return list(self.presets.values())

    def list_terms(self) -> List[GlossaryTerm]:
        return list(self.glossary)


# Global registry instance
_global_registry: Optional[PresetRegistry] = None


def get_preset_registry() -> PresetRegistry:
    """Get or create the global preset registry"""
    global _global_registry
    if _global_registry is None:
        _global_registry = PresetRegistry()
        from payflow.presets.catalog import register_all

        register_all(_global_registry)
        logger.debug(
            "Preset registry loaded: %d presets, %d glossary terms",
            len(_global_registry.presets),
            len(_global_registry.glossary),
        )
    return _global_registry
