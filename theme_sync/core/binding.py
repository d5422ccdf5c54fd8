"""
Owns the live style registrations attached to one rendering surface.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from ..utils.logging import get_logger
from .exceptions import SurfaceUnavailableError
from .interfaces import StyleSurface
from .models import PriorityTier


class DisplayBinding:
    """
    Keeps at most one style sheet per priority tier on a surface.

    Qt surfaces hold a single style sheet, so the binding composes its tiers
    (lowest first, so higher tiers win on equal selectors) into one text and
    pushes that. Whatever the surface carried before the binding existed is
    kept underneath every tier.
    """

    def __init__(self, surface: Optional[StyleSurface]):
        if surface is None:
            raise SurfaceUnavailableError(
                "Cannot bind styles: no rendering surface available"
            )
        self.surface = surface
        self.logger = get_logger(__name__)
        self._base = surface.style_sheet() or ""
        self._slots: Dict[PriorityTier, str] = {}
        self._applied: Optional[str] = None

    def replace(self, content: Union[str, bytes],
                priority: PriorityTier = PriorityTier.APPLICATION):
        """Install `content` at `priority`, superseding whatever was there."""
        if isinstance(content, bytes):
            content = content.decode("utf-8")
        priority = PriorityTier(priority)

        previous = self._slots.get(priority)
        self._slots[priority] = content
        if previous is None:
            self.logger.debug(f"Created style slot at {priority.name}")
        elif previous == content:
            self.logger.debug(f"Style slot at {priority.name} unchanged")

        self._push()

    def clear(self, priority: PriorityTier = PriorityTier.APPLICATION):
        """Drop the registration at `priority`, if any."""
        tier = PriorityTier(priority)
        if self._slots.pop(tier, None) is not None:
            self.logger.debug(f"Removed style slot at {tier.name}")
            self._push()

    def content(self, priority: PriorityTier = PriorityTier.APPLICATION) -> Optional[str]:
        return self._slots.get(PriorityTier(priority))

    def registrations(self) -> Mapping[PriorityTier, str]:
        return MappingProxyType(self._slots)

    def registration_count(self, priority: PriorityTier = PriorityTier.APPLICATION) -> int:
        return 1 if PriorityTier(priority) in self._slots else 0

    def composed_style_sheet(self) -> str:
        """The full text this binding wants on the surface."""
        parts = [self._base] if self._base else []
        parts.extend(self._slots[tier] for tier in sorted(self._slots))
        return "\n".join(parts)

    def _push(self):
        text = self.composed_style_sheet()
        if text == self._applied:
            # Re-setting an identical sheet would re-polish every widget.
            return
        self.surface.set_style_sheet(text)
        self._applied = text
