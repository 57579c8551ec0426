"""Named help entries that link to each other, shown as a chain of popups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

TOOLTIP_MOUSE_DIST = 400.0

_DEFAULTS = (
    ("ASSET_WOOD", "Used as a building material or fuel for the ASSET_FURNACE."),
    ("ASSET_FURNACE", "Producer used to smelt ASSET_IRON_ORE into ASSET_IRON_INGOT."),
    ("ASSET_IRON_ORE", "Natural resource that can be smelted in ASSET_FURNACE."),
    ("ASSET_IRON_INGOT", "Used as a building material. It is smelted from ASSET_IRON_ORE."),
    ("ASSET_SCREWS", "Used as a building material. It is crafted from ASSET_IRON_PLATES."),
    ("craft", "Crafting is the process of constructing tools, items, and blocks."),
    (
        "smelt",
        "Smelting is a process of applying heat to ore, to extract a base metal. "
        "It is a form of extractive metallurgy. It is used to extract many metals "
        "from their ores, including silver, iron, copper, and other base metals.",
    ),
)


@dataclass
class Tooltip:
    name: str
    content: str
    links: List[str] = field(default_factory=list)


@dataclass
class TooltipNode:
    """An open tooltip and the one opened from it, if any."""

    xpos: float = 0.0
    ypos: float = 0.0
    desc: Optional[Tooltip] = None
    next: Optional["TooltipNode"] = None


class TooltipRegistry:
    """Registered tooltips plus the chain of currently open ones."""

    def __init__(self) -> None:
        self._tooltips: List[Tooltip] = []
        self.main = TooltipNode()

    def __len__(self) -> int:
        return len(self._tooltips)

    def __iter__(self) -> Iterator[Tooltip]:
        return iter(self._tooltips)

    def register(self, name: str, content: str) -> Tooltip:
        tooltip = Tooltip(name, content)
        self._tooltips.append(tooltip)
        return tooltip

    def register_defaults(self) -> None:
        for name, content in _DEFAULTS:
            self.register(name, content)

    def build_links(self) -> None:
        """Link each tooltip to every other one whose name its content mentions."""
        for tooltip in self._tooltips:
            for other in self._tooltips:
                if other is tooltip:
                    continue
                if other.name in tooltip.content:
                    tooltip.links.append(other.name)

    def find(self, name: str) -> Optional[Tooltip]:
        return next((tp for tp in self._tooltips if tp.name == name), None)

    def find_contents(self, name: str) -> Optional[str]:
        tooltip = self.find(name)
        return None if tooltip is None else tooltip.content

    def search(self, text: str) -> List[Tooltip]:
        """Tooltips whose name contains ``text``; empty text matches all."""
        return [tp for tp in self._tooltips if text in tp.name]

    def show(self, name: str, xpos: float, ypos: float) -> Optional[TooltipNode]:
        """Open ``name`` as the root tooltip, closing any open chain."""
        if not self._tooltips:
            return None
        desc = self.find(name)
        self.clear()
        self.main = TooltipNode(xpos, ypos, desc)
        return self.main

    def open_link(
        self, node: TooltipNode, link: str, xpos: float, ypos: float
    ) -> TooltipNode:
        """Open ``link`` from ``node``, replacing whatever was opened from it."""
        node.next = TooltipNode(xpos, ypos, self.find(link))
        return node.next

    def clear(self) -> None:
        self.main = TooltipNode()

    def chain(self) -> List[TooltipNode]:
        """Open tooltips from the root down, up to the first without content."""
        nodes: List[TooltipNode] = []
        node: Optional[TooltipNode] = self.main
        while node is not None and node.desc is not None:
            nodes.append(node)
            node = node.next
        return nodes