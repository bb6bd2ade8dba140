#!/usr/bin/env python3
"""
Tile deduplication
Removes repeated tiles so the image uses as little video memory as possible
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .logging_config import get_logger
from .models import Canonical, DuplicateOf, EncodedTile, TileSlot

logger = get_logger("tile_deduplicator")


@dataclass(frozen=True)
class DeduplicationResult:
    """Canonical tile table plus the classification of every tile position"""

    tiles: Tuple[EncodedTile, ...]
    slots: Tuple[TileSlot, ...]

    @property
    def tilemap(self) -> Tuple[int, ...]:
        return tuple(slot.index for slot in self.slots)

    @property
    def duplicate_count(self) -> int:
        return sum(1 for slot in self.slots if slot.is_duplicate)


def classify_tiles(tiles: Sequence[EncodedTile]) -> List[TileSlot]:
    """
    Classify every tile position as canonical or duplicate.

    The first position holding a given content is canonical. Its index in
    the compacted table is its position minus the number of duplicates seen
    before it, which is the same as the number of canonical tiles before it.
    Every later position with the same content points at that index.
    """
    first_seen: Dict[EncodedTile, int] = {}
    slots: List[TileSlot] = []

    for tile in tiles:
        canonical_index = first_seen.get(tile)
        if canonical_index is None:
            canonical_index = len(first_seen)
            first_seen[tile] = canonical_index
            slots.append(Canonical(canonical_index))
        else:
            slots.append(DuplicateOf(canonical_index))

    return slots


def classify_tiles_pairwise(tiles: Sequence[EncodedTile]) -> List[TileSlot]:
    """
    Same classification as classify_tiles, by comparing every tile against
    every later one. Quadratic, kept as the reference for the fast path.
    """
    slots: List[Optional[TileSlot]] = [None] * len(tiles)
    previous_duplicates = 0

    for position, tile in enumerate(tiles):
        if slots[position] is not None:
            previous_duplicates += 1
            continue

        canonical_index = position - previous_duplicates
        slots[position] = Canonical(canonical_index)

        for later in range(position + 1, len(tiles)):
            if slots[later] is None and tiles[later].rows == tile.rows:
                slots[later] = DuplicateOf(canonical_index)

    return slots


def deduplicate_tiles(tiles: Sequence[EncodedTile],
                      pairwise: bool = False) -> DeduplicationResult:
    """
    Remove bit-identical tiles.

    Args:
        tiles: Encoded tiles in row-major tile order
        pairwise: Use the quadratic reference scan instead of a hash lookup

    Returns:
        Canonical tiles in order of first occurrence and one slot per position
    """
    slots = classify_tiles_pairwise(tiles) if pairwise else classify_tiles(tiles)
    canonical = tuple(
        tile for tile, slot in zip(tiles, slots) if not slot.is_duplicate
    )

    logger.debug(
        f"Deduplicated {len(slots)} tiles into {len(canonical)} unique tiles"
    )
    return DeduplicationResult(canonical, tuple(slots))
