"""Queue type enumeration for ranked matches."""
from enum import Enum
from typing import Optional


_QUEUE_DISPLAY_NAMES = {
    420: "Ranked Solo/Duo",
    440: "Ranked Flex",
    400: "Normal Draft",
    430: "Normal Blind",
    450: "ARAM",
    700: "Clash",
}


class QueueType(Enum):
    """Ranked queue types in League of Legends.

    The enum value is the string used by league endpoints and stored on
    snapshots; ``queue_id`` is the numeric id found on match records.
    Declaration order is the preference order for the displayed rank.
    """

    RANKED_SOLO_5x5 = "RANKED_SOLO_5x5"  # Solo/Duo Queue
    RANKED_FLEX_SR = "RANKED_FLEX_SR"    # Flex 5v5 Queue

    @property
    def queue_id(self) -> int:
        """Get numeric queue id as reported on match records."""
        return 420 if self is QueueType.RANKED_SOLO_5x5 else 440

    @property
    def queue_name(self) -> str:
        """Get human-readable queue name."""
        return _QUEUE_DISPLAY_NAMES[self.queue_id]

    @classmethod
    def ranked_queues(cls) -> list['QueueType']:
        """Get all ranked queue types, most preferred first."""
        return [cls.RANKED_SOLO_5x5, cls.RANKED_FLEX_SR]

    @classmethod
    def ranked_queue_ids(cls) -> frozenset[int]:
        return frozenset(q.queue_id for q in cls.ranked_queues())

    @classmethod
    def from_queue_id(cls, queue_id: int) -> Optional['QueueType']:
        """Map a match queue id to its ranked queue, or None for unranked modes."""
        for queue in cls.ranked_queues():
            if queue.queue_id == queue_id:
                return queue
        return None

    @staticmethod
    def display_name_for(queue_id: int) -> str:
        """Display label for any match queue id."""
        return _QUEUE_DISPLAY_NAMES.get(queue_id, "Custom")
