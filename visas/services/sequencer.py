import logging

from .filters import visible_stages

logger = logging.getLogger(__name__)


def _index_of(items, item_id):
    for index, item in enumerate(items):
        if item.get('id') == item_id:
            return index
    return -1


def renumber(items):
    """Writes each item's position into its 'order' key."""
    for position, item in enumerate(items):
        item['order'] = position
    return items


def reorder(items, from_id, to_id):
    """
    Moves 'from_id' to the position currently held by 'to_id'.

    Works on the canonical (unfiltered) list. When the UI only shows a
    category projection, the dragged stage lands at the canonical index of
    the drop target, so hidden stages sitting between the two shift by one.

    Unknown ids (or from_id == to_id) return the list unchanged.
    """
    old_index = _index_of(items, from_id)
    new_index = _index_of(items, to_id)

    if old_index == -1 or new_index == -1 or old_index == new_index:
        return items

    moved = [dict(item) for item in items]
    moved.insert(new_index, moved.pop(old_index))
    logger.debug(f"Stage {from_id} moved from {old_index} to {new_index}")
    return renumber(moved)


def move(items, item_id, offset, category):
    """
    Moves one stage up (offset=-1) or down (offset=+1) among the stages
    visible for 'category'. Off the edges of the projection it is a no-op.
    """
    visible_ids = [stage['id'] for stage in visible_stages(items, category)]
    if item_id not in visible_ids:
        return items

    target = visible_ids.index(item_id) + offset
    if target < 0 or target >= len(visible_ids):
        return items

    return reorder(items, item_id, visible_ids[target])
