import copy

from .. import defaults
from .filters import clean_categories, visible_stages
from .sequencer import move, renumber, reorder


def _make_stage(data, group, position):
    return {
        'id': data['id'],
        'name': data['name'],
        'group': group,
        'enabled': data.get('enabled', True) if group == 'conditional' else True,
        'order': position,
        'categories': clean_categories(data.get('categories')),
    }


class StageCatalog:
    """
    Fixed and final stages are frozen at definition time (always enabled,
    never reordered). Conditional stages keep one global order list plus a
    mutable 'enabled' flag each.
    """

    def __init__(self, conditional_stages=None):
        self.fixed_stages = tuple(
            _make_stage(s, 'fixed', i) for i, s in enumerate(defaults.FIXED_STAGES))
        self.final_stages = tuple(
            _make_stage(s, 'final', i) for i, s in enumerate(defaults.FINAL_STAGES))

        if conditional_stages is None:
            conditional_stages = [
                _make_stage(s, 'conditional', i)
                for i, s in enumerate(defaults.CONDITIONAL_STAGES)
            ]
        stages = copy.deepcopy(list(conditional_stages))
        # Restored state may carry "all" or comma text; keep lists only
        for stage in stages:
            stage['categories'] = clean_categories(stage.get('categories'))
        self.conditional_stages = renumber(stages)

    @property
    def fixed_ids(self):
        return [stage['id'] for stage in self.fixed_stages]

    @property
    def final_ids(self):
        return [stage['id'] for stage in self.final_stages]

    def get(self, stage_id):
        for stage in self.conditional_stages:
            if stage['id'] == stage_id:
                return stage
        return None

    def visible(self, category):
        return visible_stages(self.conditional_stages, category)

    def toggle(self, stage_id):
        stage = self.get(stage_id)
        if stage is None:
            return False
        stage['enabled'] = not stage['enabled']
        return True

    def reorder(self, from_id, to_id):
        before = [stage['id'] for stage in self.conditional_stages]
        self.conditional_stages = reorder(self.conditional_stages, from_id, to_id)
        return before != [stage['id'] for stage in self.conditional_stages]

    def move(self, stage_id, offset, category):
        before = [stage['id'] for stage in self.conditional_stages]
        self.conditional_stages = move(
            self.conditional_stages, stage_id, offset, category)
        return before != [stage['id'] for stage in self.conditional_stages]

    def reset_enabled(self):
        """Restores the catalog default 'enabled' flags; the order is kept."""
        default_flags = {
            s['id']: s.get('enabled', True) for s in defaults.CONDITIONAL_STAGES}
        for stage in self.conditional_stages:
            if stage['id'] in default_flags:
                stage['enabled'] = default_flags[stage['id']]

    def to_list(self):
        return copy.deepcopy(self.conditional_stages)
