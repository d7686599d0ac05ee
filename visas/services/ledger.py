import copy

from .. import defaults


class EntryList:
    """
    Ordered list of free-form dict entries (Step 2 rows).
    Values are stored as typed; cleaning happens at assembly time.
    """
    default_entry = {}

    def __init__(self, entries=None):
        if entries is None:
            entries = [self.default_entry]
        self.entries = copy.deepcopy(list(entries))

    def add(self):
        self.entries.append(copy.deepcopy(self.default_entry))
        return len(self.entries) - 1

    def remove(self, index):
        if not 0 <= index < len(self.entries):
            return False
        del self.entries[index]
        return True

    def update(self, index, field, value):
        if not 0 <= index < len(self.entries):
            return False
        if field not in self.default_entry:
            return False
        self.entries[index][field] = value
        return True

    def to_list(self):
        return copy.deepcopy(self.entries)


class ProcessingTierList(EntryList):
    default_entry = defaults.DEFAULT_PROCESSING_TIER


class CostLedger(EntryList):
    default_entry = defaults.DEFAULT_ADDITIONAL_COST
