import copy
import logging

from .. import defaults
from ..conf import builder_setting
from .catalog import StageCatalog
from .documents import DocumentRequirementSet
from .ledger import CostLedger, ProcessingTierList

logger = logging.getLogger(__name__)

# Step 1 identity fields
INFO_FIELDS = ('name', 'type_id', 'description', 'code')

# Step 2/3 scalar fields -> (section, key) inside the working state
DETAIL_FIELDS = {
    'visa_cost_amount': ('visa_cost', 'amount'),
    'visa_cost_currency': ('visa_cost', 'currency'),
    'general_timeframe': ('processing_info', 'generalTimeframe'),
    'additional_info': ('processing_info', 'additionalInfo'),
    'validity_period': ('metadata', 'validityPeriod'),
    'max_extensions': ('metadata', 'maxExtensions'),
}


def _default_ai_scans():
    return copy.deepcopy(list(defaults.AI_SCANS))


class VisaBuilder:
    """
    The working configuration of one builder session.

    Created with defaults when the builder opens, mutated only through the
    methods below, discarded on reset. The in-progress visa code is written
    through to 'code_store' after every change so it survives reloads.
    """

    def __init__(self, code_store=None):
        self.code_store = code_store
        self.categories = list(builder_setting('CATEGORIES'))
        self.catalog = StageCatalog()
        self.documents = DocumentRequirementSet()
        self._init_fields()

        # Restore the in-progress code (only field that survives reloads)
        if self.code_store is not None:
            self.code = self.code_store.get(self._code_key()) or ''

    def _init_fields(self):
        self.name = ''
        self.type_id = ''
        self.description = ''
        self.code = ''
        self.category = self.categories[0] if self.categories else ''
        self.eligibility_criteria = ['']

        self.processing_tiers = ProcessingTierList()
        self.additional_costs = CostLedger()
        self.visa_cost = {
            'amount': '',
            'currency': builder_setting('FALLBACK_CURRENCY'),
        }
        self.processing_info = {'generalTimeframe': '', 'additionalInfo': ''}
        self.metadata = {'validityPeriod': '', 'maxExtensions': ''}

        self.ai_scans = _default_ai_scans()
        self.review_notes = ''

    @staticmethod
    def _code_key():
        return builder_setting('RESUMABLE_CODE_KEY')

    # ==========================================
    # 1. STEP 1 FIELDS
    # ==========================================

    def update_info(self, field, value):
        if field not in INFO_FIELDS:
            return False

        value = '' if value is None else str(value)
        setattr(self, field, value)

        # Write-through of the resumable field
        if field == 'code' and self.code_store is not None:
            self.code_store.set(self._code_key(), value)
        return True

    def set_category(self, category):
        if category not in self.categories:
            return False
        self.category = category
        return True

    def add_criterion(self):
        self.eligibility_criteria.append('')
        return len(self.eligibility_criteria) - 1

    def update_criterion(self, index, value):
        if not 0 <= index < len(self.eligibility_criteria):
            return False
        self.eligibility_criteria[index] = '' if value is None else str(value)
        return True

    def remove_criterion(self, index):
        if not 0 <= index < len(self.eligibility_criteria):
            return False
        del self.eligibility_criteria[index]
        return True

    # ==========================================
    # 2. STEP 2 / STEP 3 FIELDS
    # ==========================================

    def update_detail(self, field, value):
        if field == 'review_notes':
            self.review_notes = '' if value is None else str(value)
            return True

        if field not in DETAIL_FIELDS:
            return False

        section, key = DETAIL_FIELDS[field]
        getattr(self, section)[key] = value
        return True

    def toggle_ai_scan(self, scan_id):
        for scan in self.ai_scans:
            if scan['id'] == scan_id:
                scan['enabled'] = not scan['enabled']
                return True
        return False

    def enabled_ai_scans(self):
        return [scan['id'] for scan in self.ai_scans if scan['enabled']]

    def documents_stage_active(self):
        """True when the stage collecting the documents is in the flow."""
        stage = self.catalog.get(defaults.DOCUMENTS_STAGE_ID)
        if stage is None or not stage['enabled']:
            return False
        return stage in self.catalog.visible(self.category)

    # ==========================================
    # 3. RESET
    # ==========================================

    def reset(self):
        """
        Back to defaults: clears the identity/Step 2 fields and the stored
        code, restores the default stage flags but keeps their order.
        Document types are left as they are.
        """
        self._init_fields()
        self.catalog.reset_enabled()

        if self.code_store is not None:
            self.code_store.remove(self._code_key())

        logger.info("Visa builder reset to defaults")

    # ==========================================
    # 4. SNAPSHOT / SESSION STORAGE
    # ==========================================

    def snapshot(self):
        """Full copy of the state, as consumed by the assembler."""
        return {
            'name': self.name,
            'type_id': self.type_id,
            'description': self.description,
            'code': self.code,
            'category': self.category,
            'eligibility_criteria': list(self.eligibility_criteria),
            'fixed_stages': copy.deepcopy(list(self.catalog.fixed_stages)),
            'conditional_stages': self.catalog.to_list(),
            'final_stages': copy.deepcopy(list(self.catalog.final_stages)),
            'documents': self.documents.to_list(),
            'processing_tiers': self.processing_tiers.to_list(),
            'visa_cost': dict(self.visa_cost),
            'additional_costs': self.additional_costs.to_list(),
            'processing_info': dict(self.processing_info),
            'metadata': dict(self.metadata),
            'ai_scans': copy.deepcopy(self.ai_scans),
            'review_notes': self.review_notes,
        }

    def to_dict(self):
        data = self.snapshot()
        # Fixed/final stages come from the catalog definition
        del data['fixed_stages']
        del data['final_stages']
        return data

    @classmethod
    def from_dict(cls, data, code_store=None):
        builder = cls(code_store=code_store)

        for field in INFO_FIELDS:
            setattr(builder, field, data.get(field, getattr(builder, field)))

        if data.get('category') in builder.categories:
            builder.category = data['category']

        builder.eligibility_criteria = list(data.get('eligibility_criteria', ['']))

        if 'conditional_stages' in data:
            builder.catalog = StageCatalog(data['conditional_stages'])
        if 'documents' in data:
            builder.documents = DocumentRequirementSet(data['documents'])
        if 'processing_tiers' in data:
            builder.processing_tiers = ProcessingTierList(data['processing_tiers'])
        if 'additional_costs' in data:
            builder.additional_costs = CostLedger(data['additional_costs'])

        builder.visa_cost.update(data.get('visa_cost', {}))
        builder.processing_info.update(data.get('processing_info', {}))
        builder.metadata.update(data.get('metadata', {}))

        if 'ai_scans' in data:
            builder.ai_scans = copy.deepcopy(data['ai_scans'])
        builder.review_notes = data.get('review_notes', '')
        return builder
