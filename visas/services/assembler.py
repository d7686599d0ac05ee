import math
import re
from decimal import Decimal, InvalidOperation

from django.utils import timezone

from ..conf import builder_setting
from .filters import is_visible


# =========================================================
# 1. COERCION HELPERS (never raise)
# =========================================================

# Largest magnitude emitted as a JSON integer (exact in a float as well)
MAX_EXACT_INTEGER = 2 ** 53


def _parse_number(value):
    """
    Returns the value as int/float, or None when it cannot be read as a
    finite number. Blank strings count as unparseable.
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None

    if not number.is_finite():
        return None

    # Integral values are emitted as JSON integers
    if abs(number) < MAX_EXACT_INTEGER and number == number.to_integral_value():
        return int(number)

    result = float(number)
    if math.isinf(result):
        return None
    return result


def to_number(value, default=0):
    number = _parse_number(value)
    return default if number is None else number


def to_number_or_none(value):
    return _parse_number(value)


def to_metadata_number(value):
    """Blank reads as 0; text that is not a number gives None."""
    if _text(value) == '':
        return 0
    return _parse_number(value)


def _text(value):
    return '' if value is None else str(value).strip()


def normalize_type_id(value):
    return re.sub(r'\s+', '-', _text(value).lower())


# =========================================================
# 2. SECTION CLEANERS
# =========================================================

def build_application_flow(snapshot):
    category = snapshot['category']
    middle = [
        stage['id'] for stage in snapshot['conditional_stages']
        if stage.get('enabled') and is_visible(stage, category)
    ]
    return (
        [stage['id'] for stage in snapshot['fixed_stages']]
        + middle
        + [stage['id'] for stage in snapshot['final_stages']]
    )


def build_required_documents(snapshot):
    category = snapshot['category']
    return [
        doc['id'] for doc in snapshot['documents']
        if doc.get('enabled') and is_visible(doc, category)
    ]


def clean_processing_tiers(tiers):
    cleaned = []
    for tier in tiers:
        entry = {
            'type': _text(tier.get('type')),
            'timeframe': _text(tier.get('timeframe')),
            'timeUnit': _text(tier.get('timeUnit')),
            'minTime': to_number_or_none(tier.get('minTime')),
            'maxTime': to_number_or_none(tier.get('maxTime')),
        }
        if entry['type'] == '' and entry['timeframe'] == '':
            continue
        cleaned.append(entry)
    return cleaned


def clean_additional_costs(costs):
    cleaned = []
    for cost in costs:
        entry = {
            'description': _text(cost.get('description')),
            'amount': to_number(cost.get('amount')),
            'currency': _text(cost.get('currency')).upper(),
        }
        if entry['description'] == '' and entry['amount'] == 0:
            continue
        cleaned.append(entry)
    return cleaned


def clean_visa_cost(visa_cost):
    currency = _text(visa_cost.get('currency')).upper()
    return {
        'amount': to_number(visa_cost.get('amount')),
        'currency': currency or builder_setting('FALLBACK_CURRENCY'),
    }


# =========================================================
# 3. THE ASSEMBLER
# =========================================================

def assemble_configuration(snapshot, version=1, now=None):
    """
    Turns a builder snapshot (VisaBuilder.snapshot()) into the canonical
    VisaConfiguration document handed to persistence.

    Pure apart from the timestamps: 'now' defaults to the current time.
    'version' is supplied by the caller (1 for a new record).
    """
    if now is None:
        now = timezone.now()
    timestamp = now.isoformat()

    processing_info = snapshot.get('processing_info', {})
    metadata = snapshot.get('metadata', {})

    return {
        'name': _text(snapshot.get('name')),
        'typeId': normalize_type_id(snapshot.get('type_id')),
        'code': _text(snapshot.get('code')).upper(),
        'description': _text(snapshot.get('description')),
        'category': snapshot['category'],
        'eligibilityCriteria': [
            c for c in (_text(c) for c in snapshot.get('eligibility_criteria', [])) if c
        ],
        'applicationFlow': build_application_flow(snapshot),
        'requiredDocuments': build_required_documents(snapshot),
        'processingTier': clean_processing_tiers(snapshot.get('processing_tiers', [])),
        'visaCost': clean_visa_cost(snapshot.get('visa_cost', {})),
        'additionalCosts': clean_additional_costs(snapshot.get('additional_costs', [])),
        'processingInfo': {
            'generalTimeframe': _text(processing_info.get('generalTimeframe')),
            'additionalInfo': _text(processing_info.get('additionalInfo')),
        },
        'metadata': {
            'validityPeriod': to_metadata_number(metadata.get('validityPeriod')),
            'maxExtensions': to_metadata_number(metadata.get('maxExtensions')),
        },
        'version': int(version),
        'createdAt': timestamp,
        'updatedAt': timestamp,
    }
