from django.conf import settings

from . import defaults


BUILDER_DEFAULTS = {
    'CATEGORIES': defaults.VISA_CATEGORIES,
    'FALLBACK_CURRENCY': defaults.FALLBACK_CURRENCY,
    'RESUMABLE_CODE_KEY': defaults.RESUMABLE_CODE_KEY,
    'SESSION_STATE_KEY': defaults.SESSION_STATE_KEY,
}


def builder_setting(name):
    """
    Reads one key of the optional VISA_BUILDER settings dict.
    Falls back to the catalog defaults when the key is not configured.
    """
    overrides = getattr(settings, 'VISA_BUILDER', None) or {}
    if name in overrides:
        return overrides[name]
    return BUILDER_DEFAULTS[name]
