import logging

from django.db.models import Max

from ..models import VisaConfiguration

logger = logging.getLogger(__name__)


# =========================================================
# 1. RESUMABLE CODE STORE (key/value, survives reloads)
# =========================================================

class ResumableCodeStore:
    """
    get/set over any mapping. In the views the mapping is request.session,
    so the in-progress code follows the browser across reloads.
    Writes are last-write-wins.
    """

    def __init__(self, backend):
        self.backend = backend

    def get(self, key):
        value = self.backend.get(key)
        return None if value is None else str(value)

    def set(self, key, value):
        self.backend[key] = '' if value is None else str(value)

    def remove(self, key):
        self.backend.pop(key, None)


# =========================================================
# 2. SAVED CONFIGURATIONS
# =========================================================

def next_version_for(type_id):
    """1 for a new visa type, otherwise one above the latest saved version."""
    latest = VisaConfiguration.objects.filter(
        type_id=type_id).aggregate(latest=Max('version'))['latest']
    return (latest or 0) + 1


def save_configuration(document, ai_scans=None, review_notes='', user=None):
    """
    Stores an assembled document as a new VisaConfiguration row.
    The document is kept as-is; the columns only mirror its identity fields.
    """
    config = VisaConfiguration.objects.create(
        name=document['name'],
        type_id=document['typeId'],
        code=document['code'],
        description=document['description'],
        category=document['category'],
        version=document['version'],
        document=document,
        ai_scans=list(ai_scans or []),
        review_notes=(review_notes or '').strip(),
        created_by=user if user is not None and user.is_authenticated else None,
    )
    logger.info(f"Visa configuration {config.type_id} v{config.version} saved (id={config.id})")
    return config


def serialize_configuration(config, with_document=False):
    data = {
        'id': config.id,
        'name': config.name,
        'type_id': config.type_id,
        'code': config.code,
        'category': config.category,
        'version': config.version,
        'is_active': config.is_active,
        'created_by': config.created_by.get_username() if config.created_by else "System",
        'created_at': config.created_at.strftime('%Y-%m-%d %H:%M'),
    }
    if with_document:
        data['document'] = config.document
        data['ai_scans'] = config.ai_scans
        data['review_notes'] = config.review_notes
    return data
