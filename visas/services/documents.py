import copy
import logging
import random
import string

from .. import defaults
from .filters import clean_categories, visible_documents

logger = logging.getLogger(__name__)

# Scalar fields the edit modal may replace
EDITABLE_FIELDS = ('name', 'description', 'purpose', 'format')


def generate_document_id():
    suffix = ''.join(random.choices(
        string.ascii_lowercase + string.digits, k=8))
    return f"doc_{suffix}"


class DocumentRequirementSet:
    """
    CRUD over the document types collected by the "Additional Documents"
    stage. Operations on unknown ids or indexes do nothing and return False.
    """

    def __init__(self, documents=None):
        if documents is None:
            documents = defaults.DOCUMENT_TYPES
        self.documents = copy.deepcopy(list(documents))
        for doc in self.documents:
            doc['categories'] = clean_categories(doc.get('categories'))

    def get(self, doc_id):
        for doc in self.documents:
            if doc['id'] == doc_id:
                return doc
        return None

    def visible(self, category):
        return visible_documents(self.documents, category)

    # ==========================================
    # 1. CREATE / DELETE
    # ==========================================

    def add(self, active_category):
        """
        Appends a blank, disabled document tagged with the active category.
        Returns the new document.
        """
        existing = {doc['id'] for doc in self.documents}
        doc_id = generate_document_id()
        while doc_id in existing:
            doc_id = generate_document_id()

        new_doc = {
            'id': doc_id,
            'name': '',
            'enabled': False,
            'description': '',
            'purpose': '',
            'format': '',
            'examples': [],
            'categories': [active_category] if active_category else [],
        }
        self.documents.append(new_doc)
        logger.info(f"Document type {doc_id} added for category {active_category}")
        return new_doc

    def remove(self, doc_id, confirmed=False):
        """
        Destructive: the caller must pass confirmed=True, otherwise nothing
        is removed.
        """
        if not confirmed:
            return False

        doc = self.get(doc_id)
        if doc is None:
            return False

        self.documents.remove(doc)
        logger.info(f"Document type {doc_id} removed")
        return True

    # ==========================================
    # 2. FIELD EDITS
    # ==========================================

    def toggle(self, doc_id):
        doc = self.get(doc_id)
        if doc is None:
            return False
        doc['enabled'] = not doc['enabled']
        return True

    def update_field(self, doc_id, field, value):
        doc = self.get(doc_id)
        if doc is None:
            return False

        if field == 'categories':
            doc['categories'] = clean_categories(value)
            return True

        if field not in EDITABLE_FIELDS:
            return False

        doc[field] = '' if value is None else str(value)
        return True

    # ==========================================
    # 3. EXAMPLE LIST
    # ==========================================

    def add_example(self, doc_id):
        doc = self.get(doc_id)
        if doc is None:
            return False
        doc.setdefault('examples', []).append('')
        return True

    def update_example(self, doc_id, index, value):
        doc = self.get(doc_id)
        if doc is None:
            return False

        examples = doc.setdefault('examples', [])
        if not 0 <= index < len(examples):
            return False

        examples[index] = '' if value is None else str(value)
        return True

    def remove_example(self, doc_id, index):
        doc = self.get(doc_id)
        if doc is None:
            return False

        examples = doc.setdefault('examples', [])
        if not 0 <= index < len(examples):
            return False

        del examples[index]
        return True

    def to_list(self):
        return copy.deepcopy(self.documents)
