"""
Shared pytest fixtures for the visa builder tests.
Builder objects are in-memory; only the persistence/view tests touch the DB.
"""

import datetime

import pytest

from visas.services.builder import VisaBuilder
from visas.services.persistence import ResumableCodeStore
from visas.services.wizard import BuilderWizard


FIXED_IDS = [
    'ELIGIBILITY_CHECK', 'SMS_VERIFICATION', 'PASSPORT_UPLOAD',
    'RESIDENCY_INFO', 'KYC_LIVENESS', 'PHOTO_UPLOAD',
]
FINAL_IDS = ['APPLICATION_REVIEW', 'PAYMENT', 'SUBMISSION']


@pytest.fixture
def fixed_ids():
    return list(FIXED_IDS)


@pytest.fixture
def final_ids():
    return list(FINAL_IDS)


@pytest.fixture
def session_backend():
    """Plain dict standing in for request.session."""
    return {}


@pytest.fixture
def code_store(session_backend):
    return ResumableCodeStore(session_backend)


@pytest.fixture
def builder(code_store):
    return VisaBuilder(code_store=code_store)


@pytest.fixture
def filled_builder(builder):
    """Builder whose Step 1 identity fields pass the guard."""
    builder.update_info('name', ' Business Visitor Visa ')
    builder.update_info('type_id', 'Business   Visitor')
    builder.update_info('code', 'bv1')
    builder.update_info('description', 'For meetings and conferences. ')
    return builder


@pytest.fixture
def wizard(filled_builder):
    return BuilderWizard(filled_builder)


@pytest.fixture
def fixed_now():
    return datetime.datetime(2025, 4, 12, 10, 30, tzinfo=datetime.timezone.utc)


@pytest.fixture
def sample_stages():
    """Small canonical list with one untagged (all-category) stage."""
    return [
        {'id': 'A', 'enabled': True, 'order': 0, 'categories': ['Business']},
        {'id': 'B', 'enabled': True, 'order': 1, 'categories': ['Student']},
        {'id': 'C', 'enabled': False, 'order': 2, 'categories': ['Business', 'Student']},
        {'id': 'D', 'enabled': True, 'order': 3, 'categories': []},
        {'id': 'E', 'enabled': True, 'order': 4, 'categories': ['Business']},
    ]
