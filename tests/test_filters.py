"""
Unit tests for the category projection of stages and documents.
"""

import copy

import pytest

from visas.defaults import CONDITIONAL_STAGES, VISA_CATEGORIES
from visas.services.filters import (
    clean_categories,
    effective_categories,
    is_visible,
    visible_documents,
    visible_stages,
)


def _ids(items):
    return [item['id'] for item in items]


def test_visible_stages_keeps_canonical_order(sample_stages):
    assert _ids(visible_stages(sample_stages, 'Business')) == ['A', 'C', 'D', 'E']
    assert _ids(visible_stages(sample_stages, 'Student')) == ['B', 'C', 'D']


def test_untagged_stage_is_visible_for_unknown_category(sample_stages):
    assert _ids(visible_stages(sample_stages, 'Medical')) == ['D']


def test_visible_stages_ignores_enabled_flag(sample_stages):
    # Disabled stages are still shown (greyed out) in the builder
    assert 'C' in _ids(visible_stages(sample_stages, 'Business'))


@pytest.mark.parametrize('category', VISA_CATEGORIES)
def test_filtering_is_idempotent(category):
    stages = [dict(s) for s in CONDITIONAL_STAGES]
    once = visible_stages(stages, category)
    assert visible_stages(once, category) == once


def test_filtering_does_not_touch_input(sample_stages):
    before = copy.deepcopy(sample_stages)
    visible_stages(sample_stages, 'Student')
    assert sample_stages == before


def test_all_marker_and_missing_tags_mean_every_category():
    assert is_visible({'id': 'x', 'categories': 'all'}, 'Tourist')
    assert is_visible({'id': 'x'}, 'Tourist')
    assert is_visible({'id': 'x', 'categories': None}, 'Tourist')
    assert effective_categories({'id': 'x', 'categories': 'all'}) == []


def test_single_string_tag():
    assert effective_categories({'id': 'x', 'categories': 'Work'}) == ['Work']
    assert not is_visible({'id': 'x', 'categories': 'Work'}, 'Tourist')


def test_visible_documents_uses_same_rule():
    docs = [
        {'id': 'job_offer', 'categories': ['Work']},
        {'id': 'any', 'categories': []},
        {'id': 'enrollment_proof', 'categories': ['Student']},
    ]
    assert _ids(visible_documents(docs, 'Work')) == ['job_offer', 'any']


@pytest.mark.parametrize('value, expected', [
    (None, []),
    ('all', []),
    ('Work, Business,', ['Work', 'Business']),
    (['Work', ' ', 'Student '], ['Work', 'Student']),
    (('Medical',), ['Medical']),
])
def test_clean_categories(value, expected):
    assert clean_categories(value) == expected


@pytest.mark.parametrize('value', [5, True, {'Work': 1}])
def test_clean_categories_rejects_other_types(value):
    with pytest.raises(ValueError):
        clean_categories(value)
