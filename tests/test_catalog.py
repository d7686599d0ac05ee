"""
Unit tests for StageCatalog: fixed/final stages and the conditional list.
"""

from visas.services.catalog import StageCatalog


def _ids(items):
    return [item['id'] for item in items]


def test_fixed_and_final_stages(fixed_ids, final_ids):
    catalog = StageCatalog()
    assert catalog.fixed_ids == fixed_ids
    assert catalog.final_ids == final_ids
    assert all(stage['enabled'] for stage in catalog.fixed_stages)
    assert all(stage['group'] == 'final' for stage in catalog.final_stages)


def test_conditional_stages_carry_order_and_group():
    catalog = StageCatalog()
    assert [s['order'] for s in catalog.conditional_stages] == list(
        range(len(catalog.conditional_stages)))
    assert {s['group'] for s in catalog.conditional_stages} == {'conditional'}


def test_toggle_conditional_stage():
    catalog = StageCatalog()
    assert catalog.get('STUDENT_INFO')['enabled'] is False
    assert catalog.toggle('STUDENT_INFO') is True
    assert catalog.get('STUDENT_INFO')['enabled'] is True


def test_fixed_stage_cannot_be_toggled():
    catalog = StageCatalog()
    assert catalog.toggle('PASSPORT_UPLOAD') is False
    assert catalog.toggle('NOPE') is False


def test_fixed_stage_cannot_be_reordered():
    catalog = StageCatalog()
    before = _ids(catalog.conditional_stages)
    assert catalog.reorder('PASSPORT_UPLOAD', 'TRAVEL_DETAILS') is False
    assert _ids(catalog.conditional_stages) == before


def test_reset_enabled_keeps_order():
    catalog = StageCatalog()
    catalog.reorder('DYNAMIC_DOCUMENTS_UPLOAD', 'EXISTING_VISAS')
    catalog.toggle('TRAVEL_DETAILS')
    catalog.toggle('STUDENT_INFO')
    order = _ids(catalog.conditional_stages)

    catalog.reset_enabled()

    assert _ids(catalog.conditional_stages) == order
    assert catalog.get('TRAVEL_DETAILS')['enabled'] is True
    assert catalog.get('STUDENT_INFO')['enabled'] is False


def test_catalog_copies_given_stages(sample_stages):
    catalog = StageCatalog(sample_stages)
    catalog.toggle('A')
    assert sample_stages[0]['enabled'] is True


def test_restored_stages_carry_category_lists():
    catalog = StageCatalog([
        {'id': 'A', 'enabled': True, 'categories': 'all'},
        {'id': 'B', 'enabled': True, 'categories': 'Business,Work'},
        {'id': 'C', 'enabled': False},
    ])

    assert [s['categories'] for s in catalog.to_list()] == [
        [], ['Business', 'Work'], []]
    assert [s['order'] for s in catalog.to_list()] == [0, 1, 2]


def test_documents_stage_is_tagged_with_every_builtin_category():
    catalog = StageCatalog()
    stage = catalog.get('DYNAMIC_DOCUMENTS_UPLOAD')
    assert stage['categories'] == [
        'Business', 'Tourist', 'Student', 'Work', 'Medical', 'Religious']
    assert stage not in catalog.visible('Diplomatic')
