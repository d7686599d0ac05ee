"""
Wizard transitions: the Step 1 guard, the unguarded Step 2 -> Step 3 move,
refused transitions and the save hand-off.
"""

import pytest

from visas.services import wizard as wizard_module
from visas.services.wizard import (
    STEP_COSTS, STEP_FLOW, STEP_REVIEW, STEP_SAVED, BuilderWizard,
)


def test_step1_guard_rejects_blank_type_id(builder):
    builder.update_info('name', ' A')
    builder.update_info('type_id', ' ')
    builder.update_info('code', 'X1')
    wizard = BuilderWizard(builder)

    result = wizard.next_step()

    assert not result
    assert result.step == STEP_FLOW
    assert wizard.step == STEP_FLOW
    assert 'type_id' in result.errors
    assert 'code' not in result.errors


def test_step1_guard_reports_every_field(builder):
    result = BuilderWizard(builder).next_step()

    assert set(result.errors) == {'name', 'type_id', 'code'}
    assert result.errors['code'][0]['code'] == 'required'


def test_step1_guard_has_no_maximum_length(builder):
    builder.update_info('name', 'N' * 300)
    builder.update_info('type_id', 'tourist ' * 40)
    builder.update_info('code', 'TV1')

    result = BuilderWizard(builder).next_step()

    assert result
    assert result.step == STEP_COSTS


def test_step1_guard_counts_trimmed_length(builder):
    builder.update_info('name', '  ab  ')
    builder.update_info('type_id', ' x ')
    builder.update_info('code', 'XY')

    result = BuilderWizard(builder).next_step()

    assert list(result.errors) == ['type_id']
    assert result.errors['type_id'][0]['code'] == 'min_length'


def test_guard_does_not_touch_the_state(builder):
    builder.update_info('name', 'Tourist')
    BuilderWizard(builder).next_step()
    assert builder.name == 'Tourist'


def test_valid_info_moves_to_step2(wizard):
    result = wizard.next_step()
    assert result
    assert result.step == STEP_COSTS
    assert result.errors == {}


def test_step2_to_step3_has_no_guard(wizard):
    wizard.next_step()
    # Step 1 values cleared after passing the guard
    wizard.builder.update_info('name', '')
    wizard.builder.update_info('code', '')
    wizard.builder.update_detail('visa_cost_amount', 'not a number')

    assert wizard.next_step()
    assert wizard.step == STEP_REVIEW


def test_review_button_only_from_step2(wizard):
    result = wizard.review()
    assert not result
    assert result.errors['__all__'][0]['code'] == 'invalid_transition'

    wizard.next_step()
    assert wizard.review().step == STEP_REVIEW


def test_back_moves_keep_the_state(wizard):
    wizard.next_step()
    wizard.next_step()
    before = wizard.builder.snapshot()

    assert wizard.previous_step().step == STEP_COSTS
    assert wizard.previous_step().step == STEP_FLOW
    assert wizard.builder.snapshot() == before


def test_back_from_step1_is_refused(wizard):
    result = wizard.previous_step()
    assert not result
    assert wizard.step == STEP_FLOW


def test_save_refused_before_review(wizard):
    calls = []
    result = wizard.save(persist=calls.append)

    assert not result
    assert calls == []
    assert wizard.step == STEP_FLOW


def test_save_hands_document_to_persist(wizard, fixed_now):
    wizard.next_step()
    wizard.next_step()
    calls = []

    result = wizard.save(persist=calls.append, version=3, now=fixed_now)

    assert result
    assert wizard.step == STEP_SAVED
    assert calls == [result.document]
    assert result.document['typeId'] == 'business-visitor'
    assert result.document['code'] == 'BV1'
    assert result.document['version'] == 3


def test_failed_persist_still_ends_saved(wizard, monkeypatch):
    logged = []
    monkeypatch.setattr(wizard_module.logger, 'error', logged.append)
    wizard.next_step()
    wizard.next_step()

    def persist(document):
        raise RuntimeError("storage is down")

    result = wizard.save(persist=persist)

    assert result
    assert wizard.step == STEP_SAVED
    assert 'storage is down' in logged[0]


def test_nothing_moves_after_saved(wizard):
    wizard.next_step()
    wizard.next_step()
    wizard.save()

    assert not wizard.next_step()
    assert not wizard.previous_step()
    assert wizard.step == STEP_SAVED


@pytest.mark.parametrize('moves', [0, 1, 2, 3])
def test_reset_returns_to_step1(wizard, session_backend, moves):
    for _ in range(min(moves, 2)):
        wizard.next_step()
    if moves == 3:
        wizard.save()

    result = wizard.reset()

    assert result.step == STEP_FLOW
    assert wizard.builder.name == ''
    assert 'visaBuilder_visaCode' not in session_backend


def test_result_as_dict(wizard):
    data = wizard.next_step().as_dict()
    assert data['ok'] is True
    assert data['step'] == STEP_COSTS
    assert data['step_label'].startswith('Step 2')
    assert 'document' not in data
