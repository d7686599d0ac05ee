"""
Unit tests for the Step 2 lists (processing tiers and additional costs).
"""

from visas.services.ledger import CostLedger, ProcessingTierList


def test_lists_start_with_one_blank_row():
    assert ProcessingTierList().entries == [{
        'type': 'STANDARD', 'timeframe': '', 'timeUnit': 'WEEKS',
        'minTime': 0, 'maxTime': 0,
    }]
    assert CostLedger().entries == [{'description': '', 'amount': 0, 'currency': 'GBP'}]


def test_add_update_remove():
    costs = CostLedger([])
    index = costs.add()
    assert index == 0

    assert costs.update(0, 'description', 'Courier fee') is True
    assert costs.update(0, 'amount', '12.50') is True
    assert costs.entries[0]['description'] == 'Courier fee'
    assert costs.entries[0]['amount'] == '12.50'

    assert costs.remove(0) is True
    assert costs.entries == []


def test_added_rows_do_not_share_state():
    tiers = ProcessingTierList([])
    tiers.add()
    tiers.add()
    tiers.update(0, 'type', 'PREMIUM')
    assert tiers.entries[1]['type'] == 'STANDARD'


def test_out_of_range_and_unknown_field_are_noops():
    tiers = ProcessingTierList()
    assert tiers.remove(4) is False
    assert tiers.update(-1, 'type', 'PRIORITY') is False
    assert tiers.update(0, 'colour', 'red') is False
    assert len(tiers.entries) == 1
