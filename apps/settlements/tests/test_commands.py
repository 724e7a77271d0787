import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


@pytest.fixture
def balances_file(tmp_path, balances_payload):
    path = tmp_path / 'balances.json'
    path.write_text(json.dumps(balances_payload['members']))
    return path


def run_command(*args):
    out = StringIO()
    call_command('settle_balances', *args, stdout=out)
    return out.getvalue()


class TestSettleBalancesCommand:
    """Tests for the settle_balances management command."""

    def test_prints_transfers(self, balances_file):
        output = run_command(str(balances_file))

        assert 'Carol -> Alice: 20.00' in output
        assert 'Bob -> Alice: 10.00' in output
        assert '2 transfer(s), 30.00 in total' in output

    def test_accepts_members_object(self, tmp_path, balances_payload):
        path = tmp_path / 'group.json'
        path.write_text(json.dumps(balances_payload))

        assert 'Carol -> Alice: 20.00' in run_command(str(path))

    def test_json_output(self, balances_file):
        data = json.loads(run_command(str(balances_file), '--json'))

        assert data['transfer_count'] == 2
        assert data['transfers'][0]['from'] == 'c'
        assert data['total_amount'] == '30.00'

    def test_settled_group(self, tmp_path):
        path = tmp_path / 'settled.json'
        path.write_text(json.dumps([{'id': 'a', 'name': 'Alice', 'balance': 0}]))

        assert 'All settled up!' in run_command(str(path))

    def test_float_balances_keep_precision(self, tmp_path):
        path = tmp_path / 'floats.json'
        path.write_text('[{"id": "a", "name": "Alice", "balance": 0.3},'
                        ' {"id": "b", "name": "Bob", "balance": -0.3}]')

        assert 'Bob -> Alice: 0.30' in run_command(str(path))

    def test_unbalanced_rejected(self, tmp_path):
        path = tmp_path / 'unbalanced.json'
        path.write_text(json.dumps([
            {'id': 'a', 'name': 'Alice', 'balance': '50'},
            {'id': 'b', 'name': 'Bob', 'balance': '-20'},
        ]))

        with pytest.raises(CommandError, match='sum to zero'):
            run_command(str(path))

    def test_allow_unbalanced(self, tmp_path):
        path = tmp_path / 'unbalanced.json'
        path.write_text(json.dumps([
            {'id': 'a', 'name': 'Alice', 'balance': '50'},
            {'id': 'b', 'name': 'Bob', 'balance': '-20'},
        ]))

        assert 'Bob -> Alice: 20.00' in run_command(str(path), '--allow-unbalanced')

    def test_require_balanced_setting_applies(self, tmp_path, settings):
        settings.SETTLEMENT_REQUIRE_BALANCED = False
        path = tmp_path / 'unbalanced.json'
        path.write_text(json.dumps([
            {'id': 'a', 'name': 'Alice', 'balance': '50'},
            {'id': 'b', 'name': 'Bob', 'balance': '-20'},
        ]))

        assert 'Bob -> Alice: 20.00' in run_command(str(path))

    def test_invalid_balances(self, tmp_path):
        path = tmp_path / 'invalid.json'
        path.write_text(json.dumps([{'id': 'a', 'balance': 'lots'}]))

        with pytest.raises(CommandError, match='Invalid balances'):
            run_command(str(path))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'broken.json'
        path.write_text('{not json')

        with pytest.raises(CommandError, match='Invalid JSON'):
            run_command(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(CommandError, match='Cannot read'):
            run_command(str(tmp_path / 'missing.json'))
