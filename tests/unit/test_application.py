# encoding: utf-8
"""test_application.py

Tests for the ripcodec command line (decode, encode, env and version)
"""

import io
import json

import pytest

from ripcodec.application.decode import normalise
from ripcodec.application.encode import documents
from ripcodec.application.main import main
from ripcodec.environment import Environment

V2_HEX = '0202000000020102C0000264FFFFFF00C000026F04030201'


class TestDecode:
    def test_decode(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['decode', V2_HEX]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document['command'] == 'response'
        assert document['version'] == 2
        assert document['entries'][0]['route-tag'] == 258
        assert document['entries'][0]['metric'] == 67305985

    def test_decode_spaced_and_prefixed(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['decode', '0x02 01 00 00']) == 0
        assert json.loads(capsys.readouterr().out) == {'command': 'response', 'version': 1, 'entries': []}

    def test_decode_invalid_payload(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['decode', '03020000']) == 1
        assert capsys.readouterr().out == 'invalid payload: invalid command 3 (at byte 0)\n'

    def test_decode_invalid_hex(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['decode', 'not hex']) == 1
        assert capsys.readouterr().out.startswith('invalid hexadecimal: ')

    def test_decode_stdin(self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr('sys.stdin', io.StringIO(f'{V2_HEX}\n\n02010000\n0201\n'))
        assert main(['decode']) == 1
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert json.loads(lines[0])['version'] == 2
        assert json.loads(lines[1])['version'] == 1
        assert lines[2].startswith('invalid payload: ')

    def test_decode_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['decode', '--debug', '02010000']) == 0
        assert Environment().log.all is True
        assert Environment().log.level == 'DEBUG'
        captured = capsys.readouterr()
        assert json.loads(captured.out)['version'] == 1

    def test_normalise(self) -> None:
        assert normalise(' 0x02:02:00:00 ') == '02020000'
        assert normalise('0X0202') == '0202'


class TestEncode:
    def test_encode(self, capsys: pytest.CaptureFixture[str]) -> None:
        document = {
            'command': 'response',
            'version': 2,
            'entries': [
                {
                    'route-tag': 258,
                    'ip-address': '192.0.2.100',
                    'subnet-mask': '255.255.255.0',
                    'next-hop': '192.0.2.111',
                    'metric': 67305985,
                }
            ],
        }
        assert main(['encode', json.dumps(document)]) == 0
        assert capsys.readouterr().out == V2_HEX + '\n'

    def test_encode_spaced(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['encode', '-s', '{"command": "request", "version": 1}']) == 0
        assert capsys.readouterr().out == '01 01 00 00\n'

    def test_encode_list(self, capsys: pytest.CaptureFixture[str]) -> None:
        packets = '[{"command": "request", "version": 1}, {"command": "response", "version": 2}]'
        assert main(['encode', packets]) == 0
        assert capsys.readouterr().out == '01010000\n02020000\n'

    def test_encode_invalid_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['encode', '{"command": ']) == 1
        assert capsys.readouterr().out.startswith('invalid JSON: ')

    def test_encode_invalid_packet(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['encode', '{"command": "request", "version": 3}']) == 1
        assert capsys.readouterr().out == 'invalid packet: unknown RIP version 3\n'

    def test_decode_then_encode(self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
        assert main(['decode', V2_HEX]) == 0
        decoded = capsys.readouterr().out
        monkeypatch.setattr('sys.stdin', io.StringIO(decoded))
        assert main(['encode']) == 0
        assert capsys.readouterr().out == V2_HEX + '\n'

    def test_documents(self) -> None:
        assert documents('{"a": 1}') == [{'a': 1}]
        assert documents('[{"a": 1}, {"b": 2}]') == [{'a': 1}, {'b': 2}]
        assert documents('{"a": 1}\n{"b": 2}\n') == [{'a': 1}, {'b': 2}]
        with pytest.raises(ValueError):
            documents('{"a": ')


class TestOtherCommands:
    def test_env(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['env']) == 0
        output = capsys.readouterr().out
        assert '[ripcodec.log]' in output
        assert '[ripcodec.debug]' in output

    def test_env_variables(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['env', '-e']) == 0
        assert 'ripcodec.log.level=INFO' in capsys.readouterr().out.splitlines()

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['version']) == 0
        output = capsys.readouterr().out
        assert output.startswith('ripcodec : ')
        assert 'Python   : ' in output

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 1
        assert 'Environment values are:' in capsys.readouterr().out


class _Terminal(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestUsage:
    @pytest.mark.parametrize('command', ['decode', 'encode'])
    def test_usage_on_terminal(
        self, command: str, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr('sys.stdin', _Terminal())
        assert main([command]) == 1
        assert capsys.readouterr().out.startswith(f'usage: ripcodec {command}')

    def test_traceback_option(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['decode', '-t', '0201']) == 1
        assert Environment().debug.traceback is True
        captured = capsys.readouterr()
        assert captured.out.startswith('invalid payload: ')
        assert 'Traceback' in captured.err
