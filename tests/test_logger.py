"""Tests for contrastlab.shared.logger: level routing and styling."""

import pytest

from contrastlab.core import config as c
from contrastlab.shared.logger import ContrastlabArgumentParser, fail, log


class TestLog:
    def test_styles_cover_exactly_the_log_levels(self):
        assert set(c.MSG_BOLD_COLORS) == {'error', 'warning', 'info', 'success'}
        assert set(c.MSG_COLORS) == set(c.MSG_BOLD_COLORS)

    def test_info_goes_to_stdout(self, capsys):
        log('info', 'hello')
        out, err = capsys.readouterr()
        assert 'hello' in out
        assert err == ''

    def test_error_goes_to_stderr_styled(self, capsys):
        log('error', 'boom')
        err = capsys.readouterr().err
        assert f"{c.MSG_BOLD_COLORS['error']}[error]{c.RESET}" in err
        assert 'boom' in err


class TestFail:
    def test_exits_with_2_and_hint(self, capsys):
        with pytest.raises(SystemExit) as exc:
            fail('bad input', hint='try again')
        assert exc.value.code == 2
        out, err = capsys.readouterr()
        assert 'bad input' in err
        assert 'try again' in out

    def test_parser_error_exits_with_2(self, capsys):
        parser = ContrastlabArgumentParser(prog='contrastlab')
        with pytest.raises(SystemExit) as exc:
            parser.error('unrecognized arguments: --nope')
        assert exc.value.code == 2
        assert "use 'contrastlab --help'" in capsys.readouterr().out
