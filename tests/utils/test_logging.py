import re

from geodetics.utils.logging import LOGGER, warn_once


def test_warn_once(caplog):
    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1


def test_logger_name():
    assert LOGGER.name == 'geodetics'
