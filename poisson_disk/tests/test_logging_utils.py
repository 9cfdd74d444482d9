import logging

from poisson_disk.core.logging_utils import PACKAGE_LOGGER, configure_logging, get_logger, resolve_level


def test_family_root_is_isolated_with_one_handler():
    get_logger('poisson_disk.a')
    get_logger('poisson_disk.b')
    root = logging.getLogger(PACKAGE_LOGGER)
    assert root.propagate is False
    assert len([h for h in root.handlers if not isinstance(h, logging.NullHandler)]) == 1


def test_children_inherit_unless_level_given():
    assert get_logger('poisson_disk.inherit').level == logging.NOTSET
    assert get_logger('poisson_disk.loud', 'debug').level == logging.DEBUG


def test_foreign_names_are_nested_in_family():
    assert get_logger('plotting').name == 'poisson_disk.plotting'
    assert get_logger('poisson_disk').name == 'poisson_disk'


def test_resolve_level():
    assert resolve_level('warning') == logging.WARNING
    assert resolve_level(15) == 15
    assert resolve_level(None) == logging.INFO
    assert resolve_level('chatty', default=logging.ERROR) == logging.ERROR


def test_configure_logging_level_and_output(capsys):
    configure_logging('WARNING')
    log = get_logger('poisson_disk.test')
    log.info('hidden')
    log.warning('shown %d', 7)
    out = capsys.readouterr().out
    assert 'hidden' not in out
    assert 'WARNING poisson_disk.test: shown 7' in out


def test_debug_mutes_matplotlib():
    logging.getLogger('matplotlib').setLevel(logging.NOTSET)
    configure_logging('DEBUG')
    assert logging.getLogger('matplotlib').level == logging.INFO
    configure_logging('INFO')
