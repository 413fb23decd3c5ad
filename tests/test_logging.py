"""
Logging setup tests.
"""

import logging

import pytest

from blog.core.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_levels():
    names = ("blog", "uvicorn.access", "multipart")
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_package_logger_gets_one_handler():
    setup_logging("INFO")
    setup_logging("INFO")

    app_logger = logging.getLogger("blog")
    own = [h for h in app_logger.handlers if getattr(h, "_blog_handler", False)]
    assert len(own) == 1
    assert app_logger.level == logging.INFO
    assert logging.getLogger("blog.crud").getEffectiveLevel() == logging.INFO


def test_access_log_quiet_unless_debug():
    setup_logging("INFO")
    assert logging.getLogger("uvicorn.access").level == logging.WARNING

    setup_logging("debug")
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG
    assert logging.getLogger("blog").level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    assert setup_logging("chatty").level == logging.INFO
