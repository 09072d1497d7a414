import logging

import pytest

from media_studio.scheduler import ManualScheduler


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def messages(caplog):
    caplog.set_level(logging.INFO)

    def _messages():
        return [record.getMessage() for record in caplog.records]

    return _messages
