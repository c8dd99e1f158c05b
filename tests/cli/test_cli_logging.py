import logging

import pytest

from trackman_trajectory.cli._logging import configure_logging


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    def test_default_level(self) -> None:
        configure_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_verbose(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("markdown_it").level == logging.NOTSET

    def test_quiets_third_party(self) -> None:
        configure_logging()
        assert logging.getLogger("markdown_it").level == logging.WARNING

    def test_idempotent(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1
