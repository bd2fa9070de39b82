import logging

import pytest

from minorexplorer.config import LayoutConfig
from minorexplorer.logging_config import setup_logging


class TestLayoutConfig:

    def test_round_trip(self):
        cfg = LayoutConfig(repulsion_strength=2.0, interval_ms=16)
        assert LayoutConfig.from_dict(cfg.to_dict()) == cfg

    def test_unknown_keys_are_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="minorexplorer.config"):
            cfg = LayoutConfig.from_dict({"gravity_strength": 0.0, "colour": "red"})
        assert cfg.gravity_strength == 0.0
        assert "colour" in caplog.text

    @pytest.mark.parametrize("options", [{"dt": 0.0}, {"interval_ms": -1}, {"branching": 0}])
    def test_invalid_values(self, options):
        with pytest.raises(ValueError):
            LayoutConfig(**options)


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("minorexplorer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestLogging:

    def test_setup_logging_is_idempotent(self, tmp_path):
        log_file = tmp_path / "explorer.log"
        setup_logging(level="DEBUG", log_file=str(log_file))
        logger = setup_logging(level=logging.INFO)
        assert logger.name == "minorexplorer"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging(level="LOUD")
