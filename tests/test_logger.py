import logging

from fake_server import logger


def test_get_logger_name():
    assert logger.get_logger("fake_server.http.status").name == "fake_server.http.status"
    assert logger.get_logger().name == "fake_server.logger"


def test_configure_default():
    logger.configure()

    package_logger = logging.getLogger("fake_server")
    assert package_logger.level == logging.INFO
    assert any(isinstance(handler, logging.StreamHandler) for handler in package_logger.handlers)


def test_configure_custom():
    logger.configure(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "loggers": {"fake_server": {"level": "DEBUG", "handlers": []}},
        }
    )

    assert logging.getLogger("fake_server").level == logging.DEBUG
