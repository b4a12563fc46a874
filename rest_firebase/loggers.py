import structlog

REST_FIREBASE_LOGGER = "rest_firebase_logger"


def get_rest_firebase_logger() -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(REST_FIREBASE_LOGGER)
