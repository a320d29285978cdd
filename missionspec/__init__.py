from .mission_spec import MissionSpec
from .mission_exception import MissionException
from .mission_exception import MissionErrorCode
from .mission_exception import SchemaViolation, IndexOutOfRange, NotConfigured
from .mission_builder import CommandCategory, AllowList, DenyList
import logging
import logging.handlers


def setupLogger():
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # create console handler and set level to error
    ch = logging.StreamHandler()
    ch.setLevel(logging.ERROR)
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    f = logging.handlers.RotatingFileHandler('app.log')
    f.setFormatter(formatter)
    f.setLevel(logging.DEBUG)
    logger.addHandler(f)
