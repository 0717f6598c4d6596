import logging
import sys

logger = logging.getLogger(__package__)
logger.addHandler(logging.StreamHandler(sys.stdout))
encoding = "utf-8"
default_model = None
