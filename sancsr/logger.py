import logging
import os

logger = logging.getLogger('sancsr')

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
    logger.addHandler(_handler)
    logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())
