import logging

"""
Create a global logger instance.
"""

logger = logging.getLogger("aave_aptos")
logger.propagate = False
logger.setLevel(logging.INFO)
logger.addHandler(logging.StreamHandler())
