import logging
from fontTools.misc.loggingTools import configLogger

try:
	from outlineTools.version import version
except ImportError:
	# 'version.py' is missing; outlineTools was not correctly installed
	version = None

log = logging.getLogger(__name__)

__all__ = ["version", "log", "configLogger"]
