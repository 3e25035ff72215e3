import logging

# note, library code never configures handlers. an application can do
#
# import logging
# logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)
#
# to see the capacity breakdowns and lock events.

LOG_FORMAT = "%(levelname)s|%(asctime)s|%(message)s"

# global logger used by pagekv
logger = logging.getLogger("pagekv")
