import logging
from radiipoly.paths import LOG_FILE

logging.basicConfig(
    level=logging.INFO,  # global level (e.g from scipy, joblib)
    format="%(asctime)s - [%(levelname)s] - %(name)s - %(message)s",
    datefmt="%m/%d/%Y %H:%M:%S",
    filename=LOG_FILE,
    filemode="w",
)

# everything from the package logger, including newton iterations:
logger = logging.getLogger("radiipoly")
logger.setLevel(logging.DEBUG)
logger.debug("logger initialized")
