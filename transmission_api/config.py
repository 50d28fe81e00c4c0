import os
import dotenv


dotenv.load_dotenv()


# Defaults
DEBUG = False
VERBOSE = False
LOG_PATH = "transmission_api.log"
LOG_LEVEL = "DEBUG" if DEBUG else "INFO"
LOG_ROTATION = "1 week"
LOG_RETENTION = "1 month"

# Transmission defaults
TRANSMISSION_ADDRESS = "localhost:9091"
TRANSMISSION_USERNAME = ""
TRANSMISSION_PASSWORD = ""
TRANSMISSION_TIMEOUT = 10

# Fields left out of torrent-get unless asked for explicitly
TRANSMISSION_OMIT_FIELDS = ",".join([
    "peers",
    "peersConnected",
    "peersFrom",
    "peersGettingFromUs",
    "peersSendingToUs",
    "priorities",
    "queuePosition",
    "trackers",
    "trackerStats",
    "wanted",
    "webseeds",
])


def _as_bool(value):
    return str(value).lower() in ("1", "true", "yes", "on")


def _as_list(value):
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    DEBUG = _as_bool(os.getenv("DEBUG", DEBUG))
    VERBOSE = _as_bool(os.getenv("VERBOSE", VERBOSE))

    LOG_PATH = os.getenv("LOG_PATH", LOG_PATH)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else LOG_LEVEL)
    LOG_ROTATION = os.getenv("LOG_ROTATION", LOG_ROTATION)
    LOG_RETENTION = os.getenv("LOG_RETENTION", LOG_RETENTION)

    # Transmission Configuration
    TRANSMISSION_ADDRESS = os.getenv("TRANSMISSION_ADDRESS", TRANSMISSION_ADDRESS)
    TRANSMISSION_USERNAME = os.getenv("TRANSMISSION_USERNAME", TRANSMISSION_USERNAME)
    TRANSMISSION_PASSWORD = os.getenv("TRANSMISSION_PASSWORD", TRANSMISSION_PASSWORD)
    TRANSMISSION_TIMEOUT = float(os.getenv("TRANSMISSION_TIMEOUT", TRANSMISSION_TIMEOUT))
    OMITTED_FIELDS = _as_list(os.getenv("TRANSMISSION_OMIT_FIELDS", TRANSMISSION_OMIT_FIELDS))
