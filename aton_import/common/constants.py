"""Application constants."""

STAGES = ("racon",)
EXIT_SUCCESS = 0
EXIT_PARTIAL = 10
EXIT_HARD_FAIL = 20

ACTIVE_STATUS = "DRIFT"
UNKNOWN_UID = -1
UNKNOWN_VERSION = 1

TAG_ATON_UID = "seamark:ref"
TAG_NAME = "seamark:name"
TAG_TYPE = "seamark:type"

RACON_NAMESPACE = "seamark:radar_transponder"
RACON_TYPE = "radar_transponder"
RACON_CATEGORY = "racon"
TAG_RACON_NUMBER = f"{RACON_NAMESPACE}:ref"
TAG_INT_RACON_NUMBER = f"{RACON_NAMESPACE}:int_ref"
TAG_RACON_CATEGORY = f"{RACON_NAMESPACE}:category"
TAG_RACON_WAVELENGTH = f"{RACON_NAMESPACE}:wavelength"
TAG_RACON_GROUP = f"{RACON_NAMESPACE}:group"
TAG_RACON_PERIOD = f"{RACON_NAMESPACE}:period"
TAG_RACON_SECTOR_START = f"{RACON_NAMESPACE}:sector_start"
TAG_RACON_SECTOR_END = f"{RACON_NAMESPACE}:sector_end"
TAG_RACON_ORIENTATION = f"{RACON_NAMESPACE}:orientation"

JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "source",
    "event",
    "status",
    "row_number",
    "identifier",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
