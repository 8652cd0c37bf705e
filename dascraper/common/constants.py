"""Application constants."""

USER_AGENT = "playford-da-scraper/1.0 (+open data; contact: configured-email)"

DEFAULT_CATALOG_URL = "https://data.sa.gov.au/data/dataset/development-application-register"
DEFAULT_LINK_SELECTOR = "a.resource-url-analytics"
DEFAULT_COMMENT_URL = "mailto:Playford@playford.sa.gov.au"

NO_DESCRIPTION = "No description provided"
ABSENT_INDEX = -1

# Header names recognised in the published register CSVs.
APPLICATION_NUMBER_HEADER = "ApplicationNumber"
RECEIVED_DATE_HEADER = "LodgementDate"
DESCRIPTION_HEADER = "ApplicationDesc"
ADDRESS_PART_1_HEADER = "PropertyAddress"
ADDRESS_PART_2_HEADER = "PropertySuburbPostCode"

UPSERT_INSERT_IF_ABSENT = "insert_if_absent"
UPSERT_REPLACE = "replace"
UPSERT_POLICIES = (UPSERT_INSERT_IF_ABSENT, UPSERT_REPLACE)

EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "source",
    "event",
    "status",
    "application_number",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
