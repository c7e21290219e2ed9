"""
Constants for the Parcel Pro client library.
Endpoint paths and field names follow the Parcel Pro API documentation.
"""

# Production host
BASE_URL = "https://login.parcelpro.nl"

# Endpoints
ENDPOINT_VALIDATE_API_KEY = "/api/validate_apikey.php"
ENDPOINT_CREATE_ACCOUNT = "/api/create_account.php"
ENDPOINT_ACCOUNT_EXISTS = "/api/account_exists.php"
ENDPOINT_SHIPMENT_TYPES = "/api/type.php"
ENDPOINT_PICKUP_POINTS = "/api/uitreiklocatie.php"
ENDPOINT_SHIPMENT = "/api/zending.php"
ENDPOINT_SHIPMENTS = "/api/zendingen.php"
ENDPOINT_LABEL = "/api/label.php"
ENDPOINT_TRIGGERS = "/api/triggers.php"

# Authentication fields embedded in every signed request
FIELD_ACCOUNT_ID = "GebruikerId"
FIELD_TIMESTAMP = "Datum"
FIELD_SIGNATURE = "HmacSha256"

# Operation fields
FIELD_EMAIL = "Email"
FIELD_POSTCODE = "Postcode"
FIELD_SENDER_POSTCODE = "PostcodeAfzender"
FIELD_NUMBER = "Nummer"
FIELD_STREET = "Straat"
FIELD_SHIPMENT_ID = "ZendingId"
FIELD_PRINT_PDF = "PrintPdf"
FIELD_TRIGGER_STATUS = "Status"
FIELD_TRIGGER_URL = "Url"
FIELD_TRIGGER_DATA = "Data"

# Default trigger status ("printed")
DEFAULT_TRIGGER_STATUS = "afgedrukt"

# Second precision, local clock
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Sent with every API request
DEFAULT_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "close",
}

# Default configuration values
DEFAULT_CONFIG = {
    'base_url': BASE_URL,
    'timeout': None,  # seconds; None keeps the requests default
}

# Environment variables read by ParcelProClient.from_env()
ENV_ACCOUNT_ID = "PARCELPRO_ACCOUNT_ID"
ENV_API_KEY = "PARCELPRO_API_KEY"
ENV_BASE_URL = "PARCELPRO_BASE_URL"
