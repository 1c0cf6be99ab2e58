"""Tags and fixed values of the PIX BR Code (BCB profile of EMV QRCPS-MPM)."""

from decimal import Decimal

# Top-level tags, in emission order
TAG_PAYLOAD_FORMAT = "00"
TAG_MERCHANT_ACCOUNT = "26"
TAG_MERCHANT_CATEGORY = "52"
TAG_CURRENCY = "53"
TAG_AMOUNT = "54"
TAG_COUNTRY = "58"
TAG_MERCHANT_NAME = "59"
TAG_MERCHANT_CITY = "60"
TAG_ADDITIONAL_DATA = "62"
TAG_CRC = "63"

# Merchant account information (tag 26) sub-fields
TAG_MAI_GUI = "00"
TAG_MAI_KEY = "01"
TAG_MAI_DESCRIPTION = "02"

# Additional data field template (tag 62) sub-fields
TAG_ADF_TXID = "05"

PAYLOAD_FORMAT_INDICATOR = "01"
PIX_GUI = "br.gov.bcb.pix"
MERCHANT_CATEGORY_CODE = "0000"
CURRENCY_BRL = "986"
COUNTRY_CODE = "BR"
TXID_PLACEHOLDER = "***"

MAX_FIELD_LENGTH = 99
MAX_MERCHANT_NAME_LENGTH = 25
MAX_MERCHANT_CITY_LENGTH = 15
MAX_TXID_LENGTH = 25

# Largest amount accepted for tag 54 (13 characters once formatted)
MAX_AMOUNT = Decimal("9999999999.99")

# Tag + length prefix of the trailing CRC field; the CRC covers it.
CRC_PREFIX = TAG_CRC + "04"
