"""Internal constants shared across the library."""

BASE_URL = "https://webportal.jiit.ac.in:6011/StudentPortalAPI"

# ------------------------------------------------------------------
# Payload obfuscation
# ------------------------------------------------------------------

#: AES-CBC initialization vector.  The portal uses the same IV for every
#: message; it must be reproduced exactly for wire compatibility.
STATIC_IV: bytes = b"dcek9wb8frty1pnm"

KEY_PREFIX = "qa8y"
KEY_SUFFIX = "ty1pn"

#: AES-128 key size in bytes.
KEY_SIZE = 16

LOCAL_NAME_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

PRETOKEN_ENDPOINT = "/token/pretoken-check"
TOKEN_ENDPOINT = "/token/generate-token1"
PERSONAL_INFO_ENDPOINT = "/studentpersinfo/getstudent-personalinformation"
HOSTEL_INFO_ENDPOINT = "/myhostelallocationdetail/gethostelallocationdetail"

DEFAULT_CAPTCHA = {"captcha": "phw5n", "hidden": "gmBctEffdSg="}
DEFAULT_CLIENT_ID = "SOAU"
STUDENT_USER_TYPE = "S"
STUDENT_MODULE = "STUDENTMODULE"
