"""Error types, error codes, descriptions and user-facing messages."""

# Error types
ERR = "error"
ERR_GENERAL = "error general"
ERR_DATA_NOT_FOUND = "Data not found"
ERR_DATA_ALREADY_EXIST = "error data already exist"
ERR_FORMATTING = "error formatting"
ERR_DATABASE = "error database"
ERR_ASYNC_KAFKA = "error async kafka"
ERR_TIMEOUT = "error timeout"
ERR_AUTH = "error authorization"
ERR_PANIC = "error panic"

# Messages for the ERR_DATABASE type
ERR_WHEN_BEGIN_TX = "error when begin transaction"
ERR_WHEN_EXECUTE_QUERY = "error when execute query"
ERR_WHEN_SCAN_RESULTS = "error when scan results"
ERR_WHEN_SELECT_DB = "error when select data from db"
ERR_WHEN_UPDATE_DB = "error when update data to db"
ERR_WHEN_DELETE_DB = "error when delete data from db"
ERR_WHEN_COMMIT_DB = "error when commit db"
ERR_ROLL_BACK = "error when rollback data from db"
ERR_DUPLICATE_DATA = "error when insert data - dup data"
ERR_ALREADY_EXIST_DATA = "error when insert data - already exist"
ERR_WHEN_CHECKING_BEFORE_DELETE_DATA_TKPU = "error when delete data tkpu - already exist"

# Application-level error codes
ERR_APPLICATION_SETUP = "ER5001"
ERR_SESSION_AND_AUTHENTICATION = "ER5002"
ERR_AUTHORIZATION = "ER5003"
ERR_DATABASE_CONNECTION = "ER5004"
ERR_HTTP_CONNECTION = "ER5005"
ERR_UNDEFINED = "ER9001"
ERR_APPLICATION_SETUP_DESCRIPTION = "error application setup"
ERR_SESSION_AND_AUTHENTICATION_DESCRIPTION = "error session or authentication"
ERR_AUTHORIZATION_DESCRIPTION = "error authorization"
ERR_DATABASE_CONNECTION_DESCRIPTION = "error database connection"
ERR_HTTP_CONNECTION_DESCRIPTION = "error http connection"
ERR_UNDEFINED_DESCRIPTION = "error undefined"

# HTTP error codes
ERR_BAD_REQUEST = "ER1001"
ERR_UNAUTHORIZED = "ER1002"
ERR_PAYMENT_REQUIRED = "ER1003"
ERR_FORBIDDEN = "ER1004"
ERR_NOT_FOUND = "ER1005"
ERR_METHOD_NOT_ALLOWED = "ER1006"
ERR_NOT_ACCEPTABLE = "ER1007"
ERR_PROXY_AUTHENTICATION_REQUIRED = "ER1008"
ERR_REQUEST_TIMEOUT = "ER1009"
ERR_CONFLICT = "ER1010"
ERR_GONE = "ER1011"
ERR_LENGTH_REQUIRED = "ER1012"
ERR_PRECONDITION_FAILED = "ER1013"
ERR_PAYLOAD_TOO_LARGE = "ER1014"
ERR_URI_TOO_LONG = "ER1015"
ERR_UNSUPPORTED_MEDIA_TYPE = "ER1016"
ERR_RANGE_NOT_SATISFIABLE = "ER1017"
ERR_EXPECTATION_FAILED = "ER1018"
ERR_IM_A_TEAPOT = "ER1019"
ERR_MISDIRECTED_REQUEST = "ER1020"
ERR_UNPROCESSABLE_ENTITY = "ER1021"
ERR_LOCKED = "ER1022"
ERR_FAILED_DEPENDENCY = "ER1023"
ERR_TOO_EARLY = "ER1024"
ERR_UPGRADE_REQUIRED = "ER1025"
ERR_PRECONDITION_REQUIRED = "ER1026"
ERR_TOO_MANY_REQUESTS = "ER1027"
ERR_REQUEST_HEADER_FIELDS_TOO_LARGE = "ER1028"
ERR_UNAVAILABLE_FOR_LEGAL_REASONS = "ER1029"
ERR_INTERNAL_SERVER_ERROR = "ER1030"
ERR_NOT_IMPLEMENTED = "ER1031"
ERR_BAD_GATEWAY = "ER1032"
ERR_SERVICE_UNAVAILABLE = "ER1033"
ERR_GATEWAY_TIMEOUT = "ER1034"
ERR_HTTP_VERSION_NOT_SUPPORTED = "ER1035"
ERR_VARIANT_ALSO_NEGOTIATES = "ER1036"
ERR_INSUFFICIENT_STORAGE = "ER1037"
ERR_LOOP_DETECTED = "ER1038"
ERR_NOT_EXTENDED = "ER1039"
ERR_NETWORK_AUTHENTICATION_REQUIRED = "ER1040"

# HTTP error descriptions
ERR_BAD_REQUEST_DESCRIPTION = "400 Bad Request"
ERR_UNAUTHORIZED_DESCRIPTION = "401 Unauthorized (RFC 7235)"
ERR_PAYMENT_REQUIRED_DESCRIPTION = "402 Payment Required"
ERR_FORBIDDEN_DESCRIPTION = "403 Forbidden"
ERR_NOT_FOUND_DESCRIPTION = "404 Not Found"
ERR_METHOD_NOT_ALLOWED_DESCRIPTION = "405 Method Not Allowed"
ERR_NOT_ACCEPTABLE_DESCRIPTION = "406 Not Acceptable"
ERR_PROXY_AUTHENTICATION_REQUIRED_DESCRIPTION = "407 Proxy Authentication Required (RFC 7235)"
ERR_REQUEST_TIMEOUT_DESCRIPTION = "408 Request Timeout"
ERR_CONFLICT_DESCRIPTION = "409 Conflict"
ERR_GONE_DESCRIPTION = "410 Gone"
ERR_LENGTH_REQUIRED_DESCRIPTION = "411 Length Required"
ERR_PRECONDITION_FAILED_DESCRIPTION = "412 Precondition Failed (RFC 7232)"
ERR_PAYLOAD_TOO_LARGE_DESCRIPTION = "413 Payload Too Large (RFC 7231)"
ERR_URI_TOO_LONG_DESCRIPTION = "414 URI Too Long (RFC 7231)"
ERR_UNSUPPORTED_MEDIA_TYPE_DESCRIPTION = "415 Unsupported Media Type (RFC 7231)"
ERR_RANGE_NOT_SATISFIABLE_DESCRIPTION = "416 Range Not Satisfiable (RFC 7233)"
ERR_EXPECTATION_FAILED_DESCRIPTION = "417 Expectation Failed"
ERR_IM_A_TEAPOT_DESCRIPTION = "418 I'm a teapot (RFC 2324, RFC 7168)"
ERR_MISDIRECTED_REQUEST_DESCRIPTION = "421 Misdirected Request (RFC 7540)"
ERR_UNPROCESSABLE_ENTITY_DESCRIPTION = "422 Unprocessable Entity (WebDAV; RFC 4918)"
ERR_LOCKED_DESCRIPTION = "423 Locked (WebDAV; RFC 4918)"
ERR_FAILED_DEPENDENCY_DESCRIPTION = "424 Failed Dependency (WebDAV; RFC 4918)"
ERR_TOO_EARLY_DESCRIPTION = "425 Too Early (RFC 8470)"
ERR_UPGRADE_REQUIRED_DESCRIPTION = "426 Upgrade Required"
ERR_PRECONDITION_REQUIRED_DESCRIPTION = "428 Precondition Required (RFC 6585)"
ERR_TOO_MANY_REQUESTS_DESCRIPTION = "429 Too Many Requests (RFC 6585)"
ERR_REQUEST_HEADER_FIELDS_TOO_LARGE_DESCRIPTION = "431 Request Header Fields Too Large (RFC 6585)"
ERR_UNAVAILABLE_FOR_LEGAL_REASONS_DESCRIPTION = "451 Unavailable For Legal Reasons (RFC 7725)"
ERR_INTERNAL_SERVER_ERROR_DESCRIPTION = "500 Internal Server Error"
ERR_NOT_IMPLEMENTED_DESCRIPTION = "501 Not Implemented"
ERR_BAD_GATEWAY_DESCRIPTION = "502 Bad Gateway"
ERR_SERVICE_UNAVAILABLE_DESCRIPTION = "503 Service Unavailable"
ERR_GATEWAY_TIMEOUT_DESCRIPTION = "504 Gateway Timeout"
ERR_HTTP_VERSION_NOT_SUPPORTED_DESCRIPTION = "505 HTTP Version Not Supported"
ERR_VARIANT_ALSO_NEGOTIATES_DESCRIPTION = "506 Variant Also Negotiates (RFC 2295)"
ERR_INSUFFICIENT_STORAGE_DESCRIPTION = "507 Insufficient Storage (WebDAV; RFC 4918)"
ERR_LOOP_DETECTED_DESCRIPTION = "508 Loop Detected (WebDAV; RFC 5842)"
ERR_NOT_EXTENDED_DESCRIPTION = "510 Not Extended (RFC 2774)"
ERR_NETWORK_AUTHENTICATION_REQUIRED_DESCRIPTION = "511 Network Authentication Required (RFC 6585)"

_SERVER = "Kendala pada Server Aplikasi, Silakan hubungi administrator"
_AUTH = "Kendala pada Proses Otorisasi, Silakan coba login kembali"
_ACCESS = "Kendala pada akses, Silakan coba beberapa saat lagi"
_MEDIA = "Tipe File/Media tidak sesuai, Periksa kembali input Anda"

# User-facing HTTP error messages
ERR_BAD_REQUEST_MESSAGE = f"{_SERVER} [ER2001]"
ERR_UNAUTHORIZED_MESSAGE = f"{_AUTH} [ER2002]"
ERR_PAYMENT_REQUIRED_MESSAGE = f"{_SERVER} [ER2003]"
ERR_FORBIDDEN_MESSAGE = f"{_AUTH} [ER2004]"
ERR_NOT_FOUND_MESSAGE = f"{_SERVER} [ER2005]"
ERR_METHOD_NOT_ALLOWED_MESSAGE = f"{_SERVER} [ER2006]"
ERR_NOT_ACCEPTABLE_MESSAGE = f"{_SERVER} [ER2007]"
ERR_PROXY_AUTHENTICATION_REQUIRED_MESSAGE = f"{_ACCESS} [ER2008]"
ERR_REQUEST_TIMEOUT_MESSAGE = f"{_ACCESS} [ER2009]"
ERR_CONFLICT_MESSAGE = f"{_SERVER} [ER2010]"
ERR_GONE_MESSAGE = f"{_SERVER} [ER2011]"
ERR_LENGTH_REQUIRED_MESSAGE = f"{_SERVER} [ER2012]"
ERR_PRECONDITION_FAILED_MESSAGE = f"{_SERVER} [ER2013]"
ERR_PAYLOAD_TOO_LARGE_MESSAGE = f"{_SERVER} [ER2014]"
ERR_URI_TOO_LONG_MESSAGE = f"{_SERVER} [ER2015]"
ERR_UNSUPPORTED_MEDIA_TYPE_MESSAGE = f"{_MEDIA} [ER2016]"
ERR_RANGE_NOT_SATISFIABLE_MESSAGE = f"{_SERVER} [ER2017]"
ERR_EXPECTATION_FAILED_MESSAGE = f"{_SERVER} [ER2018]"
ERR_IM_A_TEAPOT_MESSAGE = f"{_SERVER} [ER2019]"
ERR_MISDIRECTED_REQUEST_MESSAGE = f"{_SERVER} [ER2020]"
ERR_UNPROCESSABLE_ENTITY_MESSAGE = f"{_SERVER} [ER2021]"
ERR_LOCKED_MESSAGE = f"{_SERVER} [ER2022]"
ERR_FAILED_DEPENDENCY_MESSAGE = f"{_SERVER} [ER2023]"
ERR_TOO_EARLY_MESSAGE = f"{_SERVER} [ER2024]"
ERR_UPGRADE_REQUIRED_MESSAGE = f"{_SERVER} [ER2025]"
ERR_PRECONDITION_REQUIRED_MESSAGE = f"{_SERVER} [ER2026]"
ERR_TOO_MANY_REQUESTS_MESSAGE = f"{_SERVER} [ER2027]"
ERR_REQUEST_HEADER_FIELDS_TOO_LARGE_MESSAGE = f"{_SERVER} [ER2028]"
ERR_UNAVAILABLE_FOR_LEGAL_REASONS_MESSAGE = f"{_SERVER} [ER2029]"
ERR_INTERNAL_SERVER_ERROR_MESSAGE = f"{_SERVER} [ER2030]"
ERR_NOT_IMPLEMENTED_MESSAGE = f"{_SERVER} [ER2031]"
ERR_BAD_GATEWAY_MESSAGE = f"{_ACCESS} [ER2032]"
ERR_SERVICE_UNAVAILABLE_MESSAGE = f"{_ACCESS} [ER2033]"
ERR_GATEWAY_TIMEOUT_MESSAGE = f"{_ACCESS} [ER2034]"
ERR_HTTP_VERSION_NOT_SUPPORTED_MESSAGE = f"{_SERVER} [ER2035]"
ERR_VARIANT_ALSO_NEGOTIATES_MESSAGE = f"{_SERVER} [ER2036]"
ERR_INSUFFICIENT_STORAGE_MESSAGE = f"{_SERVER} [ER2037]"
ERR_LOOP_DETECTED_MESSAGE = f"{_SERVER} [ER2038]"
ERR_NOT_EXTENDED_MESSAGE = f"{_SERVER} [ER2039]"
ERR_NETWORK_AUTHENTICATION_REQUIRED_MESSAGE = f"{_ACCESS} [ER2040]"

# Informational messages
INFO_DATA_JABATAN_NOT_FOUND = "Data jabatan tidak ditemukan pada user terkait"
INFO_DATA_PRIVILEGE_NOT_FOUND = "Data privilege tidak ditemukan pada user terkait"
INFO_DATA_LIST_PRIVILEGE_NOT_FOUND = "Data privilege tidak ditemukan"
INFO_DATA_APLIKASI_NOT_FOUND = "Data aplikasi tidak ditemukan pada user terkait"

# gRPC errors
ERR_GRPC = "error grpc"
ERR_GRPC_UNAVAILABLE = "service '%s' is unavailable"