"""Constants for purlinfo."""

# Exit codes
EXIT_SUCCESS = 0  # Package info printed
EXIT_INVALID_ARGS = 1  # Bad command line or configuration
EXIT_INVALID_PURL = 2  # purl could not be parsed
EXIT_RUNTIME_ERROR = 3  # Lookup or output failed

# Default HTTP request timeout in seconds
DEFAULT_TIMEOUT_SECONDS = 30.0

# ecosyste.ms packages API, see https://packages.ecosyste.ms/docs/index.html
ECOSYSTEMS_BASE_URL = "https://packages.ecosyste.ms"
ECOSYSTEMS_LOOKUP_PATH = "/api/v1/packages/lookup"

TOOL_NAME = "purlinfo"
