"""All magic values live here — no inline literals anywhere else."""

# Rate limiting
RATE_LIMIT_INTERVAL_MS = 10_000
# Entries idle for longer than this many cooldowns are swept.
RATE_LIMIT_EVICTION_FACTOR = 6
LOOPBACK_CLIENT_ID = "127.0.0.1"

# AssemblyAI
ASSEMBLYAI_BASE_URL = "https://api.assemblyai.com"
ASSEMBLYAI_UPLOAD_PATH = "/v2/upload"
ASSEMBLYAI_TRANSCRIPT_PATH = "/v2/transcript"
ASSEMBLYAI_TIMEOUT: float = 30.0
UPLOAD_CONTENT_TYPE = "application/octet-stream"

# Polling
POLL_INTERVAL_SECONDS: float = 3.0
POLL_MAX_ATTEMPTS = 100

# Mock scoring
MOCK_MIN_DELAY_SECONDS: float = 0.5
MOCK_MAX_DELAY_SECONDS: float = 1.5
TRANSCRIPT_PREVIEW_CHARS = 100
MOCK_OVERALL_FEEDBACK = (
    'This feedback is based on the transcribed text: "%s...". '
    "The agent communicated clearly and empathetically, effectively addressing "
    "the customer's initial concerns. However, there was a slight delay in "
    "confirming the customer's identity at the beginning of the call. Further "
    "training on efficient data verification processes would be beneficial. "
    "The closing was professional and clear."
)
MOCK_OBSERVATION = (
    'This observation is based on the transcribed text: "%s...". '
    "Customer mentioned difficulty understanding initial instructions. "
    "Agent calmly re-explained. No discernible background noise. "
    "Call duration: Mock 4:30."
)

# HTTP surface
APP_TITLE = "Call QA Analyzer"
APP_VERSION = "0.1.0"
ROUTE_ANALYZE_CALL = "/api/analyze-call"
ROUTE_PARAMETERS = "/api/parameters"
ROUTE_HEALTH = "/health"
DEFAULT_CORS_ORIGINS = "http://localhost:3000"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000

# Client-facing error messages
MSG_ERR_NO_AUDIO = "No audio file provided."
MSG_ERR_NO_API_KEY = "AssemblyAI API key not configured."
MSG_ERR_RATE_LIMITED = "Too many requests. Please wait a moment and try again."
MSG_ERR_UPLOAD = "Failed to upload audio to AssemblyAI."
MSG_ERR_TRANSCRIBE_REQUEST = "Failed to transcribe audio with AssemblyAI."
MSG_ERR_POLL = "Failed to poll transcription status."
MSG_ERR_TRANSCRIPTION_FAILED = "AssemblyAI transcription failed."
MSG_ERR_TRANSCRIPT_EMPTY = "Transcription failed or empty."
MSG_ERR_TRANSCRIPTION_TIMEOUT = "Transcription did not complete in time."
MSG_ERR_PROVIDER_UNREACHABLE = "Could not reach AssemblyAI."
MSG_ERR_INTERNAL = "Internal Server Error"

# Log messages
MSG_SERVER_STARTING = "Starting Call QA Analyzer on %s:%d"
MSG_NO_API_KEY_WARNING = "ASSEMBLYAI_API_KEY is not set — analysis requests will fail"
MSG_RATE_LIMIT_HIT = "Rate limit hit for client: %s"
MSG_RATE_LIMIT_SWEPT = "Swept %d idle rate-limit entries"
MSG_RECEIVED_FILE = "Received file: %s (%s, %d bytes)"
MSG_UPLOAD_OK = "Uploaded %d bytes → %s"
MSG_JOB_CREATED = "Transcription job %s created (%s)"
MSG_JOB_STATUS = "Transcription job %s: %s (attempt %d/%d)"
MSG_PROVIDER_ERROR = "AssemblyAI %s error (%s): %s"
MSG_TRANSPORT_ERROR = "AssemblyAI %s transport error: %s"
MSG_TRANSCRIBED = "Transcribed text (%d chars): %s"
MSG_DEFAULT_INPUT_TYPE = "Parameter %s has no input type — scoring as %s"
MSG_SCORED = "Scored %d parameters"
MSG_REQUEST_FAILED = "Analysis failed (%d): %s"
MSG_UNEXPECTED_ERROR = "Unexpected error while analyzing call"
