"""Constants for unreal-mcp."""

from dotenv import load_dotenv

# Load .env file before settings read the environment
load_dotenv()

# Application Info
APP_NAME = "unreal-mcp"
APP_VERSION = "0.3.0"
SERVER_NAME = "unreal-engine"

# Remote Control defaults
DEFAULT_UE_HOST = "127.0.0.1"
DEFAULT_UE_PORT = 30010
DEFAULT_SSH_USER = "unreal"
DEFAULT_SSH_PORT = 22

# Remote Control routes
ROUTE_PROPERTY = "/remote/object/property"
ROUTE_CALL = "/remote/object/call"
ROUTE_DESCRIBE = "/remote/object/describe"
ROUTE_SEARCH_ASSETS = "/remote/search/assets"
ROUTE_BATCH = "/remote/batch"
ROUTE_INFO = "/remote/info"

# Engine entry points
PYTHON_LIBRARY_PATH = "/Script/PythonScriptPlugin.Default__PythonScriptLibrary"
PYTHON_COMMAND_FUNCTION = "ExecutePythonCommand"
SYSTEM_LIBRARY_PATH = "/Script/Engine.Default__KismetSystemLibrary"
CONSOLE_COMMAND_FUNCTION = "ExecuteConsoleCommand"

# Property access modes
READ_ACCESS = "READ_ACCESS"
WRITE_TRANSACTION_ACCESS = "WRITE_TRANSACTION_ACCESS"

# Capture protocol
DEFAULT_CAPTURE_DIR = "C:/tmp"
RESULT_FILE_PREFIX = "unreal_mcp_"
NO_OUTPUT = "(no output)"
RETRIEVAL_SSH = "ssh"
RETRIEVAL_LOCAL = "local"
RETRIEVAL_MODES = (RETRIEVAL_SSH, RETRIEVAL_LOCAL)
REMOTE_OS_WINDOWS = "windows"
REMOTE_OS_POSIX = "posix"
REMOTE_OS_CHOICES = (REMOTE_OS_WINDOWS, REMOTE_OS_POSIX)

# Default Timeouts (in seconds)
DEFAULT_SETTLE_DELAY = 0.2
DEFAULT_POLL_INTERVAL = 0.2
DEFAULT_CAPTURE_TIMEOUT = 10.0
DEFAULT_SSH_CONNECT_TIMEOUT = 3
DEFAULT_SSH_TIMEOUT = 10.0
DEFAULT_HTTP_TIMEOUT = 60.0
DEFAULT_TOOL_TIMEOUT = 120.0

# Tool Categories
TOOL_CATEGORY_OBJECT = "object"
TOOL_CATEGORY_ASSETS = "assets"
TOOL_CATEGORY_EXECUTION = "execution"
TOOL_CATEGORY_INFO = "info"

# Batch payloads are echoed back this far in error messages
MAX_INPUT_ECHO = 200
