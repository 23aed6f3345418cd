"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

SUBSYSTEM = "netconf"

# Legacy end-of-message framing (RFC 4742). Chunked framing is not supported.
DELIMITER = b"]]>]]>"

NAMESPACE = "urn:ietf:params:xml:ns:netconf:base:1.0"
BASE_CAPABILITY = "urn:ietf:params:netconf:base:1.0"

# Element names
HELLO = "hello"
CAPABILITIES = "capabilities"
CAPABILITY = "capability"
SESSION_ID = "session-id"
RPC = "rpc"
RPC_REPLY = "rpc-reply"
RPC_ERROR = "rpc-error"
OK = "ok"
DATA = "data"
MESSAGE_ID = "message-id"

# Operations
GET_CONFIG = "get-config"
CLOSE_SESSION = "close-session"

# Datastores
RUNNING = "running"
CANDIDATE = "candidate"
STARTUP = "startup"
