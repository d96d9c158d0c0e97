"""Test configuration and fixtures."""

import logfire

# Keep Logfire local and quiet; app modules log at import time
logfire.configure(send_to_logfire=False, console=False)
