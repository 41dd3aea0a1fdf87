"""Test configuration and fixtures."""

import logfire

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)
