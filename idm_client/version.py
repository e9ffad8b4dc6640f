"""Client identification sent with the telemetry header."""

CLIENT_NAME = "idm-client-python"
__version__ = "1.0.0"
