"""Custom exception hierarchy for the sector analyzer library."""


class SectorAnalyzerError(Exception):
    """Base exception for all sector analyzer errors."""


class ConfigurationError(SectorAnalyzerError, ValueError):
    """Invalid configuration parameters or scoring weights."""


class DataError(SectorAnalyzerError, ValueError):
    """Malformed input data: missing columns or misaligned arrays."""
