class AnalysisError(Exception):
    """Base class for every error raised by the sales analyzer."""


class ValidationError(AnalysisError, ValueError):
    """
    The dataset is structurally malformed: missing, not a mapping, a required
    collection is missing, not a sequence or empty, or a record does not match
    its schema. The message names the offending field.
    """


class ConfigurationError(AnalysisError, TypeError):
    """The options object is missing or lacks a callable strategy."""
