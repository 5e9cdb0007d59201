"""Custom exceptions for stepseq"""


class StepSeqError(Exception):
    """Base exception for all stepseq errors"""
    pass


class InvalidArgument(StepSeqError, TypeError):
    """Argument of the wrong type passed to a scheduler mutator"""
    pass
