"""Core chaining logic and its supporting types."""

from .chain import Maybe, maybe
from .config import ChainPolicy, Config, ConfigError, OutputConfig, load_config
from .document import DocumentError, load_document
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok
from .steps import CallStep, FieldStep, KeyStep, Step, StepError, apply_steps, parse_steps

__all__ = [
    # chain
    "Maybe",
    "maybe",
    # config
    "ChainPolicy",
    "Config",
    "ConfigError",
    "OutputConfig",
    "load_config",
    # document
    "DocumentError",
    "load_document",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # steps
    "CallStep",
    "FieldStep",
    "KeyStep",
    "Step",
    "StepError",
    "apply_steps",
    "parse_steps",
]
