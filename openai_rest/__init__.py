"""Client for the OpenAI REST API returning tagged success/failure results."""

import logging

from .api import (
    OpenAI,
    answers,
    classifications,
    completions,
    engines,
    files,
    files_content,
    files_delete,
    finetunes,
    finetuning_results,
    images_variations,
    search,
)
from .client import Client
from .config import Settings, get_settings
from .errors import MissingFieldError, OpenAIError, ResultError
from .result import APIObject, DecodeFailure, Failure, Result, Success, TransportFailure

logging.getLogger("openai-rest").addHandler(logging.NullHandler())

__all__ = [
    "APIObject",
    "Client",
    "DecodeFailure",
    "Failure",
    "MissingFieldError",
    "OpenAI",
    "OpenAIError",
    "Result",
    "ResultError",
    "Settings",
    "Success",
    "TransportFailure",
    "answers",
    "classifications",
    "completions",
    "engines",
    "files",
    "files_content",
    "files_delete",
    "finetunes",
    "finetuning_results",
    "get_settings",
    "images_variations",
    "search",
]
