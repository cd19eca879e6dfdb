"""Function surface of the library: one call per remote endpoint."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from .client import Client
from .config import Settings
from .errors import MissingFieldError
from .resources import Answers, Classifications, Completions, Engines, Files, Finetunes, Images, Search
from .result import Result, require_field

logger = logging.getLogger("openai-rest.api")


def _merge_params(params: Optional[Mapping[str, Any]], fields: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(params or {})
    merged.update(fields)
    return merged


class OpenAI:
    """
    Typed wrappers around the OpenAI REST API.

    Every method returns ``Success`` or ``Failure`` except ``files_content``
    and ``finetuning_results``, which chain several calls and raise when a
    step fails.

    Args:
        settings: Fixed configuration. When omitted, configuration is read
            from the environment on every call.
        http_client: ``httpx.Client`` to send requests through.
    """

    def __init__(self, settings: Optional[Settings] = None, http_client: Optional[httpx.Client] = None):
        self.client = Client(settings=settings, http_client=http_client)

    def answers(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        http_options: Optional[Mapping[str, Any]] = None,
        **fields: Any,
    ) -> Result:
        """
        Answer a question using the provided documents and examples.

        Example:
            api.answers(
                model="curie",
                documents=["Puppy A is happy.", "Puppy B is sad."],
                question="which puppy is happy?",
                search_model="ada",
                examples_context="In 2017, U.S. life expectancy was 78.6 years.",
                examples=[["What is human life expectancy in the United States?", "78 years."]],
                max_tokens=5,
            )
        """
        return Answers.fetch(self.client, _merge_params(params, fields), http_options)

    def engines(self, engine_id: Optional[str] = None, *, http_options: Optional[Mapping[str, Any]] = None) -> Result:
        """List available engines, or retrieve a single engine by id."""
        return Engines.fetch(self.client, engine_id, http_options)

    def completions(
        self,
        engine_id: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        http_options: Optional[Mapping[str, Any]] = None,
        **fields: Any,
    ) -> Result:
        """
        Return one or more predicted completions for a prompt.

        Example:
            api.completions("davinci", prompt="once upon a time", max_tokens=5, temperature=1)
        """
        return Completions.fetch(self.client, engine_id, _merge_params(params, fields), http_options)

    def search(
        self,
        engine_id: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        http_options: Optional[Mapping[str, Any]] = None,
        **fields: Any,
    ) -> Result:
        """Rank documents by semantic similarity to a query."""
        return Search.fetch(self.client, engine_id, _merge_params(params, fields), http_options)

    def classifications(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        http_options: Optional[Mapping[str, Any]] = None,
        **fields: Any,
    ) -> Result:
        """Predict the most likely label for a query given labeled examples."""
        return Classifications.fetch(self.client, _merge_params(params, fields), http_options)

    def finetunes(self, finetune_id: Optional[str] = None, *, http_options: Optional[Mapping[str, Any]] = None) -> Result:
        """List fine-tune jobs, or retrieve one job by id."""
        return Finetunes.fetch(self.client, finetune_id, http_options)

    def files(self, file_id: Optional[str] = None, *, http_options: Optional[Mapping[str, Any]] = None) -> Result:
        return Files.fetch(self.client, file_id, http_options)

    def files_delete(self, file_id: str, *, http_options: Optional[Mapping[str, Any]] = None) -> Result:
        return Files.delete(self.client, file_id, http_options)

    def files_content(self, file_id: str, *, http_options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Return only the last line of a file's content.

        Raises:
            ResultError: If the content could not be fetched.
        """
        content = Files.fetch_content(self.client, file_id, http_options).unwrap()
        return content.split("\n")[-1]

    def finetuning_results(self, finetune_id: str, *, http_options: Optional[Mapping[str, Any]] = None) -> List[str]:
        """
        Fetch the results file of a fine-tune job and split it on commas.

        Takes two round-trips: the job record, then the content of its
        first result file.

        Raises:
            ResultError: If any of the lookups failed.
            MissingFieldError: If the job has no result files yet, or the
                first entry has no ``id``.
        """
        job = self.finetunes(finetune_id, http_options=http_options).unwrap()
        result_files = require_field(job, "result_files")
        if not isinstance(result_files, list) or len(result_files) == 0:
            raise MissingFieldError("result_files", detail=job)
        file_id = require_field(result_files[0], "id")
        logger.debug(f"Fetching results file {file_id} for fine-tune {finetune_id}")
        return self.files_content(file_id, http_options=http_options).split(",")

    def images_variations(
        self,
        file_path: Union[str, os.PathLike],
        params: Optional[Mapping[str, Any]] = None,
        *,
        http_options: Optional[Mapping[str, Any]] = None,
        **fields: Any,
    ) -> Result:
        """Upload an image and request variations of it."""
        return Images.variations(self.client, file_path, _merge_params(params, fields), http_options)


def answers(params: Optional[Mapping[str, Any]] = None, **fields: Any) -> Result:
    return OpenAI().answers(params, **fields)


def engines(engine_id: Optional[str] = None, **options: Any) -> Result:
    return OpenAI().engines(engine_id, **options)


def completions(engine_id: str, params: Optional[Mapping[str, Any]] = None, **fields: Any) -> Result:
    return OpenAI().completions(engine_id, params, **fields)


def search(engine_id: str, params: Optional[Mapping[str, Any]] = None, **fields: Any) -> Result:
    return OpenAI().search(engine_id, params, **fields)


def classifications(params: Optional[Mapping[str, Any]] = None, **fields: Any) -> Result:
    return OpenAI().classifications(params, **fields)


def finetunes(finetune_id: Optional[str] = None, **options: Any) -> Result:
    return OpenAI().finetunes(finetune_id, **options)


def files(file_id: Optional[str] = None, **options: Any) -> Result:
    return OpenAI().files(file_id, **options)


def files_delete(file_id: str, **options: Any) -> Result:
    return OpenAI().files_delete(file_id, **options)


def files_content(file_id: str, **options: Any) -> str:
    return OpenAI().files_content(file_id, **options)


def finetuning_results(finetune_id: str, **options: Any) -> List[str]:
    return OpenAI().finetuning_results(finetune_id, **options)


def images_variations(file_path: Union[str, os.PathLike], params: Optional[Mapping[str, Any]] = None, **fields: Any) -> Result:
    return OpenAI().images_variations(file_path, params, **fields)
