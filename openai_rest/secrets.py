"""Optional API key lookup in Google Cloud Secret Manager."""

from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger("openai-rest.secrets")

TRUTHY = ("true", "1", "yes")


def should_use_secret_manager() -> bool:
    """True when ``USE_SECRET_MANAGER`` is set to true/1/yes (any case)."""
    return os.environ.get("USE_SECRET_MANAGER", "").lower() in TRUTHY


def _resolve_project_id(project_id: Optional[str]) -> str:
    project_id = project_id or os.environ.get("GCP_PROJECT") or os.environ.get("GOOGLE_CLOUD_PROJECT")
    if not project_id:
        raise ValueError(
            "Project ID not specified. Set OPENAI_GCP_PROJECT_ID, GCP_PROJECT or GOOGLE_CLOUD_PROJECT."
        )
    return project_id


def get_secret_from_manager(secret_name: str, project_id: Optional[str] = None) -> str:
    """
    Read the latest version of a secret as text.

    Args:
        secret_name: Secret holding the API key (e.g., "openai-api-key")
        project_id: GCP project ID. Falls back to GCP_PROJECT / GOOGLE_CLOUD_PROJECT.

    Returns:
        The secret value with surrounding whitespace removed.

    Raises:
        ImportError: If google-cloud-secret-manager is not installed.
        Exception: Any error raised by the Secret Manager client.
    """
    try:
        from google.cloud import secretmanager
    except ImportError:
        logger.warning(
            "google-cloud-secret-manager not installed. "
            "Install it with: pip install 'openai-rest-client[secrets]'"
        )
        raise

    name = f"projects/{_resolve_project_id(project_id)}/secrets/{secret_name}/versions/latest"
    logger.info(f"Fetching secret from Secret Manager: {secret_name}")
    try:
        response = secretmanager.SecretManagerServiceClient().access_secret_version(request={"name": name})
    except Exception as e:
        logger.error(f"Failed to retrieve secret {secret_name}: {e}")
        raise

    return response.payload.data.decode("UTF-8").strip()
